"""Excel addressing helpers."""

import re

_CELL_REF = re.compile(r"^\$?([A-Z]+)\$?(\d+)$")


def col_index_to_letters(col: int) -> str:
    """Convert a 0-based column index to Excel letters (0 -> A, 26 -> AA)."""
    if col < 0:
        raise ValueError(f"Column index must be non-negative: {col}")

    result = ""
    while col >= 0:
        result = chr(col % 26 + ord("A")) + result
        col = col // 26 - 1
    return result


def letters_to_col_index(letters: str) -> int:
    """Convert Excel column letters to a 0-based index (A -> 0, AA -> 26)."""
    if not letters or not letters.isalpha():
        raise ValueError(f"Invalid column letters: {letters!r}")

    col = 0
    for char in letters.upper():
        col = col * 26 + (ord(char) - ord("A") + 1)
    return col - 1


def parse_cell_reference(cell_ref: str) -> tuple[int, int]:
    """Parse Excel cell reference to 0-based (row, col) indices."""
    match = _CELL_REF.match(cell_ref.strip().upper())
    if not match:
        raise ValueError(f"Invalid cell reference: {cell_ref}")

    col_str, row_str = match.groups()
    return int(row_str) - 1, letters_to_col_index(col_str)


def parse_range_reference(range_ref: str) -> tuple[int, int, int, int]:
    """Parse a range like 'B5:D5' to (start_row, start_col, end_row, end_col).

    A single cell reference is treated as a one-cell range.
    """
    if ":" in range_ref:
        start_cell, end_cell = range_ref.split(":", 1)
    else:
        start_cell = end_cell = range_ref

    start_row, start_col = parse_cell_reference(start_cell)
    end_row, end_col = parse_cell_reference(end_cell)
    return start_row, start_col, end_row, end_col
