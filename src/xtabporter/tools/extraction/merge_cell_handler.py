"""Tool for expanding merged cells into a dense, immutable grid."""

from collections.abc import Iterable, Sequence

from ...models.sheet_data import CellRange, Grid, SheetData


def normalize_grid(sheet: SheetData) -> Grid:
    """
    Convert a worksheet into a dense rectangular grid of cell text.

    Every cell covered by a merged range carries the anchor value, so row and
    column classification downstream never has to special-case merges.

    Args:
        sheet: Sheet to normalize

    Returns:
        Grid anchored at A1
    """
    return expand_merges(sheet.rows, sheet.merged_ranges)


def expand_merges(rows: Sequence[Sequence[str]], merges: Iterable[CellRange]) -> Grid:
    """
    Build a new grid from ``rows`` with merged ranges filled in.

    The anchor (top-left) value is copied into covered cells that are empty or
    missing; a non-empty covered cell is never overwritten. Neither argument
    is modified.

    Args:
        rows: Source cell text, possibly ragged
        merges: Merged-cell ranges

    Returns:
        Rectangular grid whose width covers the widest row and every merge
    """
    merges = list(merges)
    height = max([len(rows)] + [m.end_row + 1 for m in merges])
    width = max([len(row) for row in rows] + [m.end_col + 1 for m in merges], default=0)

    out = [
        [row[c] if c < len(row) else "" for c in range(width)]
        for row in (list(rows) + [[]] * (height - len(rows)))
    ]

    for merge in merges:
        anchor = out[merge.start_row][merge.start_col]
        for r in range(merge.start_row, merge.end_row + 1):
            for c in range(merge.start_col, merge.end_col + 1):
                if out[r][c] == "":
                    out[r][c] = anchor

    return tuple(tuple(row) for row in out)
