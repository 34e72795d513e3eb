"""Row-role classifiers.

Each classifier is an independent predicate over a trimmed label (or a row of
cell text). The mapping inference engine and the table locator compose them.
"""

import re
from collections.abc import Sequence

from ..core.constants import INFERENCE, KEYWORDS

DEFAULT_TITLE_PATTERN = re.compile(KEYWORDS.DEFAULT_TITLE_REGEX, re.IGNORECASE)

_BY_TITLE = re.compile(r"\sby\s", re.IGNORECASE)
_QUESTION_TOKEN = re.compile(r"\(Q[0-9A-Z]+\)", re.IGNORECASE)
_QUESTION_PREFIX = re.compile(r"^Q\d+[A-Z]?(?:[_\s]|$)", re.IGNORECASE)
_HEADER_PREFIX = re.compile(r"^header[:\s]", re.IGNORECASE)
_BASE_PREFIX = re.compile(r"^base[:：\s]", re.IGNORECASE)
_SAMPLE_SIZE_PREFIX = re.compile(r"^n\s*=", re.IGNORECASE)


def compile_title_pattern(regex: str | None) -> re.Pattern[str]:
    """Compile a table-title regex, falling back to the default when malformed."""
    if not regex:
        return DEFAULT_TITLE_PATTERN
    try:
        return re.compile(regex, re.IGNORECASE)
    except re.error:
        return DEFAULT_TITLE_PATTERN


def is_table_title(text: str, pattern: re.Pattern[str] = DEFAULT_TITLE_PATTERN) -> bool:
    t = text.strip()
    return bool(t) and pattern.search(t) is not None


def is_by_title(text: str) -> bool:
    """Title written as survey text, e.g. 'Q4a satisfaction by BANNER1'."""
    return _BY_TITLE.search(text.strip()) is not None


def is_question_row(text: str) -> bool:
    t = text.strip()
    if not t:
        return False
    return bool(
        _BY_TITLE.search(t) or _QUESTION_TOKEN.search(t) or _QUESTION_PREFIX.match(t)
    )


def is_header_row(text: str) -> bool:
    return _HEADER_PREFIX.match(text.strip()) is not None


def is_base_row(text: str) -> bool:
    t = text.strip()
    return bool(_BASE_PREFIX.match(t) or _SAMPLE_SIZE_PREFIX.match(t))


def count_non_empty(row: Sequence[str], first: int, last: int) -> int:
    """Count non-empty cells in columns ``first..last`` (inclusive)."""
    return sum(1 for c in range(first, min(last, len(row) - 1) + 1) if row[c].strip())


def first_non_empty(row: Sequence[str], first: int, last: int) -> int | None:
    """Column of the first non-empty cell in ``first..last``, or None."""
    for c in range(first, min(last, len(row) - 1) + 1):
        if row[c].strip():
            return c
    return None


def is_structural_row(
    row: Sequence[str],
    first: int = INFERENCE.STRUCTURAL_FIRST_COL,
    last: int = INFERENCE.STRUCTURAL_LAST_COL,
    min_cells: int = INFERENCE.STRUCTURAL_MIN_CELLS,
) -> bool:
    """A row spreading text across data columns, such as a column header row."""
    return count_non_empty(row, first, last) >= min_cells
