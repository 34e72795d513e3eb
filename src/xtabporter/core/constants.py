"""Centralized constants for XTabPorter.

This module contains the fixed sheet names, heuristic windows and keywords
used by the extraction engine, organized by category.
"""

from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True)
class SheetNames:
    """Worksheet keys, compared after trimming and lower-casing."""

    TABLE_OF_CONTENTS: Final[str] = "table of contents"
    ABS: Final[str] = "abs"
    PERCENT: Final[str] = "%"
    SIGNIFICANCE: Final[str] = "%sig"

    @property
    def required(self) -> tuple[str, ...]:
        return (self.TABLE_OF_CONTENTS, self.ABS, self.PERCENT)


@dataclass(frozen=True)
class InferenceConstants:
    """Constants for mapping inference over a preview window."""

    # Rows scanned after the table title
    LOOKAHEAD_ROWS: Final[int] = 10

    # Maximum distance from the title for each classified row
    QUESTION_MAX_DISTANCE: Final[int] = 2
    HEADER_MAX_DISTANCE: Final[int] = 4
    BASE_MAX_DISTANCE: Final[int] = 6

    # Structural row detection (inclusive column bounds)
    STRUCTURAL_FIRST_COL: Final[int] = 1
    STRUCTURAL_LAST_COL: Final[int] = 20
    STRUCTURAL_MIN_CELLS: Final[int] = 2

    # Data start column scan (inclusive column bounds)
    DATA_COL_FIRST: Final[int] = 1
    DATA_COL_LAST: Final[int] = 40


@dataclass(frozen=True)
class PreviewConstants:
    """Constants for the mapping preview window."""

    ROWS_ABOVE: Final[int] = 2
    ROWS_BELOW: Final[int] = 32
    MIN_COLUMNS: Final[int] = 16
    EXTRA_COLUMNS: Final[int] = 12


@dataclass(frozen=True)
class Keywords:
    """Keywords for row and cell classification (multi-language support)."""

    DEFAULT_TITLE_REGEX: Final[str] = r"^table\s+\d+[a-z]?$"

    # Row labels marking a total row
    TOTAL_LABELS: Final[tuple[str, ...]] = ("total", "合计", "总计")

    # Sub-header marker cells found at the data start column
    MARKER_CELLS: Final[tuple[str, ...]] = ("abs", "%", "%sig")

    SUMMARY_KEYWORD: Final[str] = "summary"


# Create singleton instances for easy access
SHEET_NAMES = SheetNames()
INFERENCE = InferenceConstants()
PREVIEW = PreviewConstants()
KEYWORDS = Keywords()
