"""Data models for representing workbook content handed to the parser."""

from typing import Any, TypeAlias

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..utils.excel_utils import col_index_to_letters

# Immutable normalized grid: rows of stringified cell values
Grid: TypeAlias = tuple[tuple[str, ...], ...]


class CellRange(BaseModel):
    """Represents a rectangular cell range, such as a merged-cell region."""

    model_config = ConfigDict(strict=True, frozen=True)

    start_row: int = Field(..., ge=0, description="Starting row (0-indexed)")
    start_col: int = Field(..., ge=0, description="Starting column (0-indexed)")
    end_row: int = Field(..., ge=0, description="Ending row (inclusive)")
    end_col: int = Field(..., ge=0, description="Ending column (inclusive)")

    @model_validator(mode="after")
    def _check_bounds(self) -> "CellRange":
        if self.end_row < self.start_row or self.end_col < self.start_col:
            raise ValueError(f"Range end precedes start: {self!r}")
        return self

    @property
    def excel_range(self) -> str:
        """Convert to Excel-style range (e.g., 'A1:D10')."""
        return (
            f"{col_index_to_letters(self.start_col)}{self.start_row + 1}:"
            f"{col_index_to_letters(self.end_col)}{self.end_row + 1}"
        )

    @property
    def row_count(self) -> int:
        """Number of rows in the range."""
        return self.end_row - self.start_row + 1

    @property
    def col_count(self) -> int:
        """Number of columns in the range."""
        return self.end_col - self.start_col + 1

    def contains(self, row: int, col: int) -> bool:
        return self.start_row <= row <= self.end_row and self.start_col <= col <= self.end_col


class SheetData(BaseModel):
    """A worksheet as rows of cell text plus its merged-cell ranges.

    Row 0 / column 0 correspond to cell A1. Rows may be ragged; the grid
    normalizer pads them.
    """

    model_config = ConfigDict(strict=True)

    name: str = Field(..., description="Sheet name")
    rows: list[list[str]] = Field(default_factory=list, description="Cell text by row")
    merged_ranges: list[CellRange] = Field(
        default_factory=list, description="Merged-cell ranges in the sheet"
    )

    @property
    def max_row(self) -> int:
        """Index of the last row, -1 for an empty sheet."""
        return len(self.rows) - 1

    @property
    def max_column(self) -> int:
        """Index of the widest row's last column, -1 for an empty sheet."""
        return max((len(row) for row in self.rows), default=0) - 1

    def get_cell(self, row: int, column: int) -> str:
        """Get raw cell text, empty string when outside the stored rows."""
        if 0 <= row < len(self.rows) and 0 <= column < len(self.rows[row]):
            return self.rows[row][column]
        return ""


class WorkbookData(BaseModel):
    """Represents a complete workbook with all its sheets."""

    model_config = ConfigDict(strict=True)

    sheets: list[SheetData] = Field(default_factory=list, description="All sheets in file")

    @property
    def sheet_names(self) -> list[str]:
        """Names of all sheets, in workbook order."""
        return [sheet.name for sheet in self.sheets]

    def get_sheet_by_name(self, name: str) -> SheetData | None:
        """Get sheet by its exact name."""
        for sheet in self.sheets:
            if sheet.name == name:
                return sheet
        return None

    def find_sheet(self, key: str) -> SheetData | None:
        """Get sheet whose trimmed, lower-cased name equals ``key``.

        When several sheets normalize to the same key the last one wins.
        """
        found = None
        for sheet in self.sheets:
            if sheet.name.strip().lower() == key:
                found = sheet
        return found

    @classmethod
    def from_rows(
        cls,
        sheets: dict[str, list[list[Any]]],
        merged_ranges: dict[str, list[CellRange]] | None = None,
    ) -> "WorkbookData":
        """Build a workbook from plain row lists keyed by sheet name.

        Non-string values are converted with ``str``; ``None`` becomes "".
        """
        merged_ranges = merged_ranges or {}
        return cls(
            sheets=[
                SheetData(
                    name=name,
                    rows=[["" if v is None else str(v) for v in row] for row in rows],
                    merged_ranges=list(merged_ranges.get(name, [])),
                )
                for name, rows in sheets.items()
            ]
        )
