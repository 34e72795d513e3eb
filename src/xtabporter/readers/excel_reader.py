"""Excel reader built on openpyxl."""

import io
import logging
import zipfile
from datetime import date, datetime, time
from pathlib import Path
from typing import TYPE_CHECKING, Any, BinaryIO

from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from ..core.exceptions import FileTypeError, ValidationError
from ..models.sheet_data import CellRange, SheetData, WorkbookData

if TYPE_CHECKING:
    from openpyxl.workbook import Workbook
    from openpyxl.worksheet.worksheet import Worksheet

logger = logging.getLogger(__name__)

Source = str | Path | bytes | BinaryIO


class ExcelReader:
    """Reads an xlsx workbook into WorkbookData.

    Cached formula results are read (``data_only=True``); formulas themselves
    are not evaluated.
    """

    def __init__(self, source: Source, max_file_size_mb: float | None = None):
        self.source = source
        self.max_file_size_mb = max_file_size_mb

    def read(self) -> WorkbookData:
        """Load the workbook and convert every worksheet.

        Raises:
            FileNotFoundError: Path does not exist
            ValidationError: File exceeds the size limit
            FileTypeError: Content is not a readable xlsx workbook
        """
        self._validate_size()

        handle: Any = self.source
        if isinstance(self.source, bytes):
            handle = io.BytesIO(self.source)
        elif isinstance(self.source, str | Path):
            handle = Path(self.source)
            if not handle.exists():
                raise FileNotFoundError(f"File not found: {handle}")

        try:
            workbook = load_workbook(handle, data_only=True)
        except (InvalidFileException, zipfile.BadZipFile, KeyError) as e:
            raise FileTypeError(f"Could not read workbook: {e}") from e

        try:
            data = workbook_from_openpyxl(workbook)
        finally:
            workbook.close()

        logger.info(f"Read {len(data.sheets)} sheets: {data.sheet_names}")
        return data

    def _validate_size(self) -> None:
        if self.max_file_size_mb is None:
            return
        if isinstance(self.source, bytes):
            size = len(self.source)
        elif isinstance(self.source, str | Path) and Path(self.source).exists():
            size = Path(self.source).stat().st_size
        else:
            return

        size_mb = size / (1024 * 1024)
        if size_mb > self.max_file_size_mb:
            raise ValidationError(
                f"File too large: {size_mb:.1f}MB (max: {self.max_file_size_mb}MB)"
            )


def workbook_from_openpyxl(workbook: "Workbook") -> WorkbookData:
    """Convert an open openpyxl workbook. Chart sheets are skipped."""
    return WorkbookData(sheets=[sheet_from_worksheet(ws) for ws in workbook.worksheets])


def sheet_from_worksheet(worksheet: "Worksheet") -> SheetData:
    """Convert one worksheet, anchored at A1."""
    rows = [
        [cell_to_text(cell.value, getattr(cell, "number_format", None)) for cell in row]
        for row in worksheet.iter_rows(
            min_row=1, max_row=worksheet.max_row, min_col=1, max_col=worksheet.max_column
        )
    ]
    merges = [
        CellRange(
            start_row=rng.min_row - 1,
            start_col=rng.min_col - 1,
            end_row=rng.max_row - 1,
            end_col=rng.max_col - 1,
        )
        for rng in worksheet.merged_cells.ranges
    ]
    return SheetData(name=worksheet.title, rows=rows, merged_ranges=merges)


def cell_to_text(value: Any, number_format: str | None = None) -> str:
    """
    Render a cell value as display text.

    Percent-formatted numbers are scaled and suffixed ('0.241' with format
    '0.0%' gives '24.1%'); integral floats lose their '.0'.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    if isinstance(value, int | float):
        if number_format and "%" in number_format:
            return f"{_format_number(value * 100)}%"
        return _format_number(value)
    if isinstance(value, datetime | date | time):
        return value.isoformat()
    return str(value)


def _format_number(value: int | float) -> str:
    if isinstance(value, int):
        return str(value)
    if value.is_integer():
        return str(int(value))
    return repr(round(value, 10))
