"""Data models for XTabPorter."""

from .crosstab import (
    Column,
    ColumnGroup,
    DataRow,
    ParseResult,
    ParseWarning,
    Question,
    Table,
    WarningCode,
)
from .file_info import FileMeta
from .mapping import MappingPreview, ParseMapping, TablePosition, default_parse_mapping
from .sheet_data import CellRange, Grid, SheetData, WorkbookData

__all__ = [
    "Column",
    "ColumnGroup",
    "DataRow",
    "Table",
    "Question",
    "ParseWarning",
    "ParseResult",
    "WarningCode",
    "FileMeta",
    "ParseMapping",
    "MappingPreview",
    "TablePosition",
    "default_parse_mapping",
    "CellRange",
    "Grid",
    "SheetData",
    "WorkbookData",
]
