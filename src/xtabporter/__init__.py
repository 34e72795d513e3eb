"""XTabPorter - Cross-tabulation report extraction for market-research workbooks."""

__version__ = "0.1.0"

from xtabporter.config import Config
from xtabporter.core.exceptions import (
    FileTypeError,
    StructuralError,
    ValidationError,
    XTabPorterError,
)
from xtabporter.detectors import MappingInferenceEngine, suggest_parse_mapping
from xtabporter.extraction import TableExtractor
from xtabporter.models import (
    FileMeta,
    MappingPreview,
    ParseMapping,
    ParseResult,
    Question,
    Table,
    WorkbookData,
)
from xtabporter.parsing import inspect_workbook, parse_workbook, validate_workbook
from xtabporter.xtabporter import XTabPorter

__all__ = [
    "XTabPorter",
    "Config",
    "FileMeta",
    "MappingPreview",
    "ParseMapping",
    "ParseResult",
    "Question",
    "Table",
    "WorkbookData",
    "MappingInferenceEngine",
    "TableExtractor",
    "inspect_workbook",
    "parse_workbook",
    "suggest_parse_mapping",
    "validate_workbook",
    "XTabPorterError",
    "StructuralError",
    "FileTypeError",
    "ValidationError",
]
