"""File readers for cross-tab workbooks."""

from .excel_reader import ExcelReader, cell_to_text, sheet_from_worksheet, workbook_from_openpyxl

__all__ = [
    "ExcelReader",
    "cell_to_text",
    "sheet_from_worksheet",
    "workbook_from_openpyxl",
]
