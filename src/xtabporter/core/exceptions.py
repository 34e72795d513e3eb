"""Custom exceptions for XTabPorter."""


class XTabPorterError(Exception):
    """Base exception for all XTabPorter errors."""

    pass


class StructuralError(XTabPorterError):
    """Raised when a workbook lacks a worksheet the parser requires.

    This is the only fatal parse condition. The message lists the sheets that
    were actually found so naming mismatches are easy to spot.
    """

    def __init__(self, required_sheet: str, found_sheets: list[str]):
        self.required_sheet = required_sheet
        self.found_sheets = list(found_sheets)
        super().__init__(
            f'Required sheet "{required_sheet}" not found. '
            f"Sheets in workbook: {self.found_sheets!r}"
        )


class FileTypeError(XTabPorterError):
    """Raised when a file cannot be opened as an xlsx workbook."""

    pass


class ValidationError(XTabPorterError):
    """Raised when input validation fails."""

    pass
