"""Context-aware logging utilities for XTabPorter."""

import contextvars
import logging
from collections.abc import Mapping
from typing import Any

# Context variables for tracking current processing context
current_file = contextvars.ContextVar[str | None]("current_file", default=None)
current_sheet = contextvars.ContextVar[str | None]("current_sheet", default=None)
current_table = contextvars.ContextVar[str | None]("current_table", default=None)
current_operation = contextvars.ContextVar[str | None]("current_operation", default=None)


class ContextualLogger(logging.LoggerAdapter):
    """Logger adapter that automatically includes context information."""

    def process(self, msg: str, kwargs: Mapping[str, Any]) -> tuple[str, Mapping[str, Any]]:
        """Add context information to log records."""
        file_name = current_file.get()
        sheet_name = current_sheet.get()
        table_id = current_table.get()
        operation = current_operation.get()

        extra = dict(kwargs.get("extra") or {})
        context_parts = []
        if file_name:
            extra["file"] = file_name
            context_parts.append(f"file={file_name}")
        if sheet_name:
            extra["sheet"] = sheet_name
            context_parts.append(f"sheet={sheet_name}")
        if table_id:
            extra["table"] = table_id
            context_parts.append(f"table={table_id}")
        if operation:
            extra["operation"] = operation
            context_parts.append(f"op={operation}")

        kwargs["extra"] = extra

        if context_parts:
            msg = f"[{', '.join(context_parts)}] {msg}"

        return msg, kwargs


def get_contextual_logger(name: str) -> ContextualLogger:
    """Get a logger that automatically includes context information.

    Args:
        name: Logger name (usually __name__)

    Returns:
        ContextualLogger instance
    """
    return ContextualLogger(logging.getLogger(name), {})


class _VarContext:
    """Sets a context variable for the duration of a ``with`` block."""

    var: contextvars.ContextVar[str | None]

    def __init__(self, value: str | None):
        self.value = value
        self.token: contextvars.Token | None = None

    def __enter__(self):
        self.token = self.var.set(self.value)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.token:
            self.var.reset(self.token)
            self.token = None


class FileContext(_VarContext):
    """Context manager for tracking current file being processed."""

    var = current_file


class SheetContext(_VarContext):
    """Context manager for tracking current sheet being processed."""

    var = current_sheet


class TableContext(_VarContext):
    """Context manager for tracking current table being processed."""

    var = current_table


class OperationContext(_VarContext):
    """Context manager for tracking current operation."""

    var = current_operation


def setup_contextual_logging(level: int | str = logging.INFO, log_file: str | None = None) -> None:
    """Set up logging with a format that carries the processing context.

    This should be called once at application startup.
    """
    logging.basicConfig(level=level, filename=log_file)

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        defaults={"file": "", "sheet": "", "table": "", "operation": ""},
    )

    root_logger = logging.getLogger()
    for handler in root_logger.handlers:
        handler.setFormatter(formatter)
