"""Workbook parsing: validation, per-sheet table location, pairing and aggregation.

``parse_workbook`` is a pure function of its inputs. It holds no state between
calls and never modifies the workbook, so independent files may be parsed
concurrently.
"""

import time
from typing import NamedTuple

from .core.constants import PREVIEW, SHEET_NAMES
from .core.exceptions import StructuralError
from .detectors.table_locator import find_table_starts, locate_tables
from .extraction import ParsedTable, TableExtractor
from .models.crosstab import ParseResult, ParseWarning, Question, WarningCode
from .models.file_info import FileMeta
from .models.mapping import MappingPreview, ParseMapping, TablePosition, default_parse_mapping
from .models.sheet_data import Grid, SheetData, WorkbookData
from .tools.extraction import normalize_grid, resolve_counterpart
from .utils.hashing import compute_project_key
from .utils.logging_context import (
    OperationContext,
    SheetContext,
    TableContext,
    get_contextual_logger,
)

logger = get_contextual_logger(__name__)


class ValueSheets(NamedTuple):
    """The worksheets a parse reads, resolved by name."""

    toc: SheetData
    abs: SheetData
    pct: SheetData
    sig: SheetData | None


def validate_workbook(workbook: WorkbookData) -> ValueSheets:
    """
    Resolve the required worksheets.

    Names are compared after trimming, case-insensitively. 'Table of
    Contents', 'Abs' and '%' are required; '%Sig' is optional.

    Raises:
        StructuralError: A required sheet is missing
    """
    for key in SHEET_NAMES.required:
        if workbook.find_sheet(key) is None:
            raise StructuralError(key, workbook.sheet_names)

    return ValueSheets(
        toc=workbook.find_sheet(SHEET_NAMES.TABLE_OF_CONTENTS),
        abs=workbook.find_sheet(SHEET_NAMES.ABS),
        pct=workbook.find_sheet(SHEET_NAMES.PERCENT),
        sig=workbook.find_sheet(SHEET_NAMES.SIGNIFICANCE),
    )


def parse_workbook(
    workbook: WorkbookData, file_meta: FileMeta, mapping: ParseMapping | None = None
) -> ParseResult:
    """
    Parse a cross-tab workbook into questions and tables.

    Args:
        workbook: Workbook with Abs, % and optional %Sig sheets
        file_meta: Size and modification time used for the project key
        mapping: Layout mapping; the default mapping when None

    Returns:
        Complete parse result with collected warnings

    Raises:
        StructuralError: A required sheet is missing
    """
    start_time = time.time()
    mapping = mapping or default_parse_mapping()
    warnings: list[ParseWarning] = []

    with OperationContext("parse"):
        sheets = validate_workbook(workbook)

        abs_grid, abs_positions = _load_sheet(sheets.abs, mapping)
        pct_grid, pct_positions = _load_sheet(sheets.pct, mapping)
        sig_grid, sig_positions = (
            _load_sheet(sheets.sig, mapping) if sheets.sig is not None else (None, [])
        )

        project_key = compute_project_key(
            abs_grid[0][0] if abs_grid and abs_grid[0] else "",
            file_meta.size,
            file_meta.last_modified,
        )
        logger.info(
            f"Located {len(abs_positions)} Abs, {len(pct_positions)} % and "
            f"{len(sig_positions)} %Sig tables"
        )

        extractor = TableExtractor(mapping)
        parsed: list[ParsedTable] = []

        for index, abs_pos in enumerate(abs_positions):
            table_id = abs_pos.table_id
            with TableContext(table_id):
                pct_pos = resolve_counterpart(pct_positions, table_id, index)
                if pct_pos is None:
                    _warn(
                        warnings,
                        WarningCode.MISSING_PERCENT_TABLE,
                        f"Table {table_id} not found in % sheet; table skipped",
                        table_id,
                    )
                    continue

                sig_pos = None
                if sig_grid is not None:
                    sig_pos = resolve_counterpart(sig_positions, table_id, index)
                    if sig_pos is None:
                        _warn(
                            warnings,
                            WarningCode.MISSING_SIG_TABLE,
                            f"Table {table_id} not found in %Sig sheet; significance left empty",
                            table_id,
                        )

                parsed.append(
                    extractor.extract(
                        abs_grid, pct_grid, sig_grid, abs_pos, pct_pos, sig_pos, warnings
                    )
                )

        questions = group_questions(parsed)

    logger.info(
        f"Parsed {len(parsed)} tables in {len(questions)} questions with "
        f"{len(warnings)} warnings in {time.time() - start_time:.2f}s"
    )
    return ParseResult(project_key=project_key, questions=questions, warnings=warnings)


def group_questions(parsed: list[ParsedTable]) -> list[Question]:
    """Group tables by (question id, description), keeping first-seen order."""
    grouped: dict[tuple[str, str], list] = {}
    for item in parsed:
        grouped.setdefault((item.question_id, item.question_description), []).append(item.table)

    return [
        Question(id=question_id, description=description, tables=tables)
        for (question_id, description), tables in grouped.items()
    ]


def inspect_workbook(
    workbook: WorkbookData,
    mapping: ParseMapping | None = None,
    rows_above: int = PREVIEW.ROWS_ABOVE,
    rows_below: int = PREVIEW.ROWS_BELOW,
    min_columns: int = PREVIEW.MIN_COLUMNS,
    extra_columns: int = PREVIEW.EXTRA_COLUMNS,
) -> MappingPreview:
    """
    Take a preview window around the first table of the Abs sheet.

    Only normalization and table location run; nothing is extracted. The
    first sheet stands in when no sheet is named 'Abs'.

    Args:
        workbook: Workbook to inspect
        mapping: Mapping supplying the title pattern and data column
        rows_above: Rows kept above the first table title
        rows_below: Rows kept below the first table title
        min_columns: Minimum last column index of the window
        extra_columns: Columns kept past the data start column

    Returns:
        Preview window with the detected first table start row
    """
    mapping = mapping or default_parse_mapping()
    sheet = workbook.find_sheet(SHEET_NAMES.ABS)
    if sheet is None:
        if not workbook.sheets:
            raise StructuralError(SHEET_NAMES.ABS, workbook.sheet_names)
        sheet = workbook.sheets[0]

    with OperationContext("inspect"):
        grid = normalize_grid(sheet)
        starts = find_table_starts(grid, mapping)
        table_start = starts[0] if starts else 0

        first_row = max(0, table_start - rows_above)
        last_row = min(len(grid) - 1, table_start + rows_below)
        last_col = max(min_columns, mapping.data_start_col_index + extra_columns)

        cells = [
            [grid[r][c] if c < len(grid[r]) else "" for c in range(last_col + 1)]
            for r in range(first_row, last_row + 1)
        ]
        logger.debug(f"Preview rows {first_row}..{last_row}, first table at {table_start}")

    return MappingPreview(
        sheet_name=sheet.name,
        table_start_row=table_start,
        preview_start_row=first_row,
        cells=cells,
    )


def _warn(warnings: list[ParseWarning], code: WarningCode, message: str, table_id: str) -> None:
    warning = ParseWarning(code=code, message=message, table_id=table_id)
    logger.warning(message)
    warnings.append(warning)


def _load_sheet(sheet: SheetData, mapping: ParseMapping) -> tuple[Grid, list[TablePosition]]:
    with SheetContext(sheet.name):
        grid = normalize_grid(sheet)
        positions = locate_tables(grid, mapping)
        logger.debug(f"{len(grid)} rows, {len(positions)} tables")
    return grid, positions
