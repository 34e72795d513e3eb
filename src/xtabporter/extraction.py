"""Table extraction across the Abs, % and %Sig grids."""

from typing import NamedTuple

from .core.constants import KEYWORDS
from .detectors.row_classifiers import compile_title_pattern
from .models.crosstab import DataRow, ParseWarning, Table, WarningCode
from .models.mapping import ParseMapping, TablePosition
from .models.sheet_data import Grid
from .tools.extraction import (
    build_column_groups,
    build_row_index,
    cell_text,
    is_total_label,
    parse_base_text,
    parse_header_meta,
    parse_number,
    parse_question_meta,
    parse_sig,
)
from .utils.logging_context import get_contextual_logger

logger = get_contextual_logger(__name__)


class ParsedTable(NamedTuple):
    """A built table plus the question it belongs to."""

    question_id: str
    question_description: str
    table: Table


class TableExtractor:
    """Builds Table objects from paired row ranges of the value sheets."""

    def __init__(self, mapping: ParseMapping):
        self.mapping = mapping
        self.title_pattern = compile_title_pattern(mapping.table_title_regex)

    def extract(
        self,
        abs_grid: Grid,
        pct_grid: Grid,
        sig_grid: Grid | None,
        abs_pos: TablePosition,
        pct_pos: TablePosition,
        sig_pos: TablePosition | None,
        warnings: list[ParseWarning],
    ) -> ParsedTable:
        """
        Extract one table.

        Rows are read from the Abs grid and joined by label to the % and %Sig
        grids. A label missing from % is reported as ROW_MISMATCH and gets
        null percentages; a label missing from %Sig gets empty letters.

        Args:
            abs_grid: Normalized Abs sheet
            pct_grid: Normalized % sheet
            sig_grid: Normalized %Sig sheet, None when the workbook has none
            abs_pos: Table range in the Abs grid
            pct_pos: Counterpart range in the % grid
            sig_pos: Counterpart range in the %Sig grid, if any
            warnings: Collector that receives ROW_MISMATCH warnings

        Returns:
            The parsed table and its question id/description
        """
        m = self.mapping
        start, end, table_id = abs_pos.start, min(abs_pos.end, len(abs_grid) - 1), abs_pos.table_id
        label_col = m.row_label_col_index

        question = parse_question_meta(
            cell_text(abs_grid, start + m.question_row_offset, label_col)
        )
        base = parse_base_text(cell_text(abs_grid, start + m.base_row_offset, label_col))
        header = parse_header_meta(
            cell_text(abs_grid, start + m.header_row_offset, label_col), table_id
        )

        column_groups = build_column_groups(
            self._row(abs_grid, start + m.group_row_offset),
            self._row(abs_grid, start + m.column_row_offset),
            m.data_start_col_index,
        )
        columns = [column for group in column_groups for column in group.columns]

        pct_index = build_row_index(pct_grid, pct_pos, m, self.title_pattern)
        sig_index = (
            build_row_index(sig_grid, sig_pos, m, self.title_pattern)
            if sig_grid is not None and sig_pos is not None
            else {}
        )

        rows: list[DataRow] = []
        for r in range(start + m.data_start_row_offset, end + 1):
            label = cell_text(abs_grid, r, label_col)
            if not self._is_data_row(label, cell_text(abs_grid, r, m.data_start_col_index)):
                continue

            pct_row = pct_index.get(label)
            sig_row = sig_index.get(label)
            if pct_row is None:
                warning = ParseWarning(
                    code=WarningCode.ROW_MISMATCH,
                    message=f'{table_id}: row "{label}" not found in % sheet, values left empty',
                    table_id=table_id,
                )
                logger.warning(warning.message)
                warnings.append(warning)

            rows.append(
                DataRow(
                    label=label,
                    is_total=is_total_label(label),
                    abs_values=[
                        parse_number(cell_text(abs_grid, r, c.sheet_col_index)) for c in columns
                    ],
                    pct_values=[
                        None
                        if pct_row is None
                        else parse_number(cell_text(pct_grid, pct_row, c.sheet_col_index))
                        for c in columns
                    ],
                    sig_values=[
                        ""
                        if sig_grid is None or sig_row is None
                        else parse_sig(cell_text(sig_grid, sig_row, c.sheet_col_index))
                        for c in columns
                    ],
                )
            )

        base_size = parse_number(
            cell_text(abs_grid, start + m.data_start_row_offset, m.data_start_col_index)
        )

        table = Table(
            table_id=table_id,
            header_id=header.header_id,
            header_name=header.header_name,
            base=base,
            base_size=base_size if base_size is not None else 0.0,
            column_groups=column_groups,
            rows=rows,
            abs_start_row_index=start,
        )
        logger.debug(f"Extracted {len(rows)} rows x {len(columns)} columns")
        return ParsedTable(question.id, question.description, table)

    def _is_data_row(self, label: str, first_data_cell: str) -> bool:
        """Whether a row carries data rather than a title or marker."""
        if not label or self.title_pattern.search(label):
            return False
        return first_data_cell.lower() not in KEYWORDS.MARKER_CELLS

    @staticmethod
    def _row(grid: Grid, index: int) -> tuple[str, ...]:
        return grid[index] if 0 <= index < len(grid) else ()
