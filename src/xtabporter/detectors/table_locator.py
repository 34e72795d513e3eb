"""Table boundary detection over a normalized grid.

Exports label each table with a title row in the label column ("Table 1A").
Tables run from their title row to the row before the next title. Exports
that title tables with the survey question text ("Q4 ... by BANNER1") are
handled by a fallback when no title matches the configured pattern.
"""

import logging
import re

from ..models.mapping import ParseMapping, TablePosition
from ..models.sheet_data import Grid
from ..tools.extraction.row_aligner import cell_text
from .row_classifiers import compile_title_pattern, is_by_title, is_table_title

logger = logging.getLogger(__name__)

_TABLE_NUMBER = re.compile(r"table\s*(\d+[A-Z]?)", re.IGNORECASE)
_BARE_NUMBER = re.compile(r"\b(\d+[A-Z]?)\b", re.IGNORECASE)


def find_table_starts(grid: Grid, mapping: ParseMapping) -> list[int]:
    """Grid rows holding a table title, in sheet order."""
    pattern = compile_title_pattern(mapping.table_title_regex)
    col = mapping.row_label_col_index

    starts = [row for row in range(len(grid)) if is_table_title(cell_text(grid, row, col), pattern)]
    if starts:
        return starts

    starts = [row for row in range(len(grid)) if is_by_title(cell_text(grid, row, col))]
    if starts:
        logger.debug(f"No title matched {mapping.table_title_regex!r}; using 'by' titles")
    return starts


def extract_table_id(title: str) -> str:
    """
    Derive a table id from its title.

    'Table 1A' gives '1A'. Without a 'table' prefix the first standalone
    number token is used, else the whole uppercased title.
    """
    clean = title.strip().lstrip("'\"").strip()
    match = _TABLE_NUMBER.search(clean) or _BARE_NUMBER.search(clean)
    if match:
        return match.group(1).upper()
    return clean.upper()


def locate_tables(grid: Grid, mapping: ParseMapping) -> list[TablePosition]:
    """
    Split a grid into per-table row ranges.

    Args:
        grid: Normalized sheet grid
        mapping: Layout mapping supplying the title pattern

    Returns:
        Positions in sheet order. Ids are unique within the sheet; repeated
        ids get a '_2', '_3', ... suffix.
    """
    starts = find_table_starts(grid, mapping)
    positions: list[TablePosition] = []
    seen: dict[str, int] = {}

    for i, start in enumerate(starts):
        end = (starts[i + 1] if i + 1 < len(starts) else len(grid)) - 1
        title = cell_text(grid, start, mapping.row_label_col_index)
        table_id = extract_table_id(title) or f"TABLE_AT_{start}"

        seen[table_id] = seen.get(table_id, 0) + 1
        if seen[table_id] > 1:
            logger.warning(f"Duplicate table id {table_id!r} at row {start}")
            table_id = f"{table_id}_{seen[table_id]}"

        positions.append(TablePosition(table_id=table_id, start=start, end=end))

    return positions
