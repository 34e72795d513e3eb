"""Tools for correlating tables and rows across the parallel worksheets.

Both joins are best effort. Callers get ``None`` on a miss and decide whether
that is a warning or silently acceptable.
"""

import re
from collections.abc import Sequence

from ...models.mapping import ParseMapping, TablePosition
from ...models.sheet_data import Grid


def resolve_counterpart(
    positions: Sequence[TablePosition], table_id: str, index: int
) -> TablePosition | None:
    """
    Find the table in another sheet that pairs with an Abs table.

    Stage one matches by table id. Stage two falls back to the table at the
    same appearance index. The positional stage assumes every sheet lists its
    tables in the same order; a table inserted or reordered in one sheet is
    paired with the wrong neighbour without notice.

    Args:
        positions: Tables located in the other sheet, in appearance order
        table_id: Id of the Abs table
        index: Appearance index of the Abs table

    Returns:
        The counterpart position, or None when neither stage matches
    """
    for position in positions:
        if position.table_id == table_id:
            return position
    if 0 <= index < len(positions):
        return positions[index]
    return None


def build_row_index(
    grid: Grid,
    position: TablePosition,
    mapping: ParseMapping,
    title_pattern: re.Pattern[str],
) -> dict[str, int]:
    """
    Map trimmed row labels to grid rows within one table's data range.

    Empty labels and title-looking labels are skipped. A label that repeats
    maps to its last row.

    Args:
        grid: Normalized sheet grid
        position: Table row range in ``grid``
        mapping: Layout mapping
        title_pattern: Compiled table-title pattern

    Returns:
        Label to row index mapping
    """
    index: dict[str, int] = {}
    last_row = min(position.end, len(grid) - 1)
    for row in range(position.start + mapping.data_start_row_offset, last_row + 1):
        label = cell_text(grid, row, mapping.row_label_col_index)
        if not label or title_pattern.search(label):
            continue
        index[label] = row
    return index


def cell_text(grid: Grid, row: int, col: int) -> str:
    """Trimmed cell text, empty when outside the grid."""
    if 0 <= row < len(grid) and 0 <= col < len(grid[row]):
        return grid[row][col].strip()
    return ""
