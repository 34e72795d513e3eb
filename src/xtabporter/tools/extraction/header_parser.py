"""Tools for parsing table metadata lines and two-level column headers."""

import re
from collections.abc import Sequence
from typing import NamedTuple

from ...models.crosstab import Column, ColumnGroup
from ...utils.excel_utils import col_index_to_letters

_QUESTION_ID = re.compile(r"\((Q[0-9A-Z]+)\)", re.IGNORECASE)
_BASE_PREFIX = re.compile(r"^base\s*[:：]\s*", re.IGNORECASE)
_HEADER_PREFIX = re.compile(r"^header\s*[:：]\s*", re.IGNORECASE)
_HEADER_CODE = re.compile(r"^(HEADER\s+[A-Z0-9]+)\s*", re.IGNORECASE)
_COLUMN_LETTER = re.compile(r"\(([A-Z]+)\)")


class QuestionMeta(NamedTuple):
    """Question id and description parsed from a question line."""

    id: str
    description: str


class HeaderMeta(NamedTuple):
    """Banner id and name parsed from a 'Header:' line."""

    header_id: str
    header_name: str


def parse_question_meta(text: str) -> QuestionMeta:
    """Parse '(Q101) Some question' into id 'Q101' and the full description.

    Without a (Qxx) token the whole trimmed text is the id.
    """
    clean = text.strip()
    match = _QUESTION_ID.search(clean)
    question_id = match.group(1).upper() if match else clean
    return QuestionMeta(id=question_id, description=clean or question_id)


def parse_base_text(text: str) -> str:
    """Strip a leading 'Base:' label."""
    return _BASE_PREFIX.sub("", text.strip()).strip()


def parse_header_meta(text: str, table_id: str) -> HeaderMeta:
    """
    Parse a banner line such as 'Header: HEADER A Users'.

    A leading 'HEADER <code>' token becomes the header id (uppercased). When
    it is missing the id is synthesized from the table id and the text.

    Args:
        text: Raw header cell text
        table_id: Id of the table the line belongs to

    Returns:
        Parsed header metadata
    """
    clean = _HEADER_PREFIX.sub("", text.strip()).strip()
    match = _HEADER_CODE.match(clean)
    remainder = _HEADER_CODE.sub("", clean, count=1).strip() if match else clean
    header_name = remainder or clean

    if match:
        header_id = re.sub(r"\s+", " ", match.group(1)).upper()
    else:
        header_id = f"{table_id}:{header_name}"

    return HeaderMeta(header_id=header_id, header_name=header_name)


def column_letter(label: str, used: set[str], position: int) -> str:
    """
    Pick the stable letter for a column.

    The parenthesized suffix of the label ('City(A)' -> 'A') wins when it is
    not yet used in the table; otherwise the sequential letter for
    ``position`` is used, skipping letters already taken.
    """
    tokens = _COLUMN_LETTER.findall(label)
    if tokens and tokens[-1] not in used:
        return tokens[-1]

    candidate = position
    while col_index_to_letters(candidate) in used:
        candidate += 1
    return col_index_to_letters(candidate)


def build_column_groups(
    group_row: Sequence[str], label_row: Sequence[str], data_start_col: int
) -> list[ColumnGroup]:
    """
    Build column groups from the group-header and column-header rows.

    Every non-empty label cell from ``data_start_col`` on becomes a column,
    bucketed under the group text at the same column. Groups keep first-seen
    order; columns keep sheet order within a group.

    Args:
        group_row: First-level header row (merge-expanded)
        label_row: Second-level header row
        data_start_col: First data column

    Returns:
        Column groups
    """
    used: set[str] = set()
    grouped: dict[str, list[Column]] = {}
    position = 0

    for col in range(data_start_col, len(label_row)):
        label = label_row[col].strip()
        if not label:
            continue

        letter = column_letter(label, used, position)
        used.add(letter)
        position += 1

        group_name = group_row[col].strip() if col < len(group_row) else ""
        grouped.setdefault(group_name, []).append(
            Column(letter=letter, label=label, sheet_col_index=col)
        )

    return [
        ColumnGroup(group_name=group_name, columns=columns)
        for group_name, columns in grouped.items()
    ]
