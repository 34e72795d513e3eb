"""Mapping inference from a preview window of the Abs sheet.

Given the rows around the first detected table, classify the rows after the
title and pick row offsets and the data start column. The result is a
suggestion: callers may show it to a user for confirmation before parsing.
"""

import logging
from collections.abc import Sequence

from ..core.constants import INFERENCE
from ..models.mapping import MappingPreview, ParseMapping, default_parse_mapping
from .row_classifiers import (
    first_non_empty,
    is_base_row,
    is_header_row,
    is_question_row,
    is_structural_row,
)

logger = logging.getLogger(__name__)

_ROW_OFFSET_FIELDS = (
    "question_row_offset",
    "header_row_offset",
    "base_row_offset",
    "group_row_offset",
    "column_row_offset",
    "data_start_row_offset",
)


class MappingInferenceEngine:
    """Proposes a ParseMapping for an unknown export layout."""

    def __init__(self, lookahead_rows: int = INFERENCE.LOOKAHEAD_ROWS):
        self.lookahead_rows = lookahead_rows

    def suggest(self, preview: MappingPreview, base: ParseMapping | None = None) -> ParseMapping:
        """
        Suggest a mapping for the table whose title sits at ``preview.table_start_row``.

        Args:
            preview: Preview window of the sheet
            base: Mapping to refine; the default mapping when None

        Returns:
            Refined mapping with non-negative offsets and a data column >= 1
        """
        base = base or default_parse_mapping()
        rows = preview.cells
        title = preview.title_row_index
        offsets = {name: getattr(base, name) for name in _ROW_OFFSET_FIELDS}

        if self._label(rows, title) and is_question_row(self._label(rows, title)):
            # Title and question share a row
            offsets = {name: max(0, value - 1) for name, value in offsets.items()}
            logger.debug("Title row looks like a question row; shifting offsets up")

        window = range(title, min(len(rows) - 1, title + self.lookahead_rows) + 1)

        offsets["question_row_offset"] = self._first_match(
            rows, window, title, is_question_row, INFERENCE.QUESTION_MAX_DISTANCE,
            offsets["question_row_offset"],
        )
        offsets["header_row_offset"] = self._first_match(
            rows, window, title, is_header_row, INFERENCE.HEADER_MAX_DISTANCE,
            offsets["header_row_offset"],
        )
        offsets["base_row_offset"] = self._first_match(
            rows, window, title, is_base_row, INFERENCE.BASE_MAX_DISTANCE,
            offsets["base_row_offset"],
        )

        structural = [i - title for i in window if is_structural_row(rows[i])]
        after_base = [rel for rel in structural if rel > offsets["base_row_offset"]]
        if after_base:
            offsets["group_row_offset"] = after_base[0]
            offsets["column_row_offset"] = (
                after_base[1] if len(after_base) >= 2 else after_base[0] + 1
            )

        offsets["data_start_row_offset"] = max(
            offsets["data_start_row_offset"], offsets["column_row_offset"] + 1
        )

        data_start_col = base.data_start_col_index
        column_row = title + offsets["column_row_offset"]
        if 0 <= column_row < len(rows):
            found = first_non_empty(
                rows[column_row], INFERENCE.DATA_COL_FIRST, INFERENCE.DATA_COL_LAST
            )
            data_start_col = found if found is not None else INFERENCE.DATA_COL_FIRST

        suggested = ParseMapping(
            **{
                **base.model_dump(),
                **{name: max(0, value) for name, value in offsets.items()},
                "data_start_col_index": max(1, data_start_col),
            }
        )
        logger.info(f"Suggested mapping: {suggested.model_dump()}")
        return suggested

    @staticmethod
    def _label(rows: Sequence[Sequence[str]], index: int) -> str:
        if 0 <= index < len(rows) and rows[index]:
            return rows[index][0].strip()
        return ""

    def _first_match(self, rows, window, title, predicate, max_distance, default) -> int:
        """Relative offset of the first row in ``window`` matching ``predicate``."""
        for i in window:
            rel = i - title
            if rel > max_distance:
                break
            if predicate(self._label(rows, i)):
                return rel
        return default


def suggest_parse_mapping(
    preview: MappingPreview, base: ParseMapping | None = None
) -> ParseMapping:
    """Convenience wrapper around MappingInferenceEngine.suggest."""
    return MappingInferenceEngine().suggest(preview, base)
