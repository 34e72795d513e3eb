"""Extraction tools for getting data from cross-tab tables."""

from .header_parser import (
    HeaderMeta,
    QuestionMeta,
    build_column_groups,
    parse_base_text,
    parse_header_meta,
    parse_question_meta,
)
from .merge_cell_handler import expand_merges, normalize_grid
from .row_aligner import build_row_index, cell_text, resolve_counterpart
from .value_parser import is_total_label, parse_number, parse_sig

__all__ = [
    "normalize_grid",
    "expand_merges",
    "parse_question_meta",
    "parse_base_text",
    "parse_header_meta",
    "build_column_groups",
    "QuestionMeta",
    "HeaderMeta",
    "resolve_counterpart",
    "build_row_index",
    "cell_text",
    "parse_number",
    "parse_sig",
    "is_total_label",
]
