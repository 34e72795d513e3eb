"""Utility functions for XTabPorter."""

from .excel_utils import (
    col_index_to_letters,
    letters_to_col_index,
    parse_cell_reference,
    parse_range_reference,
)
from .hashing import compute_project_key, djb2_hex
from .question_filter import filter_out_summary_questions, is_summary_question

__all__ = [
    "col_index_to_letters",
    "letters_to_col_index",
    "parse_cell_reference",
    "parse_range_reference",
    "compute_project_key",
    "djb2_hex",
    "filter_out_summary_questions",
    "is_summary_question",
]
