"""Tests for the row-role predicates."""

import re

import pytest

from xtabporter.detectors.row_classifiers import (
    DEFAULT_TITLE_PATTERN,
    compile_title_pattern,
    count_non_empty,
    first_non_empty,
    is_base_row,
    is_by_title,
    is_header_row,
    is_question_row,
    is_structural_row,
    is_table_title,
)


class TestTitlePattern:
    @pytest.mark.parametrize("text", ["Table 1", "Table 1A", "table 12b", "  TABLE 3  "])
    def test_default_titles(self, text):
        assert is_table_title(text)

    @pytest.mark.parametrize("text", ["", "Table", "Table 1A extra", "Tables 1", "Q1 Table 2"])
    def test_non_titles(self, text):
        assert not is_table_title(text)

    def test_custom_pattern(self):
        pattern = compile_title_pattern(r"^banner\s+\d+$")
        assert is_table_title("BANNER 4", pattern)
        assert not is_table_title("Table 4", pattern)

    @pytest.mark.parametrize("regex", ["([", "", None])
    def test_invalid_or_empty_falls_back(self, regex):
        assert compile_title_pattern(regex) is DEFAULT_TITLE_PATTERN

    def test_compiled_case_insensitive(self):
        assert compile_title_pattern(r"^tab\d$").flags & re.IGNORECASE


class TestByTitle:
    def test_by_title(self):
        assert is_by_title("Q4a satisfaction by BANNER1")

    @pytest.mark.parametrize("text", ["Bystander count", "Standby", "by region"])
    def test_not_by_title(self, text):
        assert not is_by_title(text)


class TestQuestionRow:
    @pytest.mark.parametrize(
        "text",
        [
            "(Q101) 题目",
            "Rating (q5a)",
            "Q4 Overall satisfaction",
            "Q12B_grid",
            "Q7",
            "Satisfaction by region",
        ],
    )
    def test_question_rows(self, text):
        assert is_question_row(text)

    @pytest.mark.parametrize("text", ["", "Table 1", "Base: All", "Quality", "Q&A"])
    def test_other_rows(self, text):
        assert not is_question_row(text)


class TestHeaderAndBaseRows:
    @pytest.mark.parametrize("text", ["Header: HEADER A", "HEADER A Users", " header:x"])
    def test_header_rows(self, text):
        assert is_header_row(text)

    @pytest.mark.parametrize("text", ["Headers", "Subheader: A", ""])
    def test_non_header_rows(self, text):
        assert not is_header_row(text)

    @pytest.mark.parametrize("text", ["Base: B1. ALL", "BASE：All", "base all", "n=200", "N = 50"])
    def test_base_rows(self, text):
        assert is_base_row(text)

    @pytest.mark.parametrize("text", ["Baseline", "n/a", "", "Total"])
    def test_non_base_rows(self, text):
        assert not is_base_row(text)


class TestStructuralRow:
    def test_counts_within_bounds(self):
        row = ["label", "a", "", "b", "c"]
        assert count_non_empty(row, 1, 3) == 2
        assert count_non_empty(row, 1, 99) == 3

    def test_first_non_empty(self):
        assert first_non_empty(["x", "", " ", "y"], 1, 40) == 3
        assert first_non_empty(["x", "", ""], 1, 40) is None

    def test_structural(self):
        assert is_structural_row(["", "Male(A)", "Female(B)"])

    def test_label_column_ignored(self):
        assert not is_structural_row(["Base: All", "200"])

    def test_columns_past_limit_ignored(self):
        row = [""] * 21 + ["a", "b"]
        assert not is_structural_row(row)
