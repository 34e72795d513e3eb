"""Tests for table metadata and column header parsing."""

import pytest

from xtabporter.tools.extraction.header_parser import (
    build_column_groups,
    column_letter,
    parse_base_text,
    parse_header_meta,
    parse_question_meta,
)


class TestQuestionMeta:
    def test_question_token(self):
        meta = parse_question_meta("(Q101) 题目")
        assert meta.id == "Q101"
        assert meta.description == "(Q101) 题目"

    def test_token_uppercased(self):
        assert parse_question_meta("Rating (q5a) of brand").id == "Q5A"

    def test_without_token_whole_text(self):
        meta = parse_question_meta("  Overall satisfaction ")
        assert meta.id == "Overall satisfaction"
        assert meta.description == "Overall satisfaction"


class TestBaseText:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("Base: B1. ALL", "B1. ALL"),
            ("BASE：All respondents", "All respondents"),
            ("base :  Users ", "Users"),
            ("n=200", "n=200"),
        ],
    )
    def test_prefix_stripped(self, text, expected):
        assert parse_base_text(text) == expected


class TestHeaderMeta:
    def test_header_code(self):
        meta = parse_header_meta("Header: HEADER A 用户", "1A")
        assert meta.header_id == "HEADER A"
        assert meta.header_name == "用户"

    def test_header_code_case_normalized(self):
        meta = parse_header_meta("header:  header   b2 Region", "1A")
        assert meta.header_id == "HEADER B2"
        assert meta.header_name == "Region"

    def test_synthesized_id(self):
        meta = parse_header_meta("Header: Region", "3")
        assert meta.header_id == "3:Region"
        assert meta.header_name == "Region"


class TestColumnLetter:
    def test_parenthesized_suffix(self):
        assert column_letter("成都市区(A)", set(), 0) == "A"

    def test_last_token_wins(self):
        assert column_letter("Group(X) sub(C)", set(), 0) == "C"

    def test_used_suffix_falls_back(self):
        assert column_letter("Other(A)", {"A"}, 1) == "B"

    def test_sequential_skips_used(self):
        assert column_letter("Plain", {"A", "B"}, 0) == "C"


class TestBuildColumnGroups:
    def test_groups_and_letters(self):
        groups = build_column_groups(
            ("", "城市", "城市", "年龄"),
            ("", "成都市区(A)", "成都郊区(B)", "18-34"),
            1,
        )
        assert [g.group_name for g in groups] == ["城市", "年龄"]
        assert [c.letter for c in groups[0].columns] == ["A", "B"]
        assert groups[1].columns[0].letter == "C"
        assert groups[1].columns[0].sheet_col_index == 3

    def test_empty_labels_skipped(self):
        groups = build_column_groups(("", "G", "G"), ("", "", "Col"), 1)
        assert len(groups) == 1
        assert [c.label for c in groups[0].columns] == ["Col"]
        assert groups[0].columns[0].sheet_col_index == 2

    def test_columns_before_data_start_ignored(self):
        groups = build_column_groups(("", "", "G"), ("Label", "Skip", "Keep(K)"), 2)
        assert [c.letter for g in groups for c in g.columns] == ["K"]

    def test_short_group_row(self):
        groups = build_column_groups(("",), ("", "a", "b"), 1)
        assert groups[0].group_name == ""
        assert len(groups[0].columns) == 2

    def test_letters_unique(self):
        groups = build_column_groups(("", "", ""), ("", "x(A)", "y(A)"), 1)
        letters = [c.letter for g in groups for c in g.columns]
        assert letters == ["A", "B"]
