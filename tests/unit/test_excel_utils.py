"""Tests for Excel addressing helpers."""

import pytest

from xtabporter.utils.excel_utils import (
    col_index_to_letters,
    letters_to_col_index,
    parse_cell_reference,
    parse_range_reference,
)


class TestColumnLetters:
    @pytest.mark.parametrize(
        "index, letters",
        [
            (0, "A"),
            (1, "B"),
            (25, "Z"),
            (26, "AA"),
            (27, "AB"),
            (52, "BA"),
            (199, "GR"),
            (701, "ZZ"),
            (702, "AAA"),
        ],
    )
    def test_index_to_letters(self, index, letters):
        assert col_index_to_letters(index) == letters

    @pytest.mark.parametrize("letters, index", [("A", 0), ("z", 25), ("AA", 26), ("GR", 199)])
    def test_letters_to_index(self, letters, index):
        assert letters_to_col_index(letters) == index

    def test_negative_index_rejected(self):
        with pytest.raises(ValueError):
            col_index_to_letters(-1)

    @pytest.mark.parametrize("letters", ["", "A1", "$"])
    def test_invalid_letters_rejected(self, letters):
        with pytest.raises(ValueError):
            letters_to_col_index(letters)


class TestReferences:
    def test_cell_reference(self):
        assert parse_cell_reference("B5") == (4, 1)
        assert parse_cell_reference("$AA$10") == (9, 26)

    def test_range_reference(self):
        assert parse_range_reference("B5:C5") == (4, 1, 4, 2)

    def test_single_cell_range(self):
        assert parse_range_reference("D3") == (2, 3, 2, 3)

    def test_invalid_reference(self):
        with pytest.raises(ValueError):
            parse_cell_reference("5B")
