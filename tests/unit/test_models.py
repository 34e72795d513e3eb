"""Tests for the pydantic data models."""

import json

import pytest
from pydantic import ValidationError as PydanticValidationError

from xtabporter.models import (
    CellRange,
    Column,
    ColumnGroup,
    DataRow,
    MappingPreview,
    ParseMapping,
    ParseResult,
    Question,
    Table,
    WorkbookData,
)


@pytest.fixture
def table() -> Table:
    return Table(
        table_id="1A",
        header_id="HEADER A",
        header_name="用户",
        base="B1. ALL",
        base_size=200.0,
        column_groups=[
            ColumnGroup(
                group_name="城市",
                columns=[
                    Column(letter="A", label="成都市区(A)", sheet_col_index=1),
                    Column(letter="B", label="成都郊区(B)", sheet_col_index=2),
                ],
            ),
            ColumnGroup(
                group_name="年龄", columns=[Column(letter="C", label="18-34", sheet_col_index=3)]
            ),
        ],
        rows=[
            DataRow(label="Total", is_total=True, abs_values=[200.0, 120.0, 80.0]),
            DataRow(label="锦江区", abs_values=[45.0, 23.0, None]),
        ],
        abs_start_row_index=0,
    )


class TestCellRange:
    def test_excel_range(self):
        rng = CellRange(start_row=4, start_col=1, end_row=5, end_col=2)
        assert rng.excel_range == "B5:C6"
        assert rng.row_count == 2
        assert rng.col_count == 2

    def test_contains(self):
        rng = CellRange(start_row=0, start_col=0, end_row=1, end_col=1)
        assert rng.contains(1, 1)
        assert not rng.contains(2, 0)

    def test_end_before_start_rejected(self):
        with pytest.raises(PydanticValidationError):
            CellRange(start_row=3, start_col=0, end_row=2, end_col=0)


class TestParseMapping:
    def test_defaults(self):
        mapping = ParseMapping()
        assert (
            mapping.question_row_offset,
            mapping.header_row_offset,
            mapping.base_row_offset,
            mapping.group_row_offset,
            mapping.column_row_offset,
            mapping.data_start_row_offset,
        ) == (1, 2, 3, 4, 5, 6)
        assert mapping.row_label_col_index == 0
        assert mapping.data_start_col_index == 1

    def test_camel_case_round_trip(self):
        dumped = ParseMapping().model_dump(by_alias=True)
        assert dumped["dataStartRowOffset"] == 6
        assert ParseMapping.model_validate(dumped) == ParseMapping()

    def test_data_must_follow_columns(self):
        with pytest.raises(PydanticValidationError):
            ParseMapping(column_row_offset=5, data_start_row_offset=5)

    @pytest.mark.parametrize(
        "field, value",
        [("row_label_col_index", 1), ("data_start_col_index", 0), ("base_row_offset", -1)],
    )
    def test_out_of_range_rejected(self, field, value):
        with pytest.raises(PydanticValidationError):
            ParseMapping(**{field: value})

    def test_frozen(self):
        with pytest.raises(PydanticValidationError):
            ParseMapping().question_row_offset = 2


class TestMappingPreview:
    def test_title_row_index(self):
        preview = MappingPreview(
            sheet_name="Abs", table_start_row=12, preview_start_row=10, cells=[]
        )
        assert preview.title_row_index == 2


class TestWorkbookData:
    def test_from_rows_stringifies(self):
        workbook = WorkbookData.from_rows({"Abs": [["Total", 45, None, 1.5]]})
        assert workbook.sheets[0].rows == [["Total", "45", "", "1.5"]]

    def test_find_sheet_normalizes_names(self):
        workbook = WorkbookData.from_rows({" ABS ": [], "%SIG": []})
        assert workbook.find_sheet("abs").name == " ABS "
        assert workbook.find_sheet("%sig").name == "%SIG"
        assert workbook.find_sheet("%") is None

    def test_find_sheet_last_duplicate_wins(self):
        workbook = WorkbookData.from_rows({"Abs": [["first"]], "abs": [["second"]]})
        assert workbook.find_sheet("abs").rows == [["second"]]

    def test_sheet_bounds(self):
        workbook = WorkbookData.from_rows({"S": [["a"], ["b", "c"]]})
        sheet = workbook.get_sheet_by_name("S")
        assert sheet.max_row == 1
        assert sheet.max_column == 1
        assert sheet.get_cell(1, 1) == "c"
        assert sheet.get_cell(0, 1) == ""


class TestTable:
    def test_flat_columns(self, table):
        assert [c.letter for c in table.flat_columns] == ["A", "B", "C"]

    def test_column_index(self, table):
        assert table.column_index("C") == 2
        assert table.column_index("Z") == -1

    def test_total_row(self, table):
        assert table.total_row.label == "Total"

    def test_values_align_with_columns(self, table):
        assert all(len(row.abs_values) == len(table.flat_columns) for row in table.rows)


class TestParseResult:
    def test_lookups(self, table):
        result = ParseResult(
            project_key="abc", questions=[Question(id="Q101", description="d", tables=[table])]
        )
        assert result.all_tables() == [table]
        assert result.get_table("1A") is table
        assert result.get_table("9") is None
        assert result.get_question("Q101").description == "d"

    def test_json_uses_camel_case(self, table):
        result = ParseResult(
            project_key="abc", questions=[Question(id="Q101", description="d", tables=[table])]
        )
        payload = json.loads(result.to_json())
        assert payload["projectKey"] == "abc"
        first_table = payload["questions"][0]["tables"][0]
        assert first_table["tableId"] == "1A"
        assert first_table["baseSize"] == 200.0
        assert first_table["rows"][1]["absValues"] == [45.0, 23.0, None]
        assert first_table["columnGroups"][0]["columns"][0]["sheetColIndex"] == 1
