"""Pytest configuration and shared fixtures."""

from collections.abc import Callable
from typing import Any

import pytest

from xtabporter.config import Config
from xtabporter.models import FileMeta, ParseMapping, WorkbookData
from xtabporter.models.sheet_data import CellRange

Rows = list[list[Any]]


@pytest.fixture
def config() -> Config:
    """Configuration with library defaults, independent of the environment."""
    return Config()


@pytest.fixture
def default_mapping() -> ParseMapping:
    return ParseMapping()


@pytest.fixture
def file_meta() -> FileMeta:
    return FileMeta(size=2048, last_modified=1_700_000_000_000, name="report.xlsx")


@pytest.fixture
def make_block() -> Callable[..., Rows]:
    """Factory for one table block in the default 'Table N' layout.

    Row order: title, question, header, base, group row, column row, data rows.
    """

    def _make(
        title: str,
        data: dict[str, list[Any]],
        question: str = "(Q101) 题目",
        header: str = "Header: HEADER A 用户",
        base: str = "Base: B1. ALL",
        groups: tuple[str, str] = ("城市", "城市"),
        labels: tuple[str, str] = ("成都市区(A)", "成都郊区(B)"),
    ) -> Rows:
        rows: Rows = [
            [title],
            [question],
            [header],
            [base],
            ["", *groups],
            ["", *labels],
        ]
        rows.extend([label, *values] for label, values in data.items())
        return rows

    return _make


@pytest.fixture
def make_workbook() -> Callable[..., WorkbookData]:
    """Factory assembling a workbook with the required sheet set."""

    def _make(
        abs_rows: Rows,
        pct_rows: Rows,
        sig_rows: Rows | None = None,
        merges: list[CellRange] | None = None,
    ) -> WorkbookData:
        sheets: dict[str, Rows] = {
            "Table of Contents": [["Table of Contents"], ["Table 1A", "(Q101) 题目"]],
            "Abs": abs_rows,
            "%": pct_rows,
        }
        if sig_rows is not None:
            sheets["%Sig"] = sig_rows
        merged = {name: list(merges or []) for name in sheets if name != "Table of Contents"}
        return WorkbookData.from_rows(sheets, merged)

    return _make


@pytest.fixture
def group_merge() -> CellRange:
    """B5:C5, the merged '城市' group header of the first table."""
    return CellRange(start_row=4, start_col=1, end_row=4, end_col=2)


@pytest.fixture
def abs_rows(make_block) -> Rows:
    return make_block(
        "Table 1A", {"Total": [200, 120], "锦江区": [45, 23]}, groups=("城市", "")
    )


@pytest.fixture
def pct_rows(make_block) -> Rows:
    return make_block(
        "Table 1A", {"Total": ["100%", "100%"], "锦江区": [24.1, 12.3]}, groups=("城市", "")
    )


@pytest.fixture
def sig_rows(make_block) -> Rows:
    return make_block(
        "Table 1A", {"Total": ["", ""], "锦江区": ["B", "A"]}, groups=("城市", "")
    )


@pytest.fixture
def crosstab_workbook(make_workbook, abs_rows, pct_rows, sig_rows, group_merge) -> WorkbookData:
    """Single-table workbook with Abs, % and %Sig sheets."""
    return make_workbook(abs_rows, pct_rows, sig_rows, merges=[group_merge])


@pytest.fixture
def workbook_without_sig(make_workbook, abs_rows, pct_rows, group_merge) -> WorkbookData:
    """Single-table workbook with no %Sig sheet."""
    return make_workbook(abs_rows, pct_rows, merges=[group_merge])
