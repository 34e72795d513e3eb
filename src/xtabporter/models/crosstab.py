"""Cross-tabulation result models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _ResultModel(BaseModel):
    """Immutable result model serialized with camelCase keys."""

    model_config = ConfigDict(
        strict=True, frozen=True, alias_generator=to_camel, populate_by_name=True
    )


class WarningCode(str, Enum):
    """Codes of non-fatal parse warnings."""

    ROW_MISMATCH = "ROW_MISMATCH"
    MISSING_PERCENT_TABLE = "MISSING_PERCENT_TABLE"
    MISSING_SIG_TABLE = "MISSING_SIG_TABLE"


class Column(_ResultModel):
    """A single data column of a table."""

    letter: str = Field(..., description="Stable short identifier, e.g. 'A'")
    label: str = Field(..., description="Column label text")
    sheet_col_index: int = Field(..., ge=0, description="Physical column index")


class ColumnGroup(_ResultModel):
    """Columns sharing the same first-level header text."""

    group_name: str = Field(..., description="Group header text, '' when ungrouped")
    columns: list[Column] = Field(default_factory=list, description="Columns in sheet order")


class DataRow(_ResultModel):
    """One answer row, with values aligned to the table's flattened columns."""

    label: str = Field(..., description="Row label")
    is_total: bool = Field(False, description="Row is a total row")
    abs_values: list[float | None] = Field(default_factory=list, description="Absolute counts")
    pct_values: list[float | None] = Field(default_factory=list, description="Percentages")
    sig_values: list[str] = Field(default_factory=list, description="Significance letters")


class Table(_ResultModel):
    """One cross-tab table broken out by a banner of column groups."""

    table_id: str = Field(..., description="Id derived from the title, e.g. '1A'")
    header_id: str = Field(..., description="Banner id, e.g. 'HEADER A'")
    header_name: str = Field(..., description="Banner name")
    base: str = Field("", description="Base description")
    base_size: float = Field(0.0, description="Base size from the first data cell")
    column_groups: list[ColumnGroup] = Field(default_factory=list, description="Column groups")
    rows: list[DataRow] = Field(default_factory=list, description="Data rows in sheet order")
    abs_start_row_index: int = Field(..., ge=0, description="Title row in the Abs grid")

    @property
    def flat_columns(self) -> list[Column]:
        """All columns in left-to-right order, matching the value arrays."""
        return [column for group in self.column_groups for column in group.columns]

    def column_index(self, letter: str) -> int:
        """Index into the row value arrays for a column letter, -1 if absent."""
        for index, column in enumerate(self.flat_columns):
            if column.letter == letter:
                return index
        return -1

    @property
    def total_row(self) -> DataRow | None:
        """First total row, if any."""
        return next((row for row in self.rows if row.is_total), None)


class Question(_ResultModel):
    """A survey question with every table that reports on it."""

    id: str = Field(..., description="Question id, e.g. 'Q101'")
    description: str = Field(..., description="Full question text")
    tables: list[Table] = Field(default_factory=list, description="Tables in first-seen order")


class ParseWarning(_ResultModel):
    """A non-fatal problem met during extraction."""

    code: WarningCode = Field(..., description="Warning code")
    message: str = Field(..., description="Human readable message")
    table_id: str | None = Field(None, description="Affected table")


class ParseResult(_ResultModel):
    """Complete output of one parse."""

    project_key: str = Field(..., description="Stable key identifying the upload")
    questions: list[Question] = Field(default_factory=list, description="Questions found")
    warnings: list[ParseWarning] = Field(default_factory=list, description="Collected warnings")

    def all_tables(self) -> list[Table]:
        """Every table, in Abs sheet order within question order."""
        return [table for question in self.questions for table in question.tables]

    def get_table(self, table_id: str) -> Table | None:
        return next((t for t in self.all_tables() if t.table_id == table_id), None)

    def get_question(self, question_id: str) -> Question | None:
        return next((q for q in self.questions if q.id == question_id), None)

    def to_json(self, indent: int | None = None) -> str:
        """Serialize with camelCase keys."""
        return self.model_dump_json(by_alias=True, indent=indent)
