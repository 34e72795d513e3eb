"""Layout mapping models: where each structural row lives inside a table block."""

from typing import NamedTuple

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from ..core.constants import KEYWORDS


class ParseMapping(BaseModel):
    """Row offsets (relative to a table's title row) and the data start column."""

    model_config = ConfigDict(
        strict=True, frozen=True, alias_generator=to_camel, populate_by_name=True
    )

    table_title_regex: str = Field(
        KEYWORDS.DEFAULT_TITLE_REGEX, description="Pattern classifying a table title row"
    )
    question_row_offset: int = Field(1, ge=0, description="Row holding question id/description")
    header_row_offset: int = Field(2, ge=0, description="Row holding the 'Header:' line")
    base_row_offset: int = Field(3, ge=0, description="Row holding the 'Base:' line")
    group_row_offset: int = Field(4, ge=0, description="Row holding column group names")
    column_row_offset: int = Field(5, ge=0, description="Row holding column labels")
    data_start_row_offset: int = Field(6, ge=0, description="First row of data records")
    row_label_col_index: int = Field(0, ge=0, le=0, description="Column holding row labels")
    data_start_col_index: int = Field(1, ge=1, description="First column holding data")

    @model_validator(mode="after")
    def _data_after_columns(self) -> "ParseMapping":
        if self.data_start_row_offset < self.column_row_offset + 1:
            raise ValueError(
                f"data_start_row_offset ({self.data_start_row_offset}) must be below "
                f"column_row_offset ({self.column_row_offset})"
            )
        return self


def default_parse_mapping() -> ParseMapping:
    """Mapping matching the common 'Table N' export layout."""
    return ParseMapping()


class TablePosition(NamedTuple):
    """Row range of one table inside a normalized grid (inclusive bounds)."""

    table_id: str
    start: int
    end: int


class MappingPreview(BaseModel):
    """A bounded window of the Abs sheet used to build or check a mapping."""

    model_config = ConfigDict(
        strict=True, frozen=True, alias_generator=to_camel, populate_by_name=True
    )

    sheet_name: str = Field(..., description="Sheet the preview was taken from")
    table_start_row: int = Field(..., ge=0, description="Grid row of the first table title")
    preview_start_row: int = Field(..., ge=0, description="Grid row of the first preview row")
    cells: list[list[str]] = Field(default_factory=list, description="Preview cell text")

    @property
    def title_row_index(self) -> int:
        """Index of the title row within ``cells``."""
        return max(0, self.table_start_row - self.preview_start_row)
