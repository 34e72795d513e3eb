"""File metadata model."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class FileMeta(BaseModel):
    """Metadata identifying one upload of a workbook."""

    model_config = ConfigDict(
        strict=True, frozen=True, alias_generator=to_camel, populate_by_name=True
    )

    size: int = Field(..., ge=0, description="File size in bytes")
    last_modified: int = Field(..., description="Modification time, epoch milliseconds")
    name: str | None = Field(None, description="File name")

    @classmethod
    def from_path(cls, path: str | Path) -> "FileMeta":
        """Read size and modification time from the file system."""
        path = Path(path)
        stat = path.stat()
        return cls(size=stat.st_size, last_modified=int(stat.st_mtime * 1000), name=path.name)
