"""Configuration model for XTabPorter."""

from pathlib import Path

from pydantic import BaseModel, Field

from .core.constants import KEYWORDS, PREVIEW
from .models.mapping import ParseMapping


class Config(BaseModel):
    """Configuration for XTabPorter."""

    # Mapping Configuration
    table_title_regex: str = Field(
        KEYWORDS.DEFAULT_TITLE_REGEX, description="Pattern classifying a table title row"
    )
    auto_infer_mapping: bool = Field(
        False,
        description="Infer the mapping from a preview when a file is parsed without one",
    )

    # Preview Window
    preview_rows_above: int = Field(
        PREVIEW.ROWS_ABOVE, ge=0, description="Rows kept above the first table title"
    )
    preview_rows_below: int = Field(
        PREVIEW.ROWS_BELOW, ge=1, description="Rows kept below the first table title"
    )
    preview_min_columns: int = Field(
        PREVIEW.MIN_COLUMNS, ge=1, description="Minimum last column index of the preview"
    )
    preview_extra_columns: int = Field(
        PREVIEW.EXTRA_COLUMNS, ge=0, description="Preview columns past the data start column"
    )

    # Processing Limits
    max_file_size_mb: float = Field(200.0, ge=0.1, description="Maximum file size in MB")

    # Logging
    log_level: str = Field("INFO", description="Logging level")
    log_file: Path | None = Field(None, description="Log file path")

    def default_mapping(self) -> ParseMapping:
        """Default mapping with the configured title pattern."""
        return ParseMapping(table_title_regex=self.table_title_regex)

    @classmethod
    def from_env(cls) -> "Config":
        """Create config from environment variables.

        This method will automatically load from a .env file if present, then read
        configuration from environment variables.
        """
        import os

        from dotenv import load_dotenv

        # Load .env file if it exists (will not override existing env vars)
        load_dotenv()

        log_file = os.getenv("XTABPORTER_LOG_FILE")

        return cls(
            table_title_regex=os.getenv(
                "XTABPORTER_TABLE_TITLE_REGEX", KEYWORDS.DEFAULT_TITLE_REGEX
            ),
            auto_infer_mapping=os.getenv("XTABPORTER_AUTO_INFER_MAPPING", "false").lower()
            == "true",
            preview_rows_above=int(
                os.getenv("XTABPORTER_PREVIEW_ROWS_ABOVE", str(PREVIEW.ROWS_ABOVE))
            ),
            preview_rows_below=int(
                os.getenv("XTABPORTER_PREVIEW_ROWS_BELOW", str(PREVIEW.ROWS_BELOW))
            ),
            preview_min_columns=int(
                os.getenv("XTABPORTER_PREVIEW_MIN_COLUMNS", str(PREVIEW.MIN_COLUMNS))
            ),
            preview_extra_columns=int(
                os.getenv("XTABPORTER_PREVIEW_EXTRA_COLUMNS", str(PREVIEW.EXTRA_COLUMNS))
            ),
            max_file_size_mb=float(os.getenv("XTABPORTER_MAX_FILE_SIZE_MB", "200")),
            log_level=os.getenv("XTABPORTER_LOG_LEVEL", "INFO"),
            log_file=Path(log_file) if log_file else None,
        )
