"""Main XTabPorter class."""

import asyncio
import logging
from pathlib import Path

from .config import Config
from .detectors.mapping_inference import MappingInferenceEngine
from .models import FileMeta, MappingPreview, ParseMapping, ParseResult, WorkbookData
from .parsing import inspect_workbook, parse_workbook
from .readers import ExcelReader
from .readers.excel_reader import Source
from .utils.logging_context import FileContext, setup_contextual_logging

logger = logging.getLogger(__name__)


class XTabPorter:
    """Main class for parsing cross-tabulation report workbooks."""

    def __init__(self, config: Config | None = None, **kwargs):
        """Initialize XTabPorter.

        Args:
            config: Configuration object. If None, loads from environment.
            **kwargs: Config overrides
        """
        if config is None:
            config = Config.from_env()

        for key, value in kwargs.items():
            if hasattr(config, key):
                setattr(config, key, value)

        self.config = config
        self._inference = MappingInferenceEngine()
        self._setup_logging()

        logger.debug(f"XTabPorter initialized with config: {config}")

    def _setup_logging(self) -> None:
        """Setup logging configuration."""
        setup_contextual_logging(
            level=getattr(logging, self.config.log_level.upper(), logging.INFO),
            log_file=str(self.config.log_file) if self.config.log_file else None,
        )

    def parse_file(
        self,
        source: Source,
        mapping: ParseMapping | None = None,
        file_meta: FileMeta | None = None,
    ) -> ParseResult:
        """Parse a workbook file.

        Args:
            source: Path, raw bytes or binary file object
            mapping: Layout mapping. When None, the configured default is used,
                or an inferred one if ``auto_infer_mapping`` is set.
            file_meta: Size/modification time for the project key. Read from
                the file system for paths; required for a stable key otherwise.

        Returns:
            ParseResult with questions, tables and warnings

        Raises:
            FileNotFoundError: Path does not exist
            ValidationError: File exceeds the configured size limit
            FileTypeError: File is not a readable xlsx workbook
            StructuralError: A required sheet is missing
        """
        data = self._as_bytes_or_path(source)
        file_meta = file_meta or self._file_meta(data)

        with FileContext(file_meta.name or "<memory>"):
            workbook = ExcelReader(data, self.config.max_file_size_mb).read()
            if mapping is None:
                mapping = self.config.default_mapping()
                if self.config.auto_infer_mapping:
                    preview = self.inspect_workbook(workbook, mapping)
                    mapping = self._inference.suggest(preview, mapping)
            return self.parse_workbook(workbook, file_meta, mapping)

    def parse_workbook(
        self, workbook: WorkbookData, file_meta: FileMeta, mapping: ParseMapping | None = None
    ) -> ParseResult:
        """Parse an already loaded workbook."""
        return parse_workbook(workbook, file_meta, mapping or self.config.default_mapping())

    def inspect_file(self, source: Source, mapping: ParseMapping | None = None) -> MappingPreview:
        """Read a file and return the preview window around its first table."""
        data = self._as_bytes_or_path(source)
        workbook = ExcelReader(data, self.config.max_file_size_mb).read()
        return self.inspect_workbook(workbook, mapping)

    def inspect_workbook(
        self, workbook: WorkbookData, mapping: ParseMapping | None = None
    ) -> MappingPreview:
        """Preview window around the first table, sized by the config."""
        return inspect_workbook(
            workbook,
            mapping or self.config.default_mapping(),
            rows_above=self.config.preview_rows_above,
            rows_below=self.config.preview_rows_below,
            min_columns=self.config.preview_min_columns,
            extra_columns=self.config.preview_extra_columns,
        )

    def suggest_mapping(
        self, preview: MappingPreview, base: ParseMapping | None = None
    ) -> ParseMapping:
        """Infer a mapping from a preview window."""
        return self._inference.suggest(preview, base or self.config.default_mapping())

    def suggest_mapping_for_file(
        self, source: Source, base: ParseMapping | None = None
    ) -> ParseMapping:
        """Inspect a file and infer a mapping for it."""
        return self.suggest_mapping(self.inspect_file(source, base), base)

    async def parse_file_async(
        self,
        source: Source,
        mapping: ParseMapping | None = None,
        file_meta: FileMeta | None = None,
    ) -> ParseResult:
        """Run ``parse_file`` on a worker thread so the event loop stays responsive."""
        return await asyncio.to_thread(self.parse_file, source, mapping, file_meta)

    async def inspect_file_async(
        self, source: Source, mapping: ParseMapping | None = None
    ) -> MappingPreview:
        """Run ``inspect_file`` on a worker thread."""
        return await asyncio.to_thread(self.inspect_file, source, mapping)

    @staticmethod
    def _as_bytes_or_path(source: Source) -> bytes | Path:
        if isinstance(source, bytes):
            return source
        if isinstance(source, str | Path):
            return Path(source)
        return source.read()

    @staticmethod
    def _file_meta(data: bytes | Path) -> FileMeta:
        if isinstance(data, Path):
            if not data.exists():
                raise FileNotFoundError(f"File not found: {data}")
            return FileMeta.from_path(data)
        return FileMeta(size=len(data), last_modified=0)
