"""Detection strategies for table boundaries and layout mappings."""

from .mapping_inference import MappingInferenceEngine, suggest_parse_mapping
from .table_locator import extract_table_id, find_table_starts, locate_tables

__all__ = [
    "MappingInferenceEngine",
    "suggest_parse_mapping",
    "extract_table_id",
    "find_table_starts",
    "locate_tables",
]
