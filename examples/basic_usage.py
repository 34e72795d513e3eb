"""Basic usage example for XTabPorter."""

import asyncio
import sys
from pathlib import Path

from xtabporter import XTabPorter
from xtabporter.utils import filter_out_summary_questions


def parse_example(file_path: Path):
    """Parse a report and print its questions and tables."""
    porter = XTabPorter()

    print(f"Parsing: {file_path}")
    print("-" * 50)

    result = porter.parse_file(file_path)

    print(f"Project key: {result.project_key}")
    print(f"Questions: {len(result.questions)}")
    print(f"Tables: {len(result.all_tables())}")

    for question in filter_out_summary_questions(result.questions):
        print(f"\n{question.id}: {question.description}")
        for table in question.tables:
            columns = ", ".join(f"{c.letter}={c.label}" for c in table.flat_columns[:5])
            print(f"  Table {table.table_id} [{table.header_id}] base={table.base!r}")
            print(f"    Base size: {table.base_size:g}")
            print(f"    Columns: {columns}")
            print(f"    Rows: {len(table.rows)}")

    if result.warnings:
        print("\nWarnings:")
        for warning in result.warnings:
            print(f"  {warning.code.value}: {warning.message}")


def mapping_example(file_path: Path):
    """Preview the first table and infer a mapping for a new export layout."""
    porter = XTabPorter()

    preview = porter.inspect_file(file_path)
    print(f"\nFirst table on '{preview.sheet_name}' at row {preview.table_start_row + 1}")
    for row in preview.cells[:8]:
        print("  | " + " | ".join(cell[:12] for cell in row[:6]))

    mapping = porter.suggest_mapping(preview)
    print("\nSuggested mapping:")
    for key, value in mapping.model_dump(by_alias=True).items():
        print(f"  {key}: {value}")

    return mapping


async def async_example(file_paths: list[Path]):
    """Parse several reports concurrently."""
    porter = XTabPorter()
    results = await asyncio.gather(*(porter.parse_file_async(path) for path in file_paths))
    for path, result in zip(file_paths, results):
        print(f"{path.name}: {len(result.all_tables())} tables, {len(result.warnings)} warnings")


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("Usage: python basic_usage.py <report.xlsx> [more.xlsx ...]")
        sys.exit(1)

    paths = [Path(arg) for arg in sys.argv[1:]]
    mapping_example(paths[0])
    parse_example(paths[0])
    asyncio.run(async_example(paths))
