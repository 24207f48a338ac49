"""Per-locale table construction and persistence.

Submodules:
    snapshot - LocaleSnapshot, take_snapshot (one source call per run)
    resolver - resolve_text, LocaleResolver (default-locale fallback)
    builder  - build_tables, BuildResult (scan assets, assemble store)
    writer   - write_tables, WriteSummary, FileSystemSink (one JSON file per locale)

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from i18ntables.tables.builder import BuildResult, ScannedAsset, build_tables, scan_assets
from i18ntables.tables.resolver import LocaleResolver, resolve_text
from i18ntables.tables.snapshot import LocaleSnapshot, take_snapshot
from i18ntables.tables.writer import (
    FileSystemSink,
    TableSink,
    WriteResult,
    WriteSummary,
    locale_output_path,
    read_table,
    serialize_table,
    strip_query,
    write_tables,
)

__all__ = [
    # Snapshot
    "LocaleSnapshot",
    "take_snapshot",
    # Resolution
    "LocaleResolver",
    "resolve_text",
    # Building
    "BuildResult",
    "ScannedAsset",
    "build_tables",
    "scan_assets",
    # Writing
    "FileSystemSink",
    "TableSink",
    "WriteResult",
    "WriteSummary",
    "locale_output_path",
    "read_table",
    "serialize_table",
    "strip_query",
    "write_tables",
]
