"""Persisting locale tables: one JSON file per locale.

Output layout:
    <root>/<locale>.text.json

File content is a compact JSON object mapping logical file names to objects
mapping message keys to text. Unresolved keys are written as ``null``.

Every locale is attempted even when an earlier one fails; failures are
reported per locale in the returned WriteSummary.

Python 3.13+.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from collections.abc import Mapping
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from i18ntables.constants import OUTPUT_ENCODING, OUTPUT_SUFFIX
from i18ntables.enums import WriteStatus
from i18ntables.errors import WriteFailure

if TYPE_CHECKING:
    from i18ntables.types import LocaleCode, LocaleTable, LocaleTableStore

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Sink protocol and implementation
    "TableSink",
    "FileSystemSink",
    # Paths
    "locale_output_path",
    "strip_query",
    # Serialization
    "read_table",
    "serialize_table",
    # Writing
    "write_tables",
    "WriteResult",
    "WriteSummary",
]

logger = logging.getLogger(__name__)


class TableSink(Protocol):
    """Destination that durably stores bytes at a path.

    Implementations must create missing parent directories.
    """

    def write_bytes(self, path: Path, data: bytes) -> None:
        """Persist data at path.

        Raises:
            OSError: If directories cannot be created or the write fails
            ValueError: If the sink rejects the data
        """


class FileSystemSink:
    """Writes files atomically: temp sibling, fsync, then rename over the target."""

    __slots__ = ()

    def write_bytes(self, path: Path, data: bytes) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "wb") as handle:
                handle.write(data)
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise


def strip_query(path: str | os.PathLike[str]) -> str:
    """Drop a ``?query`` suffix from a path string.

    Example:
        >>> strip_query("dist/en.text.json?v=3")
        'dist/en.text.json'
    """
    return os.fspath(path).split("?", 1)[0]


def locale_output_path(root: str | os.PathLike[str], locale: LocaleCode) -> Path:
    """Return ``<root>/<locale>.text.json`` with any query suffix removed."""
    return Path(strip_query(os.path.join(strip_query(root), f"{locale}{OUTPUT_SUFFIX}")))


def serialize_table(table: LocaleTable) -> bytes:
    """Encode one locale table as compact UTF-8 JSON, preserving insertion order."""
    return json.dumps(table, ensure_ascii=False, separators=(",", ":")).encode(OUTPUT_ENCODING)


def read_table(path: str | os.PathLike[str]) -> LocaleTable:
    """Load a table previously written by write_tables()."""
    return json.loads(Path(path).read_text(encoding=OUTPUT_ENCODING))


@dataclass(frozen=True, slots=True)
class WriteResult:
    """Result of writing a single locale table.

    Attributes:
        locale: Locale code of the table
        path: Destination file
        status: Write status (success, error)
        error: Exception if status is ERROR, None otherwise
    """

    locale: LocaleCode
    path: Path
    status: WriteStatus
    error: Exception | None = None

    @property
    def is_success(self) -> bool:
        """Check if the table was written."""
        return self.status == WriteStatus.SUCCESS

    @property
    def is_error(self) -> bool:
        """Check if writing the table failed."""
        return self.status == WriteStatus.ERROR


@dataclass(frozen=True, slots=True)
class WriteSummary:
    """Immutable aggregate of per-locale write results.

    Attributes:
        results: Write results in locale order
    """

    results: tuple[WriteResult, ...]

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return f"WriteSummary(total={len(self.results)}, ok={self.successful}, errors={self.errors})"

    @property
    def successful(self) -> int:
        """Number of tables written."""
        return sum(1 for r in self.results if r.is_success)

    @property
    def errors(self) -> int:
        """Number of failed writes."""
        return sum(1 for r in self.results if r.is_error)

    @property
    def all_successful(self) -> bool:
        """Check if every locale table was written."""
        return self.errors == 0

    @property
    def paths(self) -> tuple[Path, ...]:
        """Paths of successfully written tables."""
        return tuple(r.path for r in self.results if r.is_success)

    def get_errors(self) -> tuple[WriteResult, ...]:
        """Get all failed results."""
        return tuple(r for r in self.results if r.is_error)

    def raise_on_failure(self) -> None:
        """Raise WriteFailure naming every failed locale, if any failed."""
        failures = self.get_errors()
        if failures:
            raise WriteFailure(failures)


def _write_one(sink: TableSink, locale: LocaleCode, table: LocaleTable, path: Path) -> WriteResult:
    try:
        sink.write_bytes(path, serialize_table(table))
    except (OSError, ValueError, TypeError) as e:
        logger.error("Failed to write table for locale '%s' to %s: %s", locale, path, e)
        return WriteResult(locale=locale, path=path, status=WriteStatus.ERROR, error=e)
    logger.debug("Wrote table for locale '%s' to %s", locale, path)
    return WriteResult(locale=locale, path=path, status=WriteStatus.SUCCESS)


def write_tables(
    store: Mapping[LocaleCode, LocaleTable] | LocaleTableStore,
    root: str | os.PathLike[str],
    *,
    sink: TableSink | None = None,
    max_workers: int = 1,
) -> WriteSummary:
    """Write one file per locale under root.

    Args:
        store: Locale -> table mapping produced by a build
        root: Destination directory (created if missing)
        sink: Byte sink; FileSystemSink when omitted
        max_workers: Parallel writers; 1 writes sequentially

    Every locale is attempted. A table that cannot be serialized (text that
    is not valid UTF-8, values JSON cannot encode) or written is recorded as
    an ERROR result instead of aborting the remaining locales.

    Returns:
        WriteSummary with one result per locale, in store order
    """
    if sink is None:
        sink = FileSystemSink()
    jobs = [(locale, table, locale_output_path(root, locale)) for locale, table in store.items()]

    if max_workers > 1 and len(jobs) > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            futures = [executor.submit(_write_one, sink, *job) for job in jobs]
            results = tuple(future.result() for future in futures)
    else:
        results = tuple(_write_one(sink, *job) for job in jobs)

    summary = WriteSummary(results)
    logger.info("Wrote %d of %d locale table(s) to %s", summary.successful, len(results), root)
    return summary
