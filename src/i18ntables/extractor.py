"""Driver facade tying the extraction phases together.

A host build pipeline calls three phases, or run() for all of them:

1. load_locales() - snapshot the localization source (once per run)
2. build(assets)  - scan assets and assemble a fresh table store
3. emit(result)   - write one ``<locale>.text.json`` per locale

The extractor keeps no table state between runs. Each build returns a new
store owned by the caller, so runs are isolated from one another.

Example:
    >>> def source():
    ...     return {"en": {"greeting": "Hi"}, "fr": {}}
    >>> extractor = TableExtractor(source, ExtractorConfig(hashed_filenames=False))
    >>> result = extractor.build([Asset("app.js", "x(__.greeting);")])
    >>> result.store["fr"]
    {'app': {'greeting': 'Hi'}}

Python 3.13+.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING

from i18ntables.assets import Asset, assets_from_mapping
from i18ntables.config import ExtractorConfig
from i18ntables.errors import ConfigurationError, MissingTranslationError
from i18ntables.patterns import build_pattern
from i18ntables.tables.builder import BuildResult, build_tables
from i18ntables.tables.resolver import LocaleResolver
from i18ntables.tables.snapshot import LocaleSnapshot, take_snapshot
from i18ntables.tables.writer import TableSink, WriteSummary, write_tables

if TYPE_CHECKING:
    from i18ntables.types import LocalizationSource

__all__ = ["TableExtractor"]

logger = logging.getLogger(__name__)


class TableExtractor:
    """Extracts per-locale translation tables from build output.

    Attributes:
        config: Run configuration (immutable)
    """

    __slots__ = ("_pattern", "_router", "_sink", "_source", "config")

    def __init__(
        self,
        localization: LocalizationSource,
        config: ExtractorConfig | None = None,
        *,
        sink: TableSink | None = None,
    ) -> None:
        """Validate setup and compile the scan pattern and routing rules.

        Args:
            localization: Zero-argument callable returning locale -> key -> text
            config: Run configuration; defaults when omitted
            sink: Destination for table bytes; the filesystem when omitted

        Raises:
            ConfigurationError: If localization is not callable, or a routing
                rule or accessor name is invalid
        """
        if not callable(localization):
            msg = (
                "localization source must be a callable returning a locale map, "
                "like: lambda: {'en': {'greeting': 'Hi'}, 'fr': {}}"
            )
            raise ConfigurationError(msg)
        self._source = localization
        self.config = config if config is not None else ExtractorConfig()
        self._sink = sink
        self._pattern = build_pattern(self.config.accessor_names)
        self._router = self.config.router()

    def __repr__(self) -> str:
        return (
            f"TableExtractor(accessors={self.config.accessor_names!r}, "
            f"rules={len(self._router)}, default_locale={self.config.default_locale!r})"
        )

    def load_locales(self) -> LocaleSnapshot:
        """Call the localization source and snapshot its data.

        Raises:
            ConfigurationError: If the source result is malformed or lacks the
                default locale
        """
        return take_snapshot(
            self._source,
            default_locale=self.config.default_locale,
            validate_locales=self.config.validate_locales,
        )

    def build(
        self,
        assets: Iterable[Asset] | Mapping[str, str],
        *,
        snapshot: LocaleSnapshot | None = None,
    ) -> BuildResult:
        """Scan assets and build a fresh table store.

        Args:
            assets: Output artifacts, or a ``{name: content}`` mapping
            snapshot: Locale data from load_locales(); taken now when omitted

        Returns:
            BuildResult with the store and any missing translations

        Raises:
            MissingTranslationError: If fail_on_missing is set and any key
                resolves to no text in the active or default locale
        """
        if snapshot is None:
            snapshot = self.load_locales()
        if isinstance(assets, Mapping):
            assets = assets_from_mapping(assets)

        resolver = LocaleResolver(snapshot, fail_on_missing=self.config.fail_on_missing)
        result = build_tables(
            snapshot,
            assets,
            pattern=self._pattern,
            router=self._router,
            hashed=self.config.hashed_filenames,
            include=self.config.asset_filter,
            resolver=resolver,
        )
        if result.has_missing and self.config.fail_on_missing:
            raise MissingTranslationError(result.missing)
        return result

    def emit(
        self,
        result: BuildResult,
        default_output_root: str | os.PathLike[str] | None = None,
    ) -> WriteSummary:
        """Write each locale table; failures are reported in the summary.

        Args:
            result: Output of build()
            default_output_root: The build's own output directory
        """
        root = self.config.resolve_output_root(default_output_root)
        return write_tables(
            result.store,
            root,
            sink=self._sink,
            max_workers=self.config.max_workers,
        )

    def run(
        self,
        assets: Iterable[Asset] | Mapping[str, str],
        default_output_root: str | os.PathLike[str] | None = None,
    ) -> WriteSummary:
        """Snapshot locales, build tables and write them.

        Raises:
            ConfigurationError: If the localization source is invalid
            MissingTranslationError: In strict mode, before anything is written
            WriteFailure: If any locale table could not be written, after all
                locales were attempted
        """
        snapshot = self.load_locales()
        result = self.build(assets, snapshot=snapshot)
        summary = self.emit(result, default_output_root)
        summary.raise_on_failure()
        return summary
