"""Type aliases for the extraction domain.

Provides semantic type aliases used throughout the package and by host
pipelines when annotating call sites.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Callable, Mapping

__all__ = [
    "LocaleCode",
    "LocaleData",
    "LocaleTable",
    "LocaleTableStore",
    "LocalizationSource",
    "LogicalFileName",
    "MessageKey",
    "Text",
]

type LocaleCode = str
"""Locale identifier (e.g., 'en', 'fr', 'pt-BR')."""

type MessageKey = str
"""Key extracted from an accessor call site (``__.greeting`` -> 'greeting')."""

type LogicalFileName = str
"""Stable, hash-independent name of an output artifact (e.g., 'app')."""

type Text = str
"""Localized text for a single message key."""

type LocaleData = Mapping[LocaleCode, Mapping[MessageKey, Text]]
"""Snapshot returned by a localization source: locale -> key -> text."""

type LocalizationSource = Callable[[], LocaleData]
"""Zero-argument callable producing the locale data for one run."""

type LocaleTable = dict[LogicalFileName, dict[MessageKey, Text | None]]
"""Per-locale output table: logical file -> key -> resolved text."""

type LocaleTableStore = dict[LocaleCode, LocaleTable]
"""All per-locale tables produced by one run."""
