"""Exception hierarchy for table extraction.

Hierarchy:
    ExtractorError (base)
    ├─ ConfigurationError (invalid source, routing rule, accessor, locale)
    ├─ MissingTranslationError (strict mode, aggregated once per run)
    └─ WriteFailure (one or more locale tables could not be persisted)

Configuration errors are raised immediately at setup. Missing translations
and write failures are collected during the run and raised once, after every
locale has been processed.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from i18ntables.tables.writer import WriteResult
    from i18ntables.types import LocaleCode, LogicalFileName, MessageKey

__all__ = [
    "ConfigurationError",
    "ExtractorError",
    "MissingTranslation",
    "MissingTranslationError",
    "WriteFailure",
]


class ExtractorError(Exception):
    """Base exception for all i18ntables errors."""


class ConfigurationError(ExtractorError):
    """Invalid setup detected before any scanning.

    Examples:
    - Localization source is not callable
    - Source result is not a locale -> key -> text mapping
    - Default locale missing from the source
    - Invalid glob pattern or routing rule
    """


@dataclass(frozen=True, slots=True)
class MissingTranslation:
    """A message key with no text in either the active or default locale.

    Attributes:
        locale: Locale whose table was being built
        key: Message key extracted from the asset
        logical_name: Logical file the key was found in
    """

    locale: LocaleCode
    key: MessageKey
    logical_name: LogicalFileName

    def __str__(self) -> str:
        return f"{self.locale}: {self.key} (in {self.logical_name!r})"


class MissingTranslationError(ExtractorError):
    """Raised in strict mode when extracted keys resolve to no text.

    Aggregates every missing (locale, key) pair found during one run so the
    driver sees the complete list instead of the first failure.

    Attributes:
        missing: All missing translations, in discovery order
    """

    def __init__(self, missing: tuple[MissingTranslation, ...]) -> None:
        """Initialize MissingTranslationError.

        Args:
            missing: Missing translation records collected by the build
        """
        lines = "\n".join(f"  - {item}" for item in missing)
        super().__init__(f"{len(missing)} missing translation(s):\n{lines}")
        self.missing = missing

    @property
    def keys(self) -> frozenset[MessageKey]:
        """Distinct message keys that could not be resolved."""
        return frozenset(item.key for item in self.missing)

    @property
    def locales(self) -> frozenset[LocaleCode]:
        """Distinct locales with at least one missing key."""
        return frozenset(item.locale for item in self.missing)


class WriteFailure(ExtractorError):
    """One or more locale tables could not be written.

    Raised only after every locale has been attempted, so a failure for one
    locale never prevents writing the others.

    Attributes:
        failures: Failed write results, each naming locale, path and cause
    """

    def __init__(self, failures: tuple[WriteResult, ...]) -> None:
        """Initialize WriteFailure.

        Args:
            failures: Write results with status ERROR
        """
        lines = "\n".join(
            f"  - {result.locale} -> {result.path}: {result.error}" for result in failures
        )
        super().__init__(f"Failed to write {len(failures)} locale table(s):\n{lines}")
        self.failures = failures
