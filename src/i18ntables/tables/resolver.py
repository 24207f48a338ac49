"""Message key resolution with default-locale fallback.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING

from i18ntables.errors import MissingTranslation

if TYPE_CHECKING:
    from i18ntables.tables.snapshot import LocaleSnapshot
    from i18ntables.types import LocaleCode, LogicalFileName, MessageKey, Text

__all__ = ["LocaleResolver", "resolve_text"]

logger = logging.getLogger(__name__)


def resolve_text(
    key: MessageKey,
    locale_table: Mapping[MessageKey, Text],
    default_table: Mapping[MessageKey, Text],
) -> Text | None:
    """Return the active locale's text for key, else the default's, else None.

    Example:
        >>> resolve_text("greeting", {}, {"greeting": "Hi"})
        'Hi'
        >>> resolve_text("greeting", {"greeting": "Salut"}, {"greeting": "Hi"})
        'Salut'
        >>> resolve_text("nope", {}, {}) is None
        True
    """
    if key in locale_table:
        return locale_table[key]
    return default_table.get(key)


class LocaleResolver:
    """Resolves keys against a locale snapshot and records every miss.

    A miss is a key absent from both the active and the default locale. Misses
    are always recorded; ``fail_on_missing`` only tells the driver to raise
    MissingTranslationError for them once the build is complete.

    Attributes:
        fail_on_missing: Whether recorded misses should fail the run
    """

    __slots__ = ("_missing", "_seen", "_snapshot", "fail_on_missing")

    def __init__(self, snapshot: LocaleSnapshot, *, fail_on_missing: bool = False) -> None:
        self._snapshot = snapshot
        self.fail_on_missing = fail_on_missing
        self._missing: list[MissingTranslation] = []
        self._seen: set[MissingTranslation] = set()

    @property
    def missing(self) -> tuple[MissingTranslation, ...]:
        """Misses recorded so far, in discovery order, without duplicates."""
        return tuple(self._missing)

    def resolve(
        self, locale: LocaleCode, key: MessageKey, logical_name: LogicalFileName
    ) -> Text | None:
        """Resolve key for locale, recording a miss if neither table has it."""
        snapshot = self._snapshot
        locale_table = snapshot.table(locale)
        text = resolve_text(key, locale_table, snapshot.default_table)
        if text is None:
            record = MissingTranslation(locale, key, logical_name)
            if record not in self._seen:
                self._seen.add(record)
                self._missing.append(record)
                if not self.fail_on_missing:
                    logger.warning(
                        "No text for '%s' in locale '%s' or default '%s'",
                        key,
                        locale,
                        snapshot.default_locale,
                    )
        elif key not in locale_table and locale != snapshot.default_locale:
            logger.debug("'%s' in locale '%s' falls back to '%s'", key, locale, snapshot.default_locale)
        return text
