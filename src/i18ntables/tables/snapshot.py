"""Per-run snapshot of the localization source.

The source is called exactly once per run. Its result is validated and
copied so that later changes to the source's data cannot reach a run that
is already in progress.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from i18ntables.constants import DEFAULT_LOCALE
from i18ntables.errors import ConfigurationError
from i18ntables.locale_utils import validate_locale_code
from i18ntables.types import LocaleCode, LocalizationSource, MessageKey, Text

__all__ = ["LocaleSnapshot", "take_snapshot"]

logger = logging.getLogger(__name__)

# Locale codes become output file names
_PATH_SEPARATORS = ("/", "\\", "\0")

_EMPTY: Mapping[MessageKey, Text] = MappingProxyType({})


@dataclass(frozen=True, slots=True)
class LocaleSnapshot:
    """Immutable locale data for one run.

    Attributes:
        data: Locale code -> read-only key -> text mapping, in source order
        default_locale: Locale used as fallback for missing keys
    """

    data: Mapping[LocaleCode, Mapping[MessageKey, Text]]
    default_locale: LocaleCode = DEFAULT_LOCALE

    @property
    def locales(self) -> tuple[LocaleCode, ...]:
        """Locale codes in source order."""
        return tuple(self.data)

    @property
    def default_table(self) -> Mapping[MessageKey, Text]:
        """Key -> text mapping of the default locale."""
        return self.data.get(self.default_locale, _EMPTY)

    def table(self, locale: LocaleCode) -> Mapping[MessageKey, Text]:
        """Key -> text mapping for locale (empty if unknown)."""
        return self.data.get(locale, _EMPTY)


def take_snapshot(
    source: LocalizationSource,
    *,
    default_locale: LocaleCode = DEFAULT_LOCALE,
    validate_locales: bool = False,
) -> LocaleSnapshot:
    """Call the localization source once and freeze its result.

    Args:
        source: Zero-argument callable returning locale -> key -> text
        default_locale: Locale that must be present and is used as fallback
        validate_locales: Reject locale codes Babel does not recognize

    Returns:
        LocaleSnapshot with copied per-locale tables

    Raises:
        ConfigurationError: If the result is malformed, a locale code is
            a path rather than a file name component, a locale code is unknown
            (with validate_locales), or the default locale is missing
    """
    raw = source()
    if not isinstance(raw, Mapping):
        msg = (
            "Localization source must return a mapping of locale code to "
            f"key/text mapping, got {type(raw).__name__}"
        )
        raise ConfigurationError(msg)

    data: dict[LocaleCode, Mapping[MessageKey, Text]] = {}
    for locale, messages in raw.items():
        if not isinstance(locale, str) or not locale:
            msg = f"Locale codes must be non-empty strings, got: {locale!r}"
            raise ConfigurationError(msg)
        if any(sep in locale for sep in _PATH_SEPARATORS):
            msg = f"Locale code {locale!r} is not a valid file name component"
            raise ConfigurationError(msg)
        if messages is None:
            messages = {}
        if not isinstance(messages, Mapping):
            msg = f"Messages for locale '{locale}' must be a mapping, got {type(messages).__name__}"
            raise ConfigurationError(msg)
        if validate_locales:
            validate_locale_code(locale)
        data[locale] = MappingProxyType(dict(messages))

    if default_locale not in data:
        msg = (
            f"Default locale '{default_locale}' missing from localization source "
            f"(locales: {', '.join(data) or 'none'})"
        )
        raise ConfigurationError(msg)

    logger.info(
        "Snapshotted %d locale(s): %s (default: %s)",
        len(data),
        ", ".join(data),
        default_locale,
    )
    return LocaleSnapshot(MappingProxyType(data), default_locale)
