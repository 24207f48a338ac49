"""Locale code utilities backed by Babel.

Locale codes coming from a localization source are used verbatim as output
file names, so nothing here rewrites them. These helpers only check that a
code names a locale Babel knows about.

Python 3.13+.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

from i18ntables.errors import ConfigurationError

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "normalize_locale",
    "validate_locale_code",
]


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).

    Args:
        locale_code: BCP-47 locale code (e.g., "en-US", "pt-BR")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pt_BR")

    Example:
        >>> normalize_locale("pt-BR")
        'pt_BR'
        >>> normalize_locale("en")
        'en'
    """
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def validate_locale_code(locale_code: str) -> None:
    """Check that a locale code is known to Babel.

    Args:
        locale_code: Locale code from the localization source

    Raises:
        ConfigurationError: If the code is empty, not a string, or unknown
    """
    from babel.core import UnknownLocaleError  # noqa: PLC0415

    if not isinstance(locale_code, str) or not locale_code:
        msg = f"Locale code must be a non-empty string, got: {locale_code!r}"
        raise ConfigurationError(msg)
    try:
        get_babel_locale(locale_code)
    except (UnknownLocaleError, ValueError) as e:
        msg = f"Unknown locale code {locale_code!r}: {e}"
        raise ConfigurationError(msg) from e
