"""Accessor call-site scanning.

Finds property accesses such as ``__.greeting`` in built output text and
returns the accessed property names as message keys. Besides the accessor
itself, transpilers rewrite a default-imported accessor module into an alias
like ``_i18n2.default``; both forms are scanned.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from i18ntables.errors import ConfigurationError
from i18ntables.types import MessageKey

__all__ = [
    "build_pattern",
    "extract_keys",
    "transpiled_alias",
]


def transpiled_alias(module_name: str) -> str:
    """Return the alias a transpiler emits for a default-imported accessor module.

    Example:
        >>> transpiled_alias("i18n")
        '_i18n2.default'
        >>> transpiled_alias("")
        '_2.default'
    """
    return f"_{module_name}2.default"


def build_pattern(accessor_names: Iterable[str]) -> re.Pattern[str]:
    """Compile the scan pattern for the given accessor names.

    The pattern matches an accessor name not preceded by a word character,
    a literal ``.``, then a run of word characters (group 1, the message key)
    not followed by a word character. Names are matched literally.

    Both boundaries are zero-width, so a call site at the very start or end
    of the text matches, and ``[__.a,__.b]`` yields both ``a`` and ``b``.
    A scanner that consumes the surrounding non-word characters would reject
    the first case and find only ``a`` in the second.

    Args:
        accessor_names: Accessor identifiers, e.g. ``("__", "_2.default")``

    Returns:
        Compiled pattern for use with extract_keys()

    Raises:
        ConfigurationError: If no names are given or a name is empty
    """
    names = list(dict.fromkeys(accessor_names))
    if not names:
        msg = "At least one accessor name is required"
        raise ConfigurationError(msg)
    for name in names:
        if not isinstance(name, str) or not name:
            msg = f"Accessor name must be a non-empty string, got: {name!r}"
            raise ConfigurationError(msg)

    # Longest first so an alias sharing a prefix with the accessor wins
    alternatives = "|".join(re.escape(name) for name in sorted(names, key=len, reverse=True))
    return re.compile(rf"(?<!\w)(?:{alternatives})\.(\w+)(?!\w)")


def extract_keys(pattern: re.Pattern[str], text: str) -> list[MessageKey]:
    """Return the message key of every call site in text, in order of appearance.

    Text without call sites yields an empty list; this never raises.

    Example:
        >>> extract_keys(build_pattern(["__"]), "before __.greeting after")
        ['greeting']
    """
    return pattern.findall(text)
