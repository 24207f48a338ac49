"""Mapping physical output filenames to logical table names.

Two strategies, tried in order:

1. GlobRouter - explicit ``(glob -> logical name)`` rules, first match wins
2. normalize_filename - strip the extension (and content hash in hashed builds)

Logical names keep table keys stable across builds whose output filenames
change with every content hash.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import fnmatch
import logging
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from i18ntables.constants import (
    FILENAME_SEPARATOR,
    HASHED_SUFFIX_SEGMENTS,
    PLAIN_SUFFIX_SEGMENTS,
)
from i18ntables.errors import ConfigurationError
from i18ntables.types import LogicalFileName

__all__ = [
    "GlobRouter",
    "RoutingRule",
    "logical_name",
    "normalize_filename",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RoutingRule:
    """Declarative remap from a filename shape to a stable logical name.

    Attributes:
        pattern: Glob matched against the whole physical filename
        logical_name: Table key used for every file matching pattern
    """

    pattern: str
    logical_name: LogicalFileName

    def __post_init__(self) -> None:
        """Validate rule fields.

        Raises:
            ConfigurationError: If pattern or logical_name is empty or not a string
        """
        if not isinstance(self.pattern, str) or not self.pattern:
            msg = f"Routing pattern must be a non-empty string, got: {self.pattern!r}"
            raise ConfigurationError(msg)
        if not isinstance(self.logical_name, str) or not self.logical_name:
            msg = (
                f"Routing rule {self.pattern!r} needs a non-empty logical name, "
                f"got: {self.logical_name!r}"
            )
            raise ConfigurationError(msg)


class GlobRouter:
    """Ordered glob rules compiled once per run.

    Globs use fnmatch syntax and must match the whole filename: ``*`` matches
    any run of characters (including ``/``), ``?`` one character, ``[...]`` a
    character class. Matching is case-sensitive on every platform.

    Example:
        >>> router = GlobRouter([RoutingRule("app.*.js", "main")])
        >>> router.resolve("app.abcd1234.js")
        'main'
        >>> router.resolve("vendor.js") is None
        True
    """

    __slots__ = ("_matchers", "_rules")

    def __init__(self, rules: Iterable[RoutingRule] = ()) -> None:
        """Compile routing rules.

        Args:
            rules: Rules in evaluation order

        Raises:
            ConfigurationError: If a rule is malformed or its glob has an unclosed ``[``
        """
        self._rules: tuple[RoutingRule, ...] = tuple(rules)
        matchers: list[tuple[re.Pattern[str], LogicalFileName]] = []
        for rule in self._rules:
            if not isinstance(rule, RoutingRule):
                msg = f"Expected RoutingRule, got {type(rule).__name__}"
                raise ConfigurationError(msg)
            _check_glob(rule.pattern)
            matchers.append((re.compile(fnmatch.translate(rule.pattern)), rule.logical_name))
        self._matchers = tuple(matchers)

    @classmethod
    def compile(cls, rules: Iterable[RoutingRule]) -> GlobRouter:
        """Compile rules into a router (alias of the constructor)."""
        return cls(rules)

    @classmethod
    def from_mapping(cls, file_map: Mapping[str, str] | None) -> GlobRouter:
        """Build a router from an ordered ``{glob: logical_name}`` mapping."""
        if file_map is None:
            return cls()
        if not isinstance(file_map, Mapping):
            msg = (
                "File map must be a mapping of glob to logical name, "
                f"got {type(file_map).__name__}"
            )
            raise ConfigurationError(msg)
        return cls(RoutingRule(pattern, name) for pattern, name in file_map.items())

    @property
    def rules(self) -> tuple[RoutingRule, ...]:
        """Configured rules in evaluation order."""
        return self._rules

    def __len__(self) -> int:
        return len(self._matchers)

    def __repr__(self) -> str:
        return f"GlobRouter(rules={len(self._rules)})"

    def resolve(self, physical_name: str) -> LogicalFileName | None:
        """Return the logical name of the first matching rule, or None."""
        for regex, name in self._matchers:
            if regex.match(physical_name):
                return name
        return None


def normalize_filename(physical_name: str, hashed: bool) -> LogicalFileName:
    """Strip build suffixes from a filename.

    Drops the extension, plus the content-hash segment when ``hashed`` is
    True. Names with fewer segments than are stripped come back truncated
    (possibly empty) rather than rejected.

    Example:
        >>> normalize_filename("app.abcd1234.js", hashed=True)
        'app'
        >>> normalize_filename("app.js", hashed=False)
        'app'
        >>> normalize_filename("app.js", hashed=True)
        ''
    """
    strip = HASHED_SUFFIX_SEGMENTS if hashed else PLAIN_SUFFIX_SEGMENTS
    segments = physical_name.split(FILENAME_SEPARATOR)
    return FILENAME_SEPARATOR.join(segments[:-strip])


def logical_name(physical_name: str, router: GlobRouter, hashed: bool) -> LogicalFileName:
    """Resolve a filename via routing rules, falling back to normalization."""
    routed = router.resolve(physical_name)
    if routed is not None:
        logger.debug("Routed %s -> %s", physical_name, routed)
        return routed
    return normalize_filename(physical_name, hashed)


def _check_glob(pattern: str) -> None:
    """Reject a ``[`` that opens a character class without closing it.

    fnmatch treats such a bracket as a literal, which silently turns a
    mistyped class into a rule that never matches.

    Raises:
        ConfigurationError: If a character class is left open
    """
    i, n = 0, len(pattern)
    while i < n:
        if pattern[i] != "[":
            i += 1
            continue
        j = i + 1
        if j < n and pattern[j] == "!":
            j += 1
        if j < n and pattern[j] == "]":
            j += 1
        while j < n and pattern[j] != "]":
            j += 1
        if j >= n:
            msg = f"Invalid glob pattern {pattern!r}: unclosed '[' at position {i}"
            raise ConfigurationError(msg)
        i = j + 1
