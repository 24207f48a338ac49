"""Build output assets and the inclusion predicate applied before scanning.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field

from i18ntables.errors import ConfigurationError

__all__ = [
    "Asset",
    "AssetFilter",
    "AssetPredicate",
    "Condition",
    "assets_from_mapping",
]

type Condition = str | re.Pattern[str] | Iterable[str | re.Pattern[str]]
"""Filename condition: prefix string, compiled regex, or a list of either."""

type AssetPredicate = Callable[[str, str], bool]
"""Inclusion predicate over (file name, content)."""


@dataclass(frozen=True, slots=True)
class Asset:
    """One build output artifact.

    Attributes:
        name: Physical output filename (e.g., 'app.abcd1234.js')
        content: Full text content of the artifact
    """

    name: str
    content: str


def assets_from_mapping(assets: Mapping[str, str]) -> list[Asset]:
    """Wrap a ``{name: content}`` mapping as assets, preserving order."""
    return [Asset(name, content) for name, content in assets.items()]


def _freeze_condition(condition: Condition | None) -> tuple[str | re.Pattern[str], ...]:
    if condition is None:
        return ()
    if isinstance(condition, (str, re.Pattern)):
        return (condition,)
    parts = tuple(condition)
    for part in parts:
        if not isinstance(part, (str, re.Pattern)):
            msg = f"Asset condition must be a string or compiled regex, got {type(part).__name__}"
            raise ConfigurationError(msg)
    return parts


def _matches_part(name: str, parts: tuple[str | re.Pattern[str], ...]) -> bool:
    for part in parts:
        if isinstance(part, str):
            if name.startswith(part):
                return True
        elif part.search(name):
            return True
    return False


@dataclass(frozen=True, slots=True, init=False)
class AssetFilter:
    """Include/exclude conditions over asset filenames.

    Each condition is a string (prefix match), a compiled regex (searched
    anywhere in the name) or a list of those (any may match). ``test`` and
    ``include`` must match when set; ``exclude`` must not. With no
    conditions every asset passes.

    Example:
        >>> only_js = AssetFilter(test=re.compile(r"\\.js$"), exclude="vendor")
        >>> only_js("app.abcd.js", "")
        True
        >>> only_js("vendor.abcd.js", "")
        False
    """

    test: tuple[str | re.Pattern[str], ...] = field(default=())
    include: tuple[str | re.Pattern[str], ...] = field(default=())
    exclude: tuple[str | re.Pattern[str], ...] = field(default=())

    def __init__(
        self,
        test: Condition | None = None,
        include: Condition | None = None,
        exclude: Condition | None = None,
    ) -> None:
        object.__setattr__(self, "test", _freeze_condition(test))
        object.__setattr__(self, "include", _freeze_condition(include))
        object.__setattr__(self, "exclude", _freeze_condition(exclude))

    def matches(self, name: str) -> bool:
        """Check a filename against all conditions."""
        if self.test and not _matches_part(name, self.test):
            return False
        if self.include and not _matches_part(name, self.include):
            return False
        return not (self.exclude and _matches_part(name, self.exclude))

    def __call__(self, name: str, content: str = "") -> bool:
        return self.matches(name)
