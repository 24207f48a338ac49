"""Run configuration for table extraction.

ExtractorConfig is a frozen dataclass validated at construction, so invalid
settings fail before any asset is scanned. Build modes are explicit booleans;
nothing is read from the process environment.

Python 3.13+.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from i18ntables.assets import AssetFilter, AssetPredicate
from i18ntables.constants import DEFAULT_ACCESSOR, DEFAULT_LOCALE, DEFAULT_MODULE_NAME
from i18ntables.errors import ConfigurationError
from i18ntables.patterns import transpiled_alias
from i18ntables.routing import GlobRouter, RoutingRule
from i18ntables.tables.writer import strip_query
from i18ntables.types import LocaleCode

__all__ = ["ExtractorConfig"]

# Option names accepted by ExtractorConfig.from_options(), mapped to fields.
_OPTION_FIELDS: dict[str, str] = {
    "objectName": "accessor_name",
    "fileName": "module_name",
    "failOnMissing": "fail_on_missing",
    "outputPath": "output_root",
    "devPath": "dev_output_root",
    "hashedFilenames": "hashed_filenames",
    "developmentMode": "is_development_mode",
    "defaultLocale": "default_locale",
    "validateLocales": "validate_locales",
    "maxWorkers": "max_workers",
}
_FILTER_OPTIONS = ("test", "include", "exclude")


@dataclass(frozen=True, slots=True)
class ExtractorConfig:
    """Settings for one extraction run.

    Attributes:
        accessor_name: Identifier marking translatable property accesses
        module_name: Accessor module name; its transpiled alias is scanned too
        routing_rules: Ordered glob -> logical name rules, first match wins
        hashed_filenames: Output names carry a content-hash segment
        fail_on_missing: Raise MissingTranslationError for unresolved keys
        output_root: Destination directory for locale tables
        dev_output_root: Destination used instead in development mode
        is_development_mode: Select dev_output_root when it is set
        default_locale: Fallback locale; must exist in the localization source
        validate_locales: Reject locale codes unknown to Babel
        asset_filter: Inclusion predicate over (name, content); all assets when None
        max_workers: Parallel table writers; 1 writes sequentially

    Example:
        >>> config = ExtractorConfig(
        ...     routing_rules=(RoutingRule("app.*.js", "main"),),
        ...     output_root="dist/i18n",
        ... )
        >>> config.accessor_names
        ('__', '_2.default')
    """

    accessor_name: str = DEFAULT_ACCESSOR
    module_name: str = DEFAULT_MODULE_NAME
    routing_rules: tuple[RoutingRule, ...] = ()
    hashed_filenames: bool = True
    fail_on_missing: bool = False
    output_root: str | os.PathLike[str] | None = None
    dev_output_root: str | os.PathLike[str] | None = None
    is_development_mode: bool = False
    default_locale: LocaleCode = DEFAULT_LOCALE
    validate_locales: bool = False
    asset_filter: AssetPredicate | None = field(default=None, compare=False)
    max_workers: int = 1

    def __post_init__(self) -> None:
        """Validate settings.

        Raises:
            ConfigurationError: If a setting has an invalid value
        """
        if not isinstance(self.accessor_name, str) or not self.accessor_name:
            msg = f"accessor_name must be a non-empty string, got: {self.accessor_name!r}"
            raise ConfigurationError(msg)
        if not isinstance(self.module_name, str):
            msg = f"module_name must be a string, got: {self.module_name!r}"
            raise ConfigurationError(msg)
        if not isinstance(self.default_locale, str) or not self.default_locale:
            msg = f"default_locale must be a non-empty string, got: {self.default_locale!r}"
            raise ConfigurationError(msg)
        if self.asset_filter is not None and not callable(self.asset_filter):
            msg = f"asset_filter must be callable, got {type(self.asset_filter).__name__}"
            raise ConfigurationError(msg)
        if not isinstance(self.max_workers, int) or self.max_workers < 1:
            msg = f"max_workers must be a positive integer, got: {self.max_workers!r}"
            raise ConfigurationError(msg)
        object.__setattr__(self, "routing_rules", tuple(self.routing_rules))

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> ExtractorConfig:
        """Build a config from camelCase plugin-style options.

        Recognized keys: objectName, fileName, fileMap (ordered glob -> name
        mapping), failOnMissing, outputPath, devPath, hashedFilenames,
        developmentMode, defaultLocale, validateLocales, maxWorkers, and the
        asset conditions test, include, exclude.

        Raises:
            ConfigurationError: If an option name is not recognized
        """
        unknown = set(options) - set(_OPTION_FIELDS) - set(_FILTER_OPTIONS) - {"fileMap"}
        if unknown:
            msg = f"Unknown option(s): {', '.join(sorted(unknown))}"
            raise ConfigurationError(msg)

        kwargs: dict[str, Any] = {
            field_name: options[option]
            for option, field_name in _OPTION_FIELDS.items()
            if option in options
        }
        if "fileMap" in options:
            kwargs["routing_rules"] = GlobRouter.from_mapping(options["fileMap"]).rules
        conditions = {name: options[name] for name in _FILTER_OPTIONS if name in options}
        if conditions:
            kwargs["asset_filter"] = AssetFilter(**conditions)
        return cls(**kwargs)

    @property
    def accessor_names(self) -> tuple[str, str]:
        """Accessor identifier and its transpiled alias."""
        return (self.accessor_name, transpiled_alias(self.module_name))

    def router(self) -> GlobRouter:
        """Compile routing rules."""
        return GlobRouter(self.routing_rules)

    def resolve_output_root(self, default_root: str | os.PathLike[str] | None = None) -> Path:
        """Choose the directory locale tables are written to.

        Precedence: dev_output_root (development mode only), output_root,
        default_root (the build's output directory), then the current
        directory. Any ``?query`` suffix is removed.
        """
        if self.is_development_mode and self.dev_output_root:
            root = self.dev_output_root
        elif self.output_root:
            root = self.output_root
        elif default_root:
            root = default_root
        else:
            root = Path.cwd()
        return Path(strip_query(root))
