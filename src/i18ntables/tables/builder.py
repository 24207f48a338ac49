"""Table building: scan assets and assemble per-locale tables.

For every locale and every included asset with at least one call site, the
asset's keys are resolved and stored under the asset's logical name:

    store[locale][logical_name][key] = text

Iteration follows locale order of the snapshot, then asset order, then key
order of appearance, so identical input gives byte-identical output.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from i18ntables.patterns import extract_keys
from i18ntables.routing import GlobRouter, logical_name
from i18ntables.tables.resolver import LocaleResolver

if TYPE_CHECKING:
    import re

    from i18ntables.assets import Asset, AssetPredicate
    from i18ntables.errors import MissingTranslation
    from i18ntables.tables.snapshot import LocaleSnapshot
    from i18ntables.types import LocaleTableStore, LogicalFileName, MessageKey

__all__ = ["BuildResult", "ScannedAsset", "build_tables", "scan_assets"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ScannedAsset:
    """Keys found in one asset, with the asset's logical name.

    Attributes:
        name: Physical filename
        logical_name: Table key the asset's messages are stored under
        keys: Distinct message keys in order of first appearance
    """

    name: str
    logical_name: LogicalFileName
    keys: tuple[MessageKey, ...]


@dataclass(frozen=True, slots=True)
class BuildResult:
    """Outcome of one table build.

    Attributes:
        store: Locale -> logical file -> key -> text (None when unresolved)
        missing: Keys with no text in the active or default locale
        scanned: Assets that contributed at least one key
    """

    store: LocaleTableStore
    missing: tuple[MissingTranslation, ...] = ()
    scanned: tuple[ScannedAsset, ...] = ()

    @property
    def has_missing(self) -> bool:
        """Check if any key could not be resolved."""
        return len(self.missing) > 0


def scan_assets(
    assets: Iterable[Asset],
    *,
    pattern: re.Pattern[str],
    router: GlobRouter,
    hashed: bool,
    include: AssetPredicate | None = None,
) -> list[ScannedAsset]:
    """Extract keys from every included asset that has call sites.

    Assets rejected by include, and assets without call sites, are skipped.
    """
    scanned: list[ScannedAsset] = []
    for asset in assets:
        if include is not None and not include(asset.name, asset.content):
            logger.debug("Skipping excluded asset %s", asset.name)
            continue
        keys = extract_keys(pattern, asset.content)
        if not keys:
            continue
        name = logical_name(asset.name, router, hashed)
        unique = tuple(dict.fromkeys(keys))
        logger.debug("Found %d key(s) in %s (logical name '%s')", len(unique), asset.name, name)
        scanned.append(ScannedAsset(asset.name, name, unique))
    return scanned


def build_tables(
    snapshot: LocaleSnapshot,
    assets: Iterable[Asset],
    *,
    pattern: re.Pattern[str],
    router: GlobRouter | None = None,
    hashed: bool = True,
    include: AssetPredicate | None = None,
    resolver: LocaleResolver | None = None,
) -> BuildResult:
    """Build a fresh table store from assets.

    Args:
        snapshot: Locale data for this run
        assets: Output artifacts to scan
        pattern: Compiled accessor pattern (see patterns.build_pattern)
        router: Glob routing rules; an empty router when omitted
        hashed: Whether output filenames carry a content-hash segment
        include: Inclusion predicate over (name, content); all assets when omitted
        resolver: Key resolver; a non-strict resolver over snapshot when omitted

    Returns:
        BuildResult owning a newly created store
    """
    if router is None:
        router = GlobRouter()
    if resolver is None:
        resolver = LocaleResolver(snapshot)

    scanned = scan_assets(assets, pattern=pattern, router=router, hashed=hashed, include=include)

    store: LocaleTableStore = {}
    for locale in snapshot.locales:
        locale_table = store.setdefault(locale, {})
        for item in scanned:
            entry = locale_table.setdefault(item.logical_name, {})
            for key in item.keys:
                entry[key] = resolver.resolve(locale, key, item.logical_name)

    logger.info(
        "Built tables for %d locale(s) from %d asset(s) with call sites",
        len(store),
        len(scanned),
    )
    return BuildResult(store=store, missing=resolver.missing, scanned=tuple(scanned))
