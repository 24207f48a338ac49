"""i18ntables Quickstart - extract locale tables from build output.

Simulates the last step of a hashed production build:

1. Build output with accessor call sites (``__.key``) and a transpiled alias
2. A localization source with a partial French translation
3. Routing rules that give hashed chunks stable logical names
4. Strict mode reporting a key that no locale defines

Python 3.13+.
"""

from __future__ import annotations

import logging
import re
import tempfile
from pathlib import Path

from i18ntables import (
    Asset,
    AssetFilter,
    ExtractorConfig,
    MissingTranslationError,
    RoutingRule,
    TableExtractor,
)


def load_messages() -> dict[str, dict[str, str]]:
    """Localization source: called once per run."""
    return {
        "en": {"greeting": "Hello", "cart": "Cart", "checkout": "Checkout"},
        "fr": {"greeting": "Bonjour", "cart": "Panier"},
    }


BUILD_OUTPUT = [
    Asset("app.3f9a1c2e.js", 'render(__.greeting, __.cart);'),
    Asset("checkout.77aa01bc.js", "(0,_i18n2.default.checkout)"),
    Asset("vendor.0b1c2d3e.js", "function noop() {}"),
    Asset("app.3f9a1c2e.css", ".cart { color: red }"),
]


def example_1_basic_run(out_dir: Path) -> None:
    """Example 1: Build and write tables with fallback to English."""
    print("=" * 60)
    print("Example 1: Basic run")
    print("=" * 60)

    config = ExtractorConfig(
        module_name="i18n",
        routing_rules=(RoutingRule("checkout.*.js", "pages/checkout"),),
        asset_filter=AssetFilter(test=re.compile(r"\.js$")),
        output_root=out_dir,
    )
    summary = TableExtractor(load_messages, config).run(BUILD_OUTPUT)

    for path in summary.paths:
        print(f"{path.name}: {path.read_text(encoding='utf-8')}")
    # fr.text.json: {"app":{"greeting":"Bonjour","cart":"Panier"},
    #                "pages/checkout":{"checkout":"Checkout"}}


def example_2_strict_mode() -> None:
    """Example 2: Strict mode fails the run on keys no locale defines."""
    print("=" * 60)
    print("Example 2: Strict mode")
    print("=" * 60)

    extractor = TableExtractor(load_messages, ExtractorConfig(fail_on_missing=True))
    try:
        extractor.build([Asset("promo.1a2b3c4d.js", "banner(__.promoBanner)")])
    except MissingTranslationError as e:
        print(e)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    with tempfile.TemporaryDirectory() as tmp:
        example_1_basic_run(Path(tmp))
    example_2_strict_mode()
