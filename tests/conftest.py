"""Pytest configuration for the i18ntables test suite.

Single Source of Truth for Hypothesis max_examples:
- dev: Local development with 200 examples
- ci: CI runs with 50 examples (fast feedback, derandomized)
- verbose: Debug mode with progress output (100 examples)

Profile auto-detection:
- HYPOTHESIS_PROFILE env var -> explicit override
- CI=true environment variable -> "ci" profile
- Otherwise -> "dev" profile

Override manually: HYPOTHESIS_PROFILE=verbose pytest tests/
"""

from __future__ import annotations

import os
from collections.abc import Callable

import pytest
from hypothesis import Phase, Verbosity, settings

from i18ntables import Asset, ExtractorConfig, TableExtractor

# =============================================================================
# HYPOTHESIS PROFILES - SINGLE SOURCE OF TRUTH
# =============================================================================

settings.register_profile(
    "dev",
    max_examples=200,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
)

settings.register_profile(
    "ci",
    max_examples=50,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=True,
    print_blob=True,
)

settings.register_profile(
    "verbose",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    verbosity=Verbosity.verbose,
)


def _detect_profile() -> str:
    """Detect appropriate Hypothesis profile based on execution context.

    Priority:
    1. HYPOTHESIS_PROFILE env var (explicit override)
    2. CI=true env var
    3. Default to "dev" (local development)
    """
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit
    if os.environ.get("CI") == "true":
        return "ci"
    return "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# SHARED FIXTURES
# =============================================================================


LOCALE_DATA: dict[str, dict[str, str]] = {
    "en": {"greeting": "Hi", "farewell": "Bye", "title": "Home"},
    "fr": {"greeting": "Salut"},
    "de": {"greeting": "Hallo", "farewell": "Tschüss"},
}


@pytest.fixture
def locale_data() -> dict[str, dict[str, str]]:
    """Fresh copy of the shared en/fr/de locale data."""
    return {locale: dict(messages) for locale, messages in LOCALE_DATA.items()}


@pytest.fixture
def make_extractor(
    locale_data: dict[str, dict[str, str]],
) -> Callable[..., TableExtractor]:
    """Factory building a TableExtractor over locale_data with config overrides."""

    def factory(**overrides: object) -> TableExtractor:
        return TableExtractor(lambda: locale_data, ExtractorConfig(**overrides))  # type: ignore[arg-type]

    return factory


@pytest.fixture
def app_assets() -> list[Asset]:
    """Hashed build output: two bundles with call sites, one without."""
    return [
        Asset("app.abcd1234.js", "render(__.greeting, __.title);"),
        Asset("admin.ffff0000.js", "alert(__.farewell);"),
        Asset("vendor.12345678.js", "function noop() { return 1; }"),
    ]
