"""Tests for locale resolution with default-locale fallback."""

from __future__ import annotations

import logging
from typing import Any

from hypothesis import given
from hypothesis import strategies as st

from i18ntables.errors import MissingTranslation
from i18ntables.tables.resolver import LocaleResolver, resolve_text
from i18ntables.tables.snapshot import take_snapshot
from tests.strategies import locale_maps, message_keys


class TestResolveText:
    """Test the plain fallback lookup."""

    def test_active_locale_used_when_present(self) -> None:
        assert resolve_text("greeting", {"greeting": "Hi"}, {"greeting": "Hello"}) == "Hi"

    def test_falls_back_to_default(self) -> None:
        assert resolve_text("greeting", {}, {"greeting": "Hi"}) == "Hi"

    def test_missing_everywhere_returns_none(self) -> None:
        assert resolve_text("unknownKey", {}, {}) is None

    def test_empty_string_is_a_translation(self) -> None:
        """Present-but-empty text is kept; only absent keys fall back."""
        assert resolve_text("blank", {"blank": ""}, {"blank": "Default"}) == ""

    @given(data=locale_maps(), key=message_keys())
    def test_never_returns_unrelated_locale_text(
        self, data: dict[str, dict[str, str]], key: str
    ) -> None:
        """Result comes from the active locale, the default, or is None."""
        for locale, table in data.items():
            text = resolve_text(key, table, data["en"])

            assert text in (table.get(key), data["en"].get(key))
            if text is not None:
                assert text.startswith((f"{locale}:", "en:"))


class TestLocaleResolver:
    """Test per-run resolution with miss tracking."""

    @staticmethod
    def _resolver(**kwargs: Any) -> LocaleResolver:
        snapshot = take_snapshot(lambda: {"en": {"greeting": "Hi"}, "fr": {"greeting": "Salut"}})
        return LocaleResolver(snapshot, **kwargs)

    def test_resolves_active_locale(self) -> None:
        assert self._resolver().resolve("fr", "greeting", "app") == "Salut"

    def test_unknown_locale_uses_default(self) -> None:
        assert self._resolver().resolve("de", "greeting", "app") == "Hi"

    def test_records_missing_key(self) -> None:
        resolver = self._resolver()

        assert resolver.resolve("fr", "unknownKey", "app") is None
        assert resolver.missing == (MissingTranslation("fr", "unknownKey", "app"),)

    def test_duplicate_misses_recorded_once(self) -> None:
        resolver = self._resolver()
        resolver.resolve("fr", "unknownKey", "app")
        resolver.resolve("fr", "unknownKey", "app")
        resolver.resolve("en", "unknownKey", "app")

        assert len(resolver.missing) == 2

    def test_non_strict_miss_logs_warning(self, caplog: Any) -> None:
        resolver = self._resolver()

        with caplog.at_level(logging.WARNING, logger="i18ntables.tables.resolver"):
            resolver.resolve("fr", "unknownKey", "app")

        assert any("unknownKey" in record.getMessage() for record in caplog.records)

    def test_strict_miss_does_not_log_warning(self, caplog: Any) -> None:
        resolver = self._resolver(fail_on_missing=True)

        with caplog.at_level(logging.WARNING, logger="i18ntables.tables.resolver"):
            resolver.resolve("fr", "unknownKey", "app")

        assert not caplog.records
        assert resolver.fail_on_missing

    def test_fallback_logged_at_debug(self, caplog: Any) -> None:
        snapshot = take_snapshot(lambda: {"en": {"greeting": "Hi"}, "fr": {}})
        resolver = LocaleResolver(snapshot)

        with caplog.at_level(logging.DEBUG, logger="i18ntables.tables.resolver"):
            assert resolver.resolve("fr", "greeting", "app") == "Hi"

        assert any("falls back" in record.getMessage() for record in caplog.records)

    @given(keys=st.lists(message_keys(), max_size=5))
    def test_found_keys_never_recorded(self, keys: list[str]) -> None:
        snapshot = take_snapshot(lambda: {"en": dict.fromkeys(keys, "x")})
        resolver = LocaleResolver(snapshot, fail_on_missing=True)
        for key in keys:
            resolver.resolve("en", key, "app")

        assert resolver.missing == ()
