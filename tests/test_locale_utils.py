"""Tests for Babel-backed locale code utilities."""

from __future__ import annotations

import pytest
from babel import Locale
from hypothesis import given
from hypothesis import strategies as st

from i18ntables.errors import ConfigurationError
from i18ntables.locale_utils import get_babel_locale, normalize_locale, validate_locale_code


class TestNormalizeLocale:
    """Test BCP-47 to POSIX conversion."""

    def test_bcp47_to_posix(self) -> None:
        assert normalize_locale("en-US") == "en_US"

    def test_already_posix(self) -> None:
        assert normalize_locale("pt_BR") == "pt_BR"

    def test_language_only(self) -> None:
        assert normalize_locale("en") == "en"

    @given(code=st.text(alphabet="abcdefXYZ-_", max_size=12))
    def test_never_contains_hyphen(self, code: str) -> None:
        assert "-" not in normalize_locale(code)


class TestGetBabelLocale:
    """Test cached Babel locale lookup."""

    def test_returns_babel_locale(self) -> None:
        locale = get_babel_locale("en-US")

        assert isinstance(locale, Locale)
        assert locale.language == "en"
        assert locale.territory == "US"

    def test_cached(self) -> None:
        assert get_babel_locale("fr") is get_babel_locale("fr")


class TestValidateLocaleCode:
    """Test locale code validation."""

    @pytest.mark.parametrize("code", ["en", "fr", "de_DE", "pt-BR", "ja"])
    def test_known_codes_pass(self, code: str) -> None:
        validate_locale_code(code)

    def test_unknown_code_raises(self) -> None:
        with pytest.raises(ConfigurationError, match="Unknown locale code 'xx-invalid-zz'"):
            validate_locale_code("xx-invalid-zz")

    def test_empty_code_raises(self) -> None:
        with pytest.raises(ConfigurationError, match="non-empty string"):
            validate_locale_code("")

    def test_error_chains_babel_cause(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            validate_locale_code("qq")

        assert exc_info.value.__cause__ is not None
