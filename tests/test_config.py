"""Tests for ParserConfig validation and ParseOptions merging."""

from dataclasses import FrozenInstanceError

import pytest

from moneyparse import DEFAULT_CONFIG, ParseOptions, ParserConfig
from moneyparse.config import EffectiveOptions


class TestParserConfig:
    """ParserConfig defaults and validation."""

    def test_defaults(self) -> None:
        assert DEFAULT_CONFIG == ParserConfig()
        assert DEFAULT_CONFIG.default_currency == "USD"
        assert DEFAULT_CONFIG.assume_from_symbol is True
        assert DEFAULT_CONFIG.expect_whole_subunits is False
        assert DEFAULT_CONFIG.enforce_currency_delimiters is False

    @pytest.mark.parametrize("code", ["", "US", "USDX", "U5D", "ÜSD"])
    def test_invalid_default_currency(self, code: str) -> None:
        with pytest.raises(ValueError, match="default_currency"):
            ParserConfig(default_currency=code)

    def test_lowercase_code_accepted(self) -> None:
        assert ParserConfig(default_currency="eur").default_currency == "eur"

    def test_frozen(self) -> None:
        with pytest.raises(FrozenInstanceError):
            DEFAULT_CONFIG.default_currency = "EUR"  # type: ignore[misc]


class TestParseOptions:
    """ParseOptions.resolve() overlays per-call overrides."""

    def test_empty_options_inherit_everything(self) -> None:
        config = ParserConfig(
            assume_from_symbol=False,
            expect_whole_subunits=True,
            enforce_currency_delimiters=True,
        )
        assert ParseOptions().resolve(config) == EffectiveOptions(
            assume_from_symbol=False,
            expect_whole_subunits=True,
            enforce_currency_delimiters=True,
        )

    def test_overrides_win(self) -> None:
        options = ParseOptions(assume_from_symbol=False, enforce_currency_delimiters=True)
        assert options.resolve(DEFAULT_CONFIG) == EffectiveOptions(
            assume_from_symbol=False,
            expect_whole_subunits=False,
            enforce_currency_delimiters=True,
        )

    def test_false_override_is_not_inherit(self) -> None:
        config = ParserConfig(expect_whole_subunits=True)
        effective = ParseOptions(expect_whole_subunits=False).resolve(config)
        assert effective.expect_whole_subunits is False
