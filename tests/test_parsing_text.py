"""Tests for numeric text cleanup: normalization, sign, dangling delimiter."""

import pytest

from moneyparse import DEFAULT_REGISTRY, Currency, InvalidAmountError
from moneyparse.diagnostics import DiagnosticCode
from moneyparse.parsing.text import drop_trailing_delimiter, extract_sign, normalize_text


class TestNormalizeText:
    """normalize_text() keeps digits, delimiters and hyphens only."""

    def test_strips_symbol_and_spaces(self, usd: Currency) -> None:
        assert normalize_text("$ 1,234.56", usd) == "1,234.56"

    def test_strips_codes_and_words(self, eur: Currency) -> None:
        assert normalize_text("about 1 234,56 EUR today", eur) == "1234,56"

    def test_apostrophe_and_hyphen_kept(self, usd: Currency) -> None:
        assert normalize_text("-1'000", usd) == "-1'000"

    def test_leading_symbol_with_period_removed(self) -> None:
        dkk = DEFAULT_REGISTRY.lookup("DKK")
        assert normalize_text("kr. 1.000,50", dkk) == "1.000,50"

    def test_symbol_period_kept_when_not_leading(self) -> None:
        """Only a leading currency symbol is removed as a unit."""
        dkk = DEFAULT_REGISTRY.lookup("DKK")
        assert normalize_text("1.000,50 kr.", dkk) == "1.000,50."

    def test_nothing_numeric(self, usd: Currency) -> None:
        assert normalize_text("free", usd) == ""


class TestExtractSign:
    """extract_sign() handles one leading or trailing hyphen run."""

    @pytest.mark.parametrize(
        ("number", "expected"),
        [
            ("5", (False, "5")),
            ("-5", (True, "5")),
            ("5-", (True, "5")),
            ("---5", (True, "5")),
            ("5--", (True, "5")),
            ("-1,000.50", (True, "1,000.50")),
            ("-", (True, "")),
        ],
    )
    def test_sign_runs(self, number: str, expected: tuple[bool, str]) -> None:
        assert extract_sign(number) == expected

    @pytest.mark.parametrize("number", ["1-2", "-5-", "1-2-", "-1-2"])
    def test_embedded_hyphen(self, number: str) -> None:
        with pytest.raises(InvalidAmountError) as exc_info:
            extract_sign(number, value=number)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.AMOUNT_EMBEDDED_HYPHEN


class TestDropTrailingDelimiter:
    """drop_trailing_delimiter() removes a single dangling mark."""

    @pytest.mark.parametrize(
        ("number", "expected"),
        [
            ("25.", "25"),
            ("25,", "25"),
            ("25", "25"),
            ("25..", "25."),
            ("25'", "25'"),
            ("", ""),
        ],
    )
    def test_trailing_marks(self, number: str, expected: str) -> None:
        assert drop_trailing_delimiter(number) == expected
