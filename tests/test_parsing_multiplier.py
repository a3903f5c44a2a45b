"""Tests for magnitude suffix extraction."""

import pytest

from moneyparse.parsing.multiplier import extract_multiplier


class TestExtractMultiplier:
    """extract_multiplier() removes one K/M/B/T suffix after a digit."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("1.5m", (6, "1.5")),
            ("1.5M", (6, "1.5")),
            ("2b", (9, "2")),
            ("3T", (12, "3")),
            ("20k", (3, "20")),
            ("$10K USD", (3, "$10 USD")),
            ("-4K", (3, "-4")),
            ("4K-", (3, "4-")),
        ],
    )
    def test_suffix_removed(self, value: str, expected: tuple[int, str]) -> None:
        assert extract_multiplier(value) == expected

    @pytest.mark.parametrize(
        "value",
        [
            "5 K",  # separated from the digit
            "10KB",  # part of a longer word
            "5 Kč",  # currency symbol, not a suffix
            "1,000",
            "K5",
            "",
        ],
    )
    def test_no_suffix(self, value: str) -> None:
        assert extract_multiplier(value) == (0, value)

    def test_digits_after_suffix_disqualify(self) -> None:
        assert extract_multiplier("5K 6") == (0, "5K 6")

    def test_only_last_digit_run_considered(self) -> None:
        assert extract_multiplier("2019 sales 5M") == (6, "2019 sales 5")
