"""Shared constants for moneyparse.

Constants are grouped by domain:
- Currency detection: symbol table, code shape, symbol-prefix blacklist
- Multipliers: magnitude suffixes and their powers of ten
- Delimiters: characters that survive text normalization

Python 3.13+. Zero external dependencies.
"""

from types import MappingProxyType

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Currency detection
    "ISO_CURRENCY_CODE_LENGTH",
    "CURRENCY_SYMBOLS",
    "TWO_LETTER_SYMBOL_PREFIXES",
    # Multipliers
    "MULTIPLIER_SUFFIXES",
    # Delimiters
    "DEFAULT_DECIMAL_MARK",
    "AMOUNT_CHARACTERS",
    "SIGN_CHARACTER",
    "THOUSANDS_GROUP_LENGTH",
    # Defaults
    "DEFAULT_CURRENCY_CODE",
]

# ============================================================================
# CURRENCY DETECTION
# ============================================================================

# ISO 4217 currency codes are exactly 3 uppercase ASCII letters.
ISO_CURRENCY_CODE_LENGTH: int = 3

# Symbols recognised inside free-form input, in match-priority order.
# At a given position the first listed symbol that matches wins, so "R$"
# must precede "R" and "HK$" must precede nothing that shares its start.
CURRENCY_SYMBOLS: MappingProxyType[str, str] = MappingProxyType({
    "$": "USD",
    "€": "EUR",  # Euro sign
    "£": "GBP",  # Pound sign
    "₤": "GBP",  # Lira sign, used for sterling
    "R$": "BRL",
    "RM": "MYR",
    "Rp": "IDR",
    "R": "ZAR",
    "¥": "JPY",  # Yen sign
    "C$": "CAD",
    "₼": "AZN",  # Manat sign
    "元": "CNY",  # Yuan character
    "Kč": "CZK",  # Koruna
    "Ft": "HUF",
    "₹": "INR",  # Indian Rupee
    "₽": "RUB",  # Ruble
    "₺": "TRY",  # Turkish Lira
    "₴": "UAH",  # Hryvnia
    "Fr": "CHF",
    "zł": "PLN",  # Zloty
    "₸": "KZT",  # Tenge
    "₩": "KRW",  # Won
    "S$": "SGD",
    "HK$": "HKD",
    "NT$": "TWD",
    "₱": "PHP",  # Peso
})

# Uppercase pairs that look like currency codes but are the letter part of
# a multi-character symbol ("HK$", "NT$", "RM"). Never treated as codes.
TWO_LETTER_SYMBOL_PREFIXES: frozenset[str] = frozenset({"HK", "NT", "RM"})

# ============================================================================
# MULTIPLIERS
# ============================================================================

MULTIPLIER_SUFFIXES: MappingProxyType[str, int] = MappingProxyType({
    "K": 3,
    "M": 6,
    "B": 9,
    "T": 12,
})

# ============================================================================
# DELIMITERS
# ============================================================================

# Canonical decimal mark used when assembling major and minor digits.
DEFAULT_DECIMAL_MARK: str = "."

# Characters other than digits kept by text normalization.
AMOUNT_CHARACTERS: str = ".,'-"

SIGN_CHARACTER: str = "-"

# A run of exactly this many digits after a lone delimiter reads as a
# thousands group.
THOUSANDS_GROUP_LENGTH: int = 3

# ============================================================================
# DEFAULTS
# ============================================================================

DEFAULT_CURRENCY_CODE: str = "USD"
