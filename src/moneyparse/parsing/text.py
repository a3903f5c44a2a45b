"""Numeric text cleanup: symbol stripping, sign extraction.

Python 3.13+.
"""

from __future__ import annotations

import re

from moneyparse.constants import AMOUNT_CHARACTERS, SIGN_CHARACTER
from moneyparse.currency import Currency
from moneyparse.diagnostics import ErrorTemplate, InvalidAmountError

__all__ = ["drop_trailing_delimiter", "extract_sign", "normalize_text"]

_NON_AMOUNT_PATTERN = re.compile(rf"[^\d{re.escape(AMOUNT_CHARACTERS)}]+")
_LEADING_SIGN_PATTERN = re.compile(r"-+(.*)", re.DOTALL)
_TRAILING_SIGN_PATTERN = re.compile(r"(.*?)-+", re.DOTALL)


def normalize_text(value: str, currency: Currency) -> str:
    """Reduce ``value`` to digits, delimiters and hyphens.

    The currency's own symbol is removed only at the very start, so a
    symbol containing digits or delimiters ("kr.") does not leak into the
    number. Everything else outside ``0-9 . , ' -`` is dropped wherever it is.

    Example:
        >>> normalize_text("R$ 1.234,56", DEFAULT_REGISTRY.lookup("BRL"))
        '1.234,56'
    """
    if value.startswith(currency.symbol):
        value = value[len(currency.symbol):]
    return _NON_AMOUNT_PATTERN.sub("", value)


def extract_sign(number: str, *, value: str = "") -> tuple[bool, str]:
    """Split a leading or trailing run of hyphens off ``number``.

    Args:
        number: Normalized numeric text
        value: Original input, for error reporting

    Returns:
        Tuple of (negative, rest)

    Raises:
        InvalidAmountError: If a hyphen remains inside the number
    """
    match = _LEADING_SIGN_PATTERN.fullmatch(number) or _TRAILING_SIGN_PATTERN.fullmatch(number)
    negative, rest = (True, match.group(1)) if match else (False, number)

    if SIGN_CHARACTER in rest:
        raise InvalidAmountError(ErrorTemplate.embedded_hyphen(value), input_value=value)
    return negative, rest


def drop_trailing_delimiter(number: str) -> str:
    """Remove one dangling "." or "," left at the end of ``number``."""
    if number.endswith((".", ",")):
        return number[:-1]
    return number
