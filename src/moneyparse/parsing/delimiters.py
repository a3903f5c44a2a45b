"""Decimal mark / thousands separator disambiguation.

Splits cleaned numeric text (digits plus ``.``, ``,`` and ``'``, no sign)
into major and minor digit strings.

Rules by number of distinct delimiter characters:
    0: all digits are major, minor is "0"
    1: resolved by the single-delimiter priority chain below
    2: the first to appear groups thousands, the second is the decimal mark
       (digits after a repeated decimal mark are dropped)
    3+: invalid

Single delimiter priority chain:
    1. expect_whole_subunits and the digits after it match the currency's
       subunit precision: decimal mark
    2. it is the currency's decimal mark: decimal mark
    3. enforce_currency_delimiters and it is the currency's thousands
       separator: grouping
    4. tentative heuristic (see ``split_tentative``)

Steps 1 and 2 only split a delimiter that occurs once. A repeated delimiter
always groups digits, so "1.2.3" is 123 even for a currency whose decimal
mark is ".".

Python 3.13+.
"""

from __future__ import annotations

import logging

from moneyparse.config import EffectiveOptions
from moneyparse.constants import THOUSANDS_GROUP_LENGTH
from moneyparse.currency import Currency
from moneyparse.diagnostics import ErrorTemplate, InvalidAmountError

__all__ = [
    "distinct_delimiters",
    "split_major_minor",
    "split_on",
    "split_single_delimiter",
    "split_tentative",
]

logger = logging.getLogger(__name__)

# Minor digits for an amount written without a fractional part.
_NO_MINOR = "0"
# Minor digits when a delimiter has nothing after it.
_EMPTY_MINOR = "00"


def distinct_delimiters(number: str) -> tuple[str, ...]:
    """Non-digit characters of ``number`` in order of first appearance."""
    return tuple(dict.fromkeys(ch for ch in number if not ch.isdigit()))


def split_on(number: str, delimiter: str) -> tuple[str, str]:
    """Split at ``delimiter`` keeping the first two fields.

    Anything after a second occurrence is dropped, so "1000,00,00" splits
    to ("1000", "00"). A missing or empty minor becomes "00".
    """
    major, *rest = number.split(delimiter)
    minor = rest[0] if rest else ""
    return major, minor or _EMPTY_MINOR


def split_tentative(
    number: str,
    delimiter: str,
    *,
    expect_whole_subunits: bool,
) -> tuple[str, str]:
    """Guess whether a lone delimiter is a decimal mark or a separator.

    A delimiter occurring more than once can only be grouping digits.
    Otherwise three digits after it read as a thousands group unless the
    integer part is longer than three digits, the integer part is zero, or
    the delimiter is "." and whole subunits are not expected.
    """
    if number.count(delimiter) > 1:
        return number.replace(delimiter, ""), _NO_MINOR

    major, minor = split_on(number, delimiter)
    is_decimal_mark = (
        len(minor) != THOUSANDS_GROUP_LENGTH
        or len(major) > THOUSANDS_GROUP_LENGTH
        or int(major or "0") == 0
        or (not expect_whole_subunits and delimiter == ".")
    )
    if is_decimal_mark:
        return major, minor
    return major + minor, _NO_MINOR


def split_single_delimiter(
    number: str,
    delimiter: str,
    currency: Currency,
    options: EffectiveOptions,
) -> tuple[str, str]:
    """Resolve a number that uses exactly one distinct delimiter."""
    repeated = number.count(delimiter) > 1

    if options.expect_whole_subunits:
        major, minor = split_on(number, delimiter)
        if not repeated and len(minor) == currency.subunit_digits:
            return major, minor
        return split_tentative(number, delimiter, expect_whole_subunits=True)

    if delimiter == currency.decimal_mark and not repeated:
        return split_on(number, delimiter)

    if options.enforce_currency_delimiters and delimiter == currency.thousands_separator:
        return number.replace(delimiter, ""), _NO_MINOR

    return split_tentative(number, delimiter, expect_whole_subunits=False)


def split_major_minor(
    number: str,
    currency: Currency,
    options: EffectiveOptions,
    *,
    value: str = "",
) -> tuple[str, str]:
    """Split cleaned numeric text into (major, minor) digit strings.

    Args:
        number: Digits and delimiters, sign already removed
        currency: Resolved currency, for its delimiter conventions
        options: Effective parse options
        value: Original input, for error reporting

    Returns:
        Tuple of (major, minor) digit strings

    Raises:
        InvalidAmountError: If more than two distinct delimiters are used

    Example:
        >>> usd = DEFAULT_REGISTRY.lookup("USD")
        >>> split_major_minor("1.234,56", usd, EffectiveOptions(True, False, False))
        ('1234', '56')
        >>> split_major_minor("1,000", usd, EffectiveOptions(True, False, False))
        ('1000', '0')
    """
    delimiters = distinct_delimiters(number)

    match len(delimiters):
        case 0:
            result = number, _NO_MINOR
        case 1:
            result = split_single_delimiter(number, delimiters[0], currency, options)
        case 2:
            thousands_separator, decimal_mark = delimiters
            result = split_on(number.replace(thousands_separator, ""), decimal_mark)
        case _:
            raise InvalidAmountError(
                ErrorTemplate.too_many_delimiters(delimiters, value), input_value=value
            )

    logger.debug("Split %r (%s) -> major=%r minor=%r", number, currency.code, *result)
    return result
