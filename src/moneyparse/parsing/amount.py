"""Final amount assembly from major/minor digits.

All arithmetic here is exact: the multiplier is applied by moving the
decimal exponent and the sign by ``copy_negate``, neither of which consults
the decimal context, so no precision is lost for long amounts.

Python 3.13+.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

from moneyparse.constants import DEFAULT_DECIMAL_MARK
from moneyparse.diagnostics import ErrorTemplate, InvalidAmountError

__all__ = ["apply_multiplier", "assemble_amount", "to_decimal"]


def to_decimal(major: str, minor: str, *, value: str = "") -> Decimal:
    """Join ``major`` and ``minor`` with the canonical decimal mark.

    Raises:
        InvalidAmountError: If major is empty or the joined text is not a
            decimal literal
    """
    if not major:
        raise InvalidAmountError(ErrorTemplate.no_digits(value), input_value=value)

    number = f"{major}{DEFAULT_DECIMAL_MARK}{minor}"
    try:
        return Decimal(number)
    except InvalidOperation as e:
        raise InvalidAmountError(
            ErrorTemplate.not_decimal(number, value), input_value=value
        ) from e


def apply_multiplier(amount: Decimal, exponent: int) -> Decimal:
    """Multiply ``amount`` by 10**exponent without rounding.

    A result with no fractional digits is written out in full, so
    ``apply_multiplier(Decimal("1.5"), 6)`` is ``Decimal("1500000")`` rather
    than ``Decimal("1.5E+6")``.
    """
    if not exponent:
        return amount

    sign, digits, exp = amount.as_tuple()
    assert isinstance(exp, int)  # Type narrowing: amount is finite
    exp += exponent
    if exp > 0:
        digits = (*digits, *(0,) * exp)
        exp = 0
    return Decimal((sign, digits, exp))


def assemble_amount(
    major: str,
    minor: str,
    *,
    exponent: int = 0,
    negative: bool = False,
    value: str = "",
) -> Decimal:
    """Build the final signed amount.

    Example:
        >>> assemble_amount("1", "5", exponent=6)
        Decimal('1500000')
        >>> assemble_amount("20", "0", negative=True)
        Decimal('-20.0')
    """
    amount = apply_multiplier(to_decimal(major, minor, value=value), exponent)
    return amount.copy_negate() if negative else amount
