"""Type guard for try_parse() results.

try_parse() returns tuple[ParseResult | None, tuple[MoneyParseError, ...]].
The guard checks the result component to narrow its type for mypy.

Python 3.13+ with TypeIs support (PEP 742).

Example:
    >>> from moneyparse import try_parse
    >>> result, errors = try_parse("€12,50")
    >>> if is_valid_result(result):
    ...     # mypy knows result is ParseResult
    ...     cents = result.amount * result.currency.subunit_to_unit
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeIs

if TYPE_CHECKING:
    from .parser import ParseResult

__all__ = ["is_valid_result"]


def is_valid_result(value: ParseResult | None) -> TypeIs[ParseResult]:
    """Type guard: Check if a parse result is present with a finite amount.

    Safe to call directly on try_parse() result without checking errors first.

    Args:
        value: ParseResult from try_parse() (may be None on error)

    Returns:
        True if value is a ParseResult with a finite amount, False otherwise
    """
    return value is not None and value.amount.is_finite()
