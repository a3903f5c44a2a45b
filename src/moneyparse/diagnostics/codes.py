"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages for monetary string parsing.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorCategory",
]


class ErrorCategory(StrEnum):
    """Error categorization for MoneyParseError.

    Inherits from ``StrEnum`` so that ``str(category)`` and direct string
    comparisons work without accessing ``.value``.

    Categories:
        AMOUNT: The numeric part of the input could not be interpreted
        CURRENCY: The currency could not be resolved against the registry
    """

    AMOUNT = "amount"
    CURRENCY = "currency"


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Amount errors (delimiters, sign, decimal assembly)
        2000-2999: Currency errors (registry lookups)
    """

    # Amount errors (1000-1999)
    AMOUNT_TOO_MANY_DELIMITERS = 1001
    AMOUNT_EMBEDDED_HYPHEN = 1002
    AMOUNT_NOT_DECIMAL = 1003
    AMOUNT_NO_DIGITS = 1004

    # Currency errors (2000-2999)
    CURRENCY_UNKNOWN = 2001
    CURRENCY_MISSING = 2002

    @property
    def category(self) -> ErrorCategory:
        """Category derived from the numeric range of the code."""
        if self.value < 2000:
            return ErrorCategory.AMOUNT
        return ErrorCategory.CURRENCY


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the input
        input_value: The string being parsed when the error occurred
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    input_value: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[AMOUNT_EMBEDDED_HYPHEN]: Invalid amount '1-2': hyphen inside the number
              = input: 1-2
              = help: A minus sign may only lead or trail the amount

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
