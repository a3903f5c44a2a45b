"""Money parsing exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, ErrorCategory


class MoneyParseError(Exception):
    """Base exception for all money parsing errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
        input_value: The string that failed to parse
    """

    def __init__(self, message: str | Diagnostic, *, input_value: str = "") -> None:
        """Initialize MoneyParseError.

        Args:
            message: Error message string OR Diagnostic object
            input_value: The string that failed to parse
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)
        self.input_value = input_value

    @property
    def category(self) -> ErrorCategory | None:
        """Error category, when a diagnostic is attached."""
        if self.diagnostic is None:
            return None
        return self.diagnostic.code.category


class InvalidAmountError(MoneyParseError):
    """The numeric part of the input cannot be read as an amount.

    Raised for more than two distinct delimiter characters, a hyphen
    inside the number, or text that does not assemble into a decimal.
    """


class UnknownCurrencyError(MoneyParseError):
    """A currency code or symbol does not exist in the registry.

    Attributes:
        currency_code: The code that failed the lookup (empty if none given)
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        currency_code: str = "",
        input_value: str = "",
    ) -> None:
        """Initialize UnknownCurrencyError.

        Args:
            message: Error message string OR Diagnostic object
            currency_code: The code that failed the lookup
            input_value: The string being parsed, if any
        """
        super().__init__(message, input_value=input_value)
        self.currency_code = currency_code
