"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    """

    @staticmethod
    def too_many_delimiters(delimiters: tuple[str, ...], value: str) -> Diagnostic:
        """Numeric text mixes more than two distinct punctuation marks.

        Args:
            delimiters: Distinct delimiter characters in order of appearance
            value: The full input string

        Returns:
            Diagnostic for AMOUNT_TOO_MANY_DELIMITERS
        """
        marks = " ".join(repr(d) for d in delimiters)
        msg = f"Invalid amount '{value}': {len(delimiters)} different delimiters ({marks})"
        return Diagnostic(
            code=DiagnosticCode.AMOUNT_TOO_MANY_DELIMITERS,
            message=msg,
            hint="An amount uses at most a thousands separator and a decimal mark",
            input_value=value,
        )

    @staticmethod
    def embedded_hyphen(value: str) -> Diagnostic:
        """Hyphen found outside a leading or trailing sign run.

        Args:
            value: The full input string

        Returns:
            Diagnostic for AMOUNT_EMBEDDED_HYPHEN
        """
        msg = f"Invalid amount '{value}': hyphen inside the number"
        return Diagnostic(
            code=DiagnosticCode.AMOUNT_EMBEDDED_HYPHEN,
            message=msg,
            hint="A minus sign may only lead or trail the amount",
            input_value=value,
        )

    @staticmethod
    def no_digits(value: str) -> Diagnostic:
        """Nothing usable as the integer part of the amount.

        Args:
            value: The full input string

        Returns:
            Diagnostic for AMOUNT_NO_DIGITS
        """
        msg = f"Invalid amount '{value}': no integer digits found"
        return Diagnostic(
            code=DiagnosticCode.AMOUNT_NO_DIGITS,
            message=msg,
            hint="Write at least one digit before the decimal mark (e.g. 0.50)",
            input_value=value,
        )

    @staticmethod
    def not_decimal(number: str, value: str) -> Diagnostic:
        """Assembled major/minor text is not a decimal literal.

        Args:
            number: The assembled text handed to Decimal
            value: The full input string

        Returns:
            Diagnostic for AMOUNT_NOT_DECIMAL
        """
        msg = f"Invalid amount '{value}': '{number}' is not a decimal number"
        return Diagnostic(
            code=DiagnosticCode.AMOUNT_NOT_DECIMAL,
            message=msg,
            hint="Only digits may surround the decimal mark",
            input_value=value,
        )

    @staticmethod
    def currency_unknown(code: str, value: str | None = None) -> Diagnostic:
        """Currency code is not registered.

        Args:
            code: The unresolvable currency code
            value: The full input string, when parsing

        Returns:
            Diagnostic for CURRENCY_UNKNOWN
        """
        msg = f"Unknown currency '{code}'"
        return Diagnostic(
            code=DiagnosticCode.CURRENCY_UNKNOWN,
            message=msg,
            hint="Use a registered ISO 4217 code such as USD, EUR or GBP",
            input_value=value,
        )

    @staticmethod
    def currency_missing() -> Diagnostic:
        """No currency given and no default to fall back to.

        Returns:
            Diagnostic for CURRENCY_MISSING
        """
        return Diagnostic(
            code=DiagnosticCode.CURRENCY_MISSING,
            message="No currency given and no default currency available",
            hint="Pass a fallback currency or configure a default currency",
        )
