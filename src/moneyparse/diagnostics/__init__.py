"""Diagnostic system for money parsing errors.

Provides structured error diagnostics with codes, hints and formatting.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, ErrorCategory
from .errors import InvalidAmountError, MoneyParseError, UnknownCurrencyError
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorCategory",
    "ErrorTemplate",
    "InvalidAmountError",
    "MoneyParseError",
    "OutputFormat",
    "UnknownCurrencyError",
]
