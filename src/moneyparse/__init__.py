"""moneyparse - Forgiving parser for human-written monetary amounts.

Turns strings such as "$1,234.56", "€1.234,56", "1.5M" or "-£20" into an
exact Decimal amount and a resolved Currency, working out which punctuation
is the decimal mark and which groups thousands.

Public API:
    parse - Parse a string, raising MoneyParseError subclasses on failure
    try_parse - Parse a string, returning (result, errors) instead of raising
    MoneyParser - Parser bound to an explicit ParserConfig and CurrencyRegistry
    ParserConfig - Process-level defaults
    ParseOptions - Per-call overrides
    Currency, CurrencyRegistry - Currency data and lookups

Exceptions:
    MoneyParseError - Base exception class
    InvalidAmountError - Numeric text cannot be interpreted
    UnknownCurrencyError - Currency is not registered

Submodules:
    moneyparse.parsing - Pipeline stages and the parser
    moneyparse.diagnostics - Error types, codes and formatting
"""

from .config import DEFAULT_CONFIG, ParseOptions, ParserConfig
from .currency import DEFAULT_REGISTRY, Currency, CurrencyRegistry
from .diagnostics import InvalidAmountError, MoneyParseError, UnknownCurrencyError
from .parsing import (
    MoneyParser,
    ParseResult,
    ParseState,
    is_valid_result,
    parse,
    try_parse,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("moneyparse")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "DEFAULT_CONFIG",
    "DEFAULT_REGISTRY",
    "Currency",
    "CurrencyRegistry",
    "InvalidAmountError",
    "MoneyParseError",
    "MoneyParser",
    "ParseOptions",
    "ParseResult",
    "ParseState",
    "ParserConfig",
    "UnknownCurrencyError",
    "__version__",
    "is_valid_result",
    "parse",
    "try_parse",
]
