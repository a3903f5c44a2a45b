"""Free-form money string parsing.

API:
    parse() returns ParseResult(amount, currency) and raises MoneyParseError
    subclasses on failure.
    try_parse() returns tuple[ParseResult | None, tuple[MoneyParseError, ...]]
    and never raises for malformed input.

Pipeline, run fresh for every call:
    1. Resolve the currency (code, symbol, fallback, default)
    2. Strip a K/M/B/T magnitude suffix
    3. Reduce the text to digits, delimiters and hyphens
    4. Extract the sign and drop a dangling delimiter
    5. Split into major and minor digits
    6. Assemble the exact Decimal, apply magnitude and sign

Thread-safe. A MoneyParser holds only immutable configuration and a
registry whose lazy CLDR tier is loaded under a lock.

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import NamedTuple

from moneyparse.config import DEFAULT_CONFIG, ParseOptions, ParserConfig
from moneyparse.currency import DEFAULT_REGISTRY, Currency, CurrencyRegistry
from moneyparse.diagnostics import MoneyParseError

from .amount import assemble_amount
from .delimiters import split_major_minor
from .multiplier import extract_multiplier
from .resolver import resolve_currency
from .text import drop_trailing_delimiter, extract_sign, normalize_text

__all__ = ["MoneyParser", "ParseResult", "ParseState", "parse", "try_parse"]

logger = logging.getLogger(__name__)

_NO_OPTIONS = ParseOptions()


class ParseResult(NamedTuple):
    """Parsed amount and the currency it is expressed in."""

    amount: Decimal
    currency: Currency


@dataclass(frozen=True, slots=True)
class ParseState:
    """Everything the pipeline knows just before assembling the amount.

    Attributes:
        value: Trimmed raw input
        currency: Resolved currency
        exponent: Power of ten from a magnitude suffix (0, 3, 6, 9 or 12)
        negative: Whether a sign run was found
        number: Cleaned numeric text without sign or dangling delimiter
        major: Integer-part digits
        minor: Fractional-part digits
    """

    value: str
    currency: Currency
    exponent: int
    negative: bool
    number: str
    major: str
    minor: str

    def assemble(self) -> ParseResult:
        """Build the final result from this state.

        Raises:
            InvalidAmountError: If the digits do not form a decimal number
        """
        amount = assemble_amount(
            self.major,
            self.minor,
            exponent=self.exponent,
            negative=self.negative,
            value=self.value,
        )
        return ParseResult(amount, self.currency)


class MoneyParser:
    """Parser for human-written monetary strings.

    Attributes:
        config: Process-level defaults (default currency, heuristics flags)
        registry: Currency registry used for codes and symbols

    Example:
        >>> parser = MoneyParser()
        >>> parser.parse("$1,234.56")
        ParseResult(amount=Decimal('1234.56'), currency=Currency(code='USD', ...))
        >>> parser.parse("€1.234,56").currency.code
        'EUR'
        >>> parser.parse("1.5M", "USD").amount
        Decimal('1500000')
    """

    __slots__ = ("config", "registry")

    def __init__(
        self,
        config: ParserConfig = DEFAULT_CONFIG,
        registry: CurrencyRegistry = DEFAULT_REGISTRY,
    ) -> None:
        self.config = config
        self.registry = registry

    def __repr__(self) -> str:
        return f"MoneyParser(config={self.config!r})"

    def analyze(
        self,
        value: str,
        fallback_currency: Currency | str | None = None,
        options: ParseOptions | None = None,
    ) -> ParseState:
        """Run every pipeline stage except amount assembly.

        Args:
            value: Monetary string (non-strings are converted with str())
            fallback_currency: Currency used when the input names none
            options: Per-call overrides of the parser configuration

        Returns:
            The intermediate ParseState

        Raises:
            InvalidAmountError: On an embedded hyphen or too many delimiters
            UnknownCurrencyError: If the resolved currency is not registered
        """
        value = str(value).strip()
        effective = (options or _NO_OPTIONS).resolve(self.config)

        currency = resolve_currency(
            value,
            fallback_currency,
            registry=self.registry,
            default_currency=self.config.default_currency,
            assume_from_symbol=effective.assume_from_symbol,
        )
        exponent, text = extract_multiplier(value)
        negative, number = extract_sign(normalize_text(text, currency), value=value)
        number = drop_trailing_delimiter(number)
        major, minor = split_major_minor(number, currency, effective, value=value)

        return ParseState(
            value=value,
            currency=currency,
            exponent=exponent,
            negative=negative,
            number=number,
            major=major,
            minor=minor,
        )

    def parse(
        self,
        value: str,
        fallback_currency: Currency | str | None = None,
        options: ParseOptions | None = None,
    ) -> ParseResult:
        """Parse a monetary string into (amount, currency).

        Raises:
            InvalidAmountError: If the numeric part cannot be interpreted
            UnknownCurrencyError: If the resolved currency is not registered
        """
        return self.analyze(value, fallback_currency, options).assemble()

    def try_parse(
        self,
        value: str,
        fallback_currency: Currency | str | None = None,
        options: ParseOptions | None = None,
    ) -> tuple[ParseResult | None, tuple[MoneyParseError, ...]]:
        """Parse without raising; errors are returned in the tuple.

        Returns:
            Tuple of (result, errors):
            - result: ParseResult, or None if parsing failed
            - errors: Tuple of MoneyParseError (empty tuple on success)
        """
        try:
            return self.parse(value, fallback_currency, options), ()
        except MoneyParseError as e:
            logger.debug("Could not parse %r: %s", value, e)
            return None, (e,)


_default_parser = MoneyParser()


def parse(
    value: str,
    fallback_currency: Currency | str | None = None,
    options: ParseOptions | None = None,
) -> ParseResult:
    """Parse with the default parser. See MoneyParser.parse."""
    return _default_parser.parse(value, fallback_currency, options)


def try_parse(
    value: str,
    fallback_currency: Currency | str | None = None,
    options: ParseOptions | None = None,
) -> tuple[ParseResult | None, tuple[MoneyParseError, ...]]:
    """Parse with the default parser without raising. See MoneyParser.try_parse."""
    return _default_parser.try_parse(value, fallback_currency, options)
