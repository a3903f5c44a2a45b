"""Parser configuration and per-call options.

``ParserConfig`` holds the process-level settings a parser is built with;
``ParseOptions`` overrides them for a single call. Both are frozen so a
parser can be shared between threads without synchronization.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from moneyparse.constants import DEFAULT_CURRENCY_CODE, ISO_CURRENCY_CODE_LENGTH

__all__ = ["DEFAULT_CONFIG", "EffectiveOptions", "ParseOptions", "ParserConfig"]


@dataclass(frozen=True, slots=True)
class ParserConfig:
    """Immutable configuration for MoneyParser.

    All fields have defaults; ``ParserConfig()`` with no arguments produces
    a usable configuration.

    Attributes:
        default_currency: ISO code used when the input names no currency and
            the caller passes no fallback (default: "USD").
        assume_from_symbol: Infer the currency from a symbol such as "€"
            when the input carries no letter code (default: True).
        expect_whole_subunits: Treat a lone delimiter as the decimal mark
            only when the digits after it match the currency's subunit
            precision (default: False).
        enforce_currency_delimiters: Treat a lone delimiter that equals the
            currency's thousands separator as grouping, never as a decimal
            mark (default: False).

    Example:
        >>> from moneyparse import MoneyParser
        >>> config = ParserConfig(default_currency="EUR", expect_whole_subunits=True)
        >>> MoneyParser(config).parse("12,50").amount
        Decimal('12.50')
    """

    default_currency: str = DEFAULT_CURRENCY_CODE
    assume_from_symbol: bool = True
    expect_whole_subunits: bool = False
    enforce_currency_delimiters: bool = False

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If default_currency is not a 3-letter alphabetic code.
        """
        code = self.default_currency
        if not (len(code) == ISO_CURRENCY_CODE_LENGTH and code.isascii() and code.isalpha()):
            msg = f"default_currency must be a 3-letter currency code, got {code!r}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class EffectiveOptions:
    """Options after per-call overrides have been merged into the config."""

    assume_from_symbol: bool
    expect_whole_subunits: bool
    enforce_currency_delimiters: bool


@dataclass(frozen=True, slots=True)
class ParseOptions:
    """Per-call overrides for ParserConfig flags.

    A field left as ``None`` inherits the parser's configured value.

    Attributes:
        assume_from_symbol: Override for ParserConfig.assume_from_symbol
        expect_whole_subunits: Override for ParserConfig.expect_whole_subunits
        enforce_currency_delimiters: Override for
            ParserConfig.enforce_currency_delimiters
    """

    assume_from_symbol: bool | None = None
    expect_whole_subunits: bool | None = None
    enforce_currency_delimiters: bool | None = None

    def resolve(self, config: ParserConfig) -> EffectiveOptions:
        """Merge these overrides over ``config``."""
        return EffectiveOptions(
            assume_from_symbol=_pick(self.assume_from_symbol, config.assume_from_symbol),
            expect_whole_subunits=_pick(
                self.expect_whole_subunits, config.expect_whole_subunits
            ),
            enforce_currency_delimiters=_pick(
                self.enforce_currency_delimiters, config.enforce_currency_delimiters
            ),
        )


def _pick(override: bool | None, default: bool) -> bool:
    return default if override is None else override


DEFAULT_CONFIG = ParserConfig()
