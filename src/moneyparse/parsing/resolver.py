"""Currency resolution from free-form input.

Resolution order:
    1. First run of 2-3 uppercase ASCII letters (a candidate ISO code),
       unless it is the letter part of a symbol such as "HK$" or "RM"
    2. A registered currency symbol, when symbol inference is enabled
    3. The caller's fallback currency, then the configured default

Whatever is found is wrapped through the registry, so an unregistered
code raises UnknownCurrencyError rather than silently falling back.

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
import re
from dataclasses import replace

from moneyparse.constants import TWO_LETTER_SYMBOL_PREFIXES
from moneyparse.currency import Currency, CurrencyRegistry
from moneyparse.diagnostics import Diagnostic, UnknownCurrencyError

__all__ = ["find_currency_code", "find_currency_symbol", "resolve_currency"]

logger = logging.getLogger(__name__)

_CODE_PATTERN = re.compile(r"[A-Z]{2,3}")

# Distinct symbol sets seen by one process; one per registry in practice.
_SYMBOL_PATTERN_CACHE_SIZE = 32


@functools.lru_cache(maxsize=_SYMBOL_PATTERN_CACHE_SIZE)
def _symbol_pattern(symbols: tuple[str, ...]) -> re.Pattern[str]:
    """Compile the symbol alternation for a registry's symbol set.

    Alternatives keep registry order: at any position the first listed symbol
    that matches wins. A symbol may not touch an ASCII letter on either side.
    """
    alternation = "|".join(re.escape(symbol) for symbol in symbols)
    return re.compile(rf"(?<![A-Z])({alternation})(?![A-Z])", re.IGNORECASE)


def find_currency_code(value: str) -> str | None:
    """Return the first uppercase 2-3 letter run that can be a currency code."""
    match = _CODE_PATTERN.search(value)
    if match is None or match.group() in TWO_LETTER_SYMBOL_PREFIXES:
        return None
    return match.group()


def find_currency_symbol(value: str, registry: CurrencyRegistry) -> str | None:
    """Return the ISO code of the leftmost registered symbol in ``value``."""
    symbols = registry.symbols
    if not symbols:
        return None
    match = _symbol_pattern(symbols).search(value)
    if match is None:
        return None
    return registry.code_for_symbol(match.group(1))


def resolve_currency(
    value: str,
    fallback: Currency | str | None,
    *,
    registry: CurrencyRegistry,
    default_currency: str,
    assume_from_symbol: bool,
) -> Currency:
    """Determine the currency of ``value``.

    Args:
        value: Trimmed raw input
        fallback: Currency to use when the input names none
        registry: Registry used for symbol and code lookups
        default_currency: Code used when there is no fallback either
        assume_from_symbol: Allow inference from a bare currency symbol

    Returns:
        The resolved Currency

    Raises:
        UnknownCurrencyError: If the resolved code is not registered
    """
    try:
        code = find_currency_code(value)
        if code is not None:
            logger.debug("Currency for %r from code %s", value, code)
            return registry.lookup(code)

        if assume_from_symbol:
            code = find_currency_symbol(value, registry)
            if code is not None:
                logger.debug("Currency for %r from symbol -> %s", value, code)
                return registry.lookup(code)

        logger.debug("Currency for %r from fallback %s", value, fallback or default_currency)
        return registry.wrap(fallback, default_currency)
    except UnknownCurrencyError as e:
        raise _with_input(e, value) from e


def _with_input(error: UnknownCurrencyError, value: str) -> UnknownCurrencyError:
    """Copy a registry error, attaching the input being parsed."""
    message: str | Diagnostic = str(error)
    if error.diagnostic is not None:
        message = replace(error.diagnostic, input_value=value)
    return UnknownCurrencyError(message, currency_code=error.currency_code, input_value=value)
