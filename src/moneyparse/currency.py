"""Currency registry with tiered loading.

Maps ISO 4217 codes to ``Currency`` records (symbol, decimal mark,
thousands separator, subunit ratio) and currency symbols to codes.

Tiered Loading Strategy:
    - Fast Tier: Common currencies with hand-curated delimiter conventions
      (immediate, no CLDR access)
    - Full Tier: Every other ISO code known to Unicode CLDR via Babel
      (lazy-loaded on the first lookup the fast tier cannot answer)

Full tier entries take their symbol and subunit precision from CLDR and use
"." / "," as decimal mark / thousands separator.

Thread-safe: the full tier is loaded once behind a lock, all other state is
immutable after construction.

Python 3.13+.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from babel.numbers import get_currency_precision, get_currency_symbol, list_currencies

from moneyparse.constants import CURRENCY_SYMBOLS, DEFAULT_DECIMAL_MARK
from moneyparse.diagnostics import ErrorTemplate, UnknownCurrencyError

__all__ = ["DEFAULT_REGISTRY", "Currency", "CurrencyRegistry"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Currency:
    """A currency and the conventions used to write its amounts.

    Attributes:
        code: ISO 4217 code (e.g., "USD")
        symbol: Display symbol (e.g., "$")
        decimal_mark: Character separating major from minor units
        thousands_separator: Character grouping major-unit digits
        subunit_to_unit: Minor units per major unit (e.g., 100 cents)
    """

    code: str
    symbol: str
    decimal_mark: str = DEFAULT_DECIMAL_MARK
    thousands_separator: str = ","
    subunit_to_unit: int = 100

    def __post_init__(self) -> None:
        """Validate Currency invariants.

        Raises:
            ValueError: If the marks are not single, distinct characters, the
                symbol is empty, or subunit_to_unit is not positive.
        """
        if not self.symbol:
            msg = f"Currency {self.code} needs a non-empty symbol"
            raise ValueError(msg)
        if len(self.decimal_mark) != 1 or len(self.thousands_separator) != 1:
            msg = (
                f"Currency {self.code} marks must be single characters, got "
                f"{self.decimal_mark!r} and {self.thousands_separator!r}"
            )
            raise ValueError(msg)
        if self.decimal_mark == self.thousands_separator:
            msg = f"Currency {self.code} decimal mark equals thousands separator"
            raise ValueError(msg)
        if self.subunit_to_unit < 1:
            msg = f"Currency {self.code} subunit_to_unit must be >= 1, got {self.subunit_to_unit}"
            raise ValueError(msg)

    @property
    def subunit_digits(self) -> int:
        """Number of fractional digits (2 for a ratio of 100, 0 for 1)."""
        return len(str(self.subunit_to_unit)) - 1

    def __str__(self) -> str:
        return self.code


# =============================================================================
# FAST TIER: currencies with explicit delimiter conventions
# =============================================================================
_FAST_TIER_CURRENCIES: tuple[Currency, ...] = (
    # Americas
    Currency("USD", "$", ".", ",", 100),
    Currency("CAD", "$", ".", ",", 100),
    Currency("MXN", "$", ".", ",", 100),
    Currency("BRL", "R$", ",", ".", 100),
    Currency("ARS", "$", ",", ".", 100),
    Currency("CLP", "$", ",", ".", 1),
    Currency("COP", "$", ",", ".", 100),
    # Europe
    Currency("EUR", "€", ",", ".", 100),
    Currency("GBP", "£", ".", ",", 100),
    Currency("CHF", "CHF", ".", ",", 100),
    Currency("SEK", "kr", ",", " ", 100),
    Currency("NOK", "kr", ",", ".", 100),
    Currency("DKK", "kr.", ",", ".", 100),
    Currency("ISK", "kr.", ",", ".", 1),
    Currency("PLN", "zł", ",", " ", 100),
    Currency("CZK", "Kč", ",", ".", 100),
    Currency("HUF", "Ft", ",", ".", 100),
    Currency("RON", "Lei", ",", ".", 100),
    Currency("UAH", "₴", ".", ",", 100),
    Currency("RUB", "₽", ",", ".", 100),
    Currency("TRY", "₺", ",", ".", 100),
    # Asia-Pacific
    Currency("JPY", "¥", ".", ",", 1),
    Currency("CNY", "¥", ".", ",", 100),
    Currency("KRW", "₩", ".", ",", 1),
    Currency("INR", "₹", ".", ",", 100),
    Currency("IDR", "Rp", ",", ".", 100),
    Currency("MYR", "RM", ".", ",", 100),
    Currency("PHP", "₱", ".", ",", 100),
    Currency("SGD", "$", ".", ",", 100),
    Currency("HKD", "$", ".", ",", 100),
    Currency("TWD", "$", ".", ",", 100),
    Currency("THB", "฿", ".", ",", 100),
    Currency("VND", "₫", ",", ".", 1),
    Currency("AUD", "$", ".", ",", 100),
    Currency("NZD", "$", ".", ",", 100),
    Currency("KZT", "₸", ".", ",", 100),
    Currency("AZN", "₼", ".", ",", 100),
    # Middle East / Africa
    Currency("ILS", "₪", ".", ",", 100),
    Currency("AED", "د.إ", ".", ",", 100),
    Currency("KWD", "د.ك", ".", ",", 1000),
    Currency("BHD", "ب.د", ".", ",", 1000),
    Currency("JOD", "د.ا", ".", ",", 1000),
    Currency("ZAR", "R", ".", ",", 100),
    Currency("NGN", "₦", ".", ",", 100),
)


def _load_cldr_currencies(skip: Iterable[str]) -> dict[str, Currency]:
    """Build Currency records for every CLDR currency not in ``skip``.

    Returns:
        Mapping of ISO code to Currency with CLDR symbol and precision.
    """
    known = set(skip)
    currencies: dict[str, Currency] = {}
    for code in sorted(list_currencies()):
        if code in known:
            continue
        try:
            symbol = get_currency_symbol(code, locale="en")
            precision = get_currency_precision(code)
            currencies[code] = Currency(code, symbol or code, ".", ",", 10**precision)
        except (ValueError, KeyError) as e:
            logger.warning("Skipping CLDR currency '%s': %s", code, e)
    return currencies


class CurrencyRegistry:
    """Immutable lookup table for currencies and currency symbols.

    Provides:
    - code -> Currency lookup (case-insensitive)
    - symbol -> code mapping used for symbol detection
    - Tiered loading (fast tier immediate, full CLDR tier lazy-loaded)

    Attributes:
        _currencies: Fast tier and any caller-supplied currencies
        _symbols: Symbol -> code mapping in match-priority order
        _use_cldr: Whether unknown codes fall through to the CLDR tier
        _cldr: CLDR tier (empty until loaded)
        _loaded: Whether the CLDR tier has been loaded
        _lock: Threading lock for thread-safe initialization
    """

    __slots__ = (
        "_cldr",
        "_currencies",
        "_loaded",
        "_lock",
        "_symbols",
        "_use_cldr",
    )

    def __init__(
        self,
        currencies: Iterable[Currency] = _FAST_TIER_CURRENCIES,
        symbols: Mapping[str, str] = CURRENCY_SYMBOLS,
        *,
        use_cldr: bool = True,
    ) -> None:
        """Initialize the registry.

        Args:
            currencies: Currencies known without CLDR access
            symbols: Symbol -> ISO code mapping, in match-priority order
            use_cldr: Fall back to Babel's CLDR data for other codes
        """
        self._currencies: Mapping[str, Currency] = MappingProxyType(
            {currency.code: currency for currency in currencies}
        )
        self._symbols: Mapping[str, str] = MappingProxyType(dict(symbols))
        self._use_cldr = use_cldr
        self._cldr: Mapping[str, Currency] = MappingProxyType({})
        self._loaded = False
        self._lock = threading.Lock()

    @property
    def symbols(self) -> tuple[str, ...]:
        """Registered symbols in match-priority order."""
        return tuple(self._symbols)

    def code_for_symbol(self, symbol: str) -> str | None:
        """Return the ISO code for an exact symbol, or None."""
        return self._symbols.get(symbol)

    def is_known(self, code: str) -> bool:
        """Check whether ``code`` resolves to a registered currency."""
        return self._find(code.strip().upper()) is not None

    def lookup(self, code: str) -> Currency:
        """Return the Currency registered under ``code``.

        Raises:
            UnknownCurrencyError: If the code is not registered
        """
        normalized = code.strip().upper()
        currency = self._find(normalized)
        if currency is None:
            raise UnknownCurrencyError(
                ErrorTemplate.currency_unknown(code), currency_code=code
            )
        return currency

    def wrap(
        self,
        value: Currency | str | None,
        default: Currency | str | None = None,
    ) -> Currency:
        """Coerce a Currency, a code or None into a Currency.

        ``None`` resolves to ``default``; with no default it is an error.

        Raises:
            UnknownCurrencyError: If the code is unknown or nothing was given
        """
        if value is None:
            if default is None:
                raise UnknownCurrencyError(ErrorTemplate.currency_missing())
            return self.wrap(default)
        if isinstance(value, Currency):
            return value
        return self.lookup(value)

    def ensure_loaded(self) -> None:
        """Ensure the CLDR tier is loaded (thread-safe, idempotent).

        Uses double-check locking pattern for thread safety.
        """
        if self._loaded:
            return

        with self._lock:
            if self._loaded:
                return  # type: ignore[unreachable]

            cldr = _load_cldr_currencies(self._currencies)
            logger.debug("Loaded %d CLDR currencies", len(cldr))
            self._cldr = MappingProxyType(cldr)
            self._loaded = True

    def _find(self, code: str) -> Currency | None:
        currency = self._currencies.get(code)
        if currency is not None or not self._use_cldr:
            return currency
        self.ensure_loaded()
        return self._cldr.get(code)


DEFAULT_REGISTRY = CurrencyRegistry()
