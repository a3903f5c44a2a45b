"""Parsing pipeline: human-written money strings to (Decimal, Currency).

- parse() raises MoneyParseError subclasses on malformed input
- try_parse() never raises for malformed input; errors returned in tuple

Public API:
    Parsing Functions:
        parse - Returns ParseResult(amount, currency)
        try_parse - Returns tuple[ParseResult | None, tuple[MoneyParseError, ...]]

    Parser:
        MoneyParser - Parser bound to a ParserConfig and CurrencyRegistry
        ParseState - Intermediate state exposed by MoneyParser.analyze()

    Type Guards:
        is_valid_result - TypeIs guard for ParseResult (not None)

Example:
    >>> from moneyparse.parsing import parse
    >>> amount, currency = parse("-£20")
    >>> amount, currency.code
    (Decimal('-20.0'), 'GBP')

Python 3.13+.
"""

from .guards import is_valid_result
from .parser import MoneyParser, ParseResult, ParseState, parse, try_parse

__all__ = [
    "MoneyParser",
    "ParseResult",
    "ParseState",
    "is_valid_result",
    "parse",
    "try_parse",
]
