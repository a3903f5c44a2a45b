"""Magnitude suffix handling ("1.5M", "20k", "3B USD").

Python 3.13+.
"""

from __future__ import annotations

import logging
import re

from moneyparse.constants import MULTIPLIER_SUFFIXES

__all__ = ["extract_multiplier"]

logger = logging.getLogger(__name__)

# Group 1: everything up to the last digit before the suffix.
# Group 2: the suffix, which must end a word.
# Group 3: trailing text with no further digits.
_MULTIPLIER_PATTERN = re.compile(
    rf"^(.*?\d)({'|'.join(MULTIPLIER_SUFFIXES)})\b(\D*)$",
    re.IGNORECASE | re.DOTALL,
)

# Keyed by lowercase: IGNORECASE also matches the Kelvin sign, whose
# uppercase form is itself.
_EXPONENTS = {suffix.lower(): exponent for suffix, exponent in MULTIPLIER_SUFFIXES.items()}


def extract_multiplier(value: str) -> tuple[int, str]:
    """Detect and remove a trailing K/M/B/T magnitude suffix.

    Args:
        value: Trimmed raw input

    Returns:
        Tuple of (exponent, text): the power of ten the suffix stands for
        (0 when there is none) and the input with the suffix removed.

    Example:
        >>> extract_multiplier("$1.5M")
        (6, '$1.5')
        >>> extract_multiplier("20k EUR")
        (3, '20 EUR')
        >>> extract_multiplier("5 Kč")
        (0, '5 Kč')
    """
    match = _MULTIPLIER_PATTERN.match(value)
    if match is None:
        return 0, value

    head, suffix, tail = match.groups()
    exponent = _EXPONENTS[suffix.lower()]
    logger.debug("Multiplier suffix %r in %r -> 10^%d", suffix, value, exponent)
    return exponent, head + tail
