"""
Map spelled-out digits to numerals and fold digit strings into calibration values.

The lookup table is fixed: only "one" through "nine" count. There is no
"zero", and no teens or tens; a calibration value is always built from two
single digits.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from .exceptions import NoDigitInLine

# ─── Word Lookup Table ───────────────────────────────────────────────

NAMES_TO_DIGITS: Mapping[str, str] = MappingProxyType({
    "one": "1",
    "two": "2",
    "three": "3",
    "four": "4",
    "five": "5",
    "six": "6",
    "seven": "7",
    "eight": "8",
    "nine": "9",
})


# ─── Token Conversion ────────────────────────────────────────────────


def to_digit(token: str) -> str:
    """Convert a matched token ("7" or "seven") to its numeral.

    Raises:
        ValueError: If the token is neither a numeral nor a known digit name.
    """
    if len(token) == 1 and "0" <= token <= "9":
        return token
    try:
        return NAMES_TO_DIGITS[token]
    except KeyError:
        raise ValueError(f"Unrecognized digit token: {token!r}") from None


def combine_first_last(digits: str, line: str, line_number: int | None = None) -> int:
    """Join the first and last digit of ``digits`` into a two-digit number.

    A single digit fills both positions ("7" → 77).

    Raises:
        NoDigitInLine: If ``digits`` is empty.
    """
    if not digits:
        raise NoDigitInLine(line, line_number)
    return int(digits[0] + digits[-1])
