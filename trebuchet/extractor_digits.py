"""
Part 1: calibration values from numerals only.

Everything that is not an ASCII digit is dropped; the first and last
surviving digits form the value.
"""

from __future__ import annotations

import re

from .word_to_digit import combine_first_last

_NON_DIGIT = re.compile(r"[^0-9]")


def extract_digits(line: str) -> str:
    """Return the ASCII digits of ``line`` in their original order."""
    return _NON_DIGIT.sub("", line)


def calibration_value(line: str, line_number: int | None = None) -> int:
    """'pqr3stu8vwx' → 38, 'treb7uchet' → 77."""
    return combine_first_last(extract_digits(line), line, line_number)
