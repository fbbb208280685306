"""
Part 2: calibration values from numerals AND spelled-out digits.

Spelled-out digits may share letters ("oneight", "twone"), and both words
count. A plain alternation such as ``(one|...|nine|[1-9])`` consumes the
match and would only ever see "one" in "oneight". The pattern below is a
zero-width lookahead with a capture group inside it: the regex engine
records the word, then advances a single character and tries again, so
every word starting at every position is reported.
"""

from __future__ import annotations

import re

from .word_to_digit import NAMES_TO_DIGITS, combine_first_last, to_digit

NAME_OR_DIGIT = re.compile(
    r"(?=(" + "|".join(NAMES_TO_DIGITS) + r"|[1-9]))"
)


def find_names_and_digits(line: str) -> list[str]:
    """Every matched token, ordered by starting position.

    Example:
        "zoneight234" → ["one", "eight", "2", "3", "4"]
    """
    return NAME_OR_DIGIT.findall(line)


def extract_digits(line: str) -> str:
    """Matched tokens converted to numerals: "xtwone3four" → "2134"."""
    return "".join(to_digit(token) for token in find_names_and_digits(line))


def calibration_value(line: str, line_number: int | None = None) -> int:
    """'eightwothree' → 83, 'oneight' → 18, '7pqrstsixteen' → 76."""
    return combine_first_last(extract_digits(line), line, line_number)
