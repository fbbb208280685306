"""
Calibration pipeline — runs both extractors over a document.

Flow:
  ┌──────────┐
  │ Document │
  └────┬─────┘
       │ split_lines
  ┌────▼─────┐     ┌──────────┐
  │  Part 1  │     │  Part 2  │   ← Independent, each timed
  │  digits  │     │  words   │
  └────┬─────┘     └────┬─────┘
       │                │
       └───────┬────────┘
               │
        ┌──────▼──────┐
        │   Report    │   ← Totals + timings + audit hash
        └─────────────┘

Design principles:
  - Extractors are pure functions; the pipeline holds no per-run state.
  - A line without a qualifying digit aborts the run (NoDigitInLine).
    There are no partial sums and no skipped lines.
"""

from __future__ import annotations

import hashlib
import logging
import time
from typing import Callable, Iterable

from . import extractor_digits, extractor_words
from .document import split_lines
from .models import CalibrationReport, CalibrationValue, Part, PartResult

logger = logging.getLogger(__name__)

_EXTRACTORS: dict[Part, tuple[Callable[[str], str], Callable[..., int]]] = {
    Part.DIGITS: (extractor_digits.extract_digits, extractor_digits.calibration_value),
    Part.WORDS: (extractor_words.extract_digits, extractor_words.calibration_value),
}


def calibration_values(lines: Iterable[str], part: Part) -> list[CalibrationValue]:
    """Per-line breakdown: which digits were found and the value they form."""
    extract, value_of = _EXTRACTORS[part]
    results: list[CalibrationValue] = []

    for line_number, line in enumerate(lines, start=1):
        value = value_of(line, line_number)
        results.append(
            CalibrationValue(
                line_number=line_number,
                line=line,
                digits=extract(line),
                value=value,
            )
        )
        logger.debug("%s line %d: %r → %d", part.value, line_number, line, value)

    return results


def sum_calibration_values(lines: Iterable[str], part: Part) -> int:
    """Sum of calibration values across all lines for the given part."""
    _, value_of = _EXTRACTORS[part]
    return sum(
        value_of(line, line_number)
        for line_number, line in enumerate(lines, start=1)
    )


class CalibrationPipeline:
    """Computes both checksums for a calibration document.

    Usage:
        pipeline = CalibrationPipeline()
        report = pipeline.run(load_document())
        print(report.part1.total, report.part2.total)
    """

    def run(self, text: str) -> CalibrationReport:
        """Execute both parts on the document text.

        Raises:
            NoDigitInLine: If any line yields no qualifying digit.
        """
        doc_hash = hashlib.sha256(text.encode("utf-8")).hexdigest()
        lines = split_lines(text)

        part1 = self._timed(lines, Part.DIGITS)
        part2 = self._timed(lines, Part.WORDS)

        return CalibrationReport(
            part1=part1,
            part2=part2,
            line_count=len(lines),
            source_hash=doc_hash,
        )

    def _timed(self, lines: list[str], part: Part) -> PartResult:
        logger.info("Starting %s over %d line(s)...", part.value, len(lines))
        started = time.perf_counter()
        total = sum_calibration_values(lines, part)
        elapsed = time.perf_counter() - started
        logger.info("%s total=%d in %.6fs", part.value, total, elapsed)

        return PartResult(
            part=part,
            total=total,
            line_count=len(lines),
            elapsed_seconds=elapsed,
        )
