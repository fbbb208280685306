#!/usr/bin/env python3
"""
Trebuchet Calibration — Entry Point
===================================

Computes both calibration checksums for a document and prints them.

Usage:
    python main.py                               # Bundled sample document
    python main.py path/to/input.txt             # Explicit document
    TREBUCHET_INPUT=input.txt python main.py     # Document from environment
    python main.py --explain                     # Per-line breakdown first
"""

from __future__ import annotations

import logging
import os
import sys

import click
from dotenv import find_dotenv, load_dotenv

from trebuchet.document import load_document, split_lines
from trebuchet.exceptions import CalibrationError
from trebuchet.models import CalibrationReport, Part
from trebuchet.pipeline import CalibrationPipeline, calibration_values

logger = logging.getLogger(__name__)


# ─── ANSI Color Constants ───────────────────────────────────────────

_RED = "\033[91m"
_DIM = "\033[2m"
_BOLD = "\033[1m"
_RESET = "\033[0m"


# ─── Printers ───────────────────────────────────────────────────────


def print_breakdown(text: str) -> None:
    """Print the value each line contributes, for both parts."""
    lines = split_lines(text)
    for part in Part:
        print(f"{_BOLD}Part {part.number}{_RESET}")
        for item in calibration_values(lines, part):
            print(
                f"  {_DIM}{item.line_number:>5}{_RESET}  {item.line:<40} "
                f"{item.digits:<12} {item.value:>3}"
            )


def print_report(report: CalibrationReport) -> None:
    """Two lines, one per part: total and elapsed time."""
    for result in (report.part1, report.part2):
        print(f"Solution part {result.part.number}: {result.total} ({result.elapsed_display})")


# ─── Main ────────────────────────────────────────────────────────────


def _log_level(name: str | None) -> int:
    """Map a level name such as 'debug' to its number; unknown names → WARNING."""
    level = logging.getLevelName((name or "WARNING").upper())
    return level if isinstance(level, int) else logging.WARNING


def _configure_logging() -> None:
    logging.basicConfig(
        level=_log_level(os.environ.get("TREBUCHET_LOG_LEVEL")),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


@click.command()
@click.argument("input_path", required=False, type=click.Path(dir_okay=False))
@click.option("--explain", is_flag=True, help="Print each line's digits and value first.")
def main(input_path: str | None, explain: bool) -> None:
    """Compute the calibration checksums of INPUT_PATH."""
    load_dotenv(find_dotenv(usecwd=True))
    _configure_logging()

    path = input_path or os.environ.get("TREBUCHET_INPUT") or None

    try:
        text = load_document(path)
        report = CalibrationPipeline().run(text)
    except CalibrationError as e:
        logger.debug("Calibration failed: %r", e.details)
        click.echo(f"{_RED}[{e.code}]{_RESET} {e}", err=True)
        sys.exit(1)

    # Both parts succeeded, so the breakdown cannot fail half-way
    if explain:
        print_breakdown(text)
    print_report(report)


if __name__ == "__main__":
    main()
