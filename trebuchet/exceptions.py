"""
Custom exception hierarchy for calibration runs.

Each exception type maps to one fatal condition, so the entry point can
report a machine-readable code alongside the message.
"""

from __future__ import annotations


class CalibrationError(Exception):
    """Base exception for all calibration failures."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.details = details or {}
        super().__init__(message)


class MissingInputFile(CalibrationError):
    """The calibration document cannot be located or read."""

    def __init__(self, path: str, reason: str):
        super().__init__(
            "MISSING_INPUT_FILE",
            f"Cannot read calibration document {path!r}: {reason}",
            {"path": path, "reason": reason},
        )


class NoDigitInLine(CalibrationError):
    """A line holds no qualifying digit, so no calibration value exists."""

    def __init__(self, line: str, line_number: int | None = None):
        where = f"line {line_number}" if line_number is not None else "line"
        details: dict = {"line": line}
        if line_number is not None:
            details["line_number"] = line_number
        super().__init__(
            "NO_DIGIT_IN_LINE",
            f"No digit found in {where}: {line!r}",
            details,
        )
