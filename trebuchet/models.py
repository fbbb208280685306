"""
Pydantic models for calibration results.

Every value produced by a run is typed at the boundary; nothing here is
persisted or mutated after construction.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


# ─── Parts ──────────────────────────────────────────────────────────


class Part(str, Enum):
    """Which notion of 'digit' an extraction uses."""

    DIGITS = "part1"  # Numerals only
    WORDS = "part2"  # Numerals and "one".."nine"

    @property
    def number(self) -> int:
        return 1 if self is Part.DIGITS else 2


# ─── Per-line Result ────────────────────────────────────────────────


class CalibrationValue(BaseModel):
    """The value recovered from a single document line."""

    model_config = ConfigDict(frozen=True)

    line_number: int = Field(ge=1)  # 1-based
    line: str
    digits: str  # All qualifying digits, in order
    value: int = Field(ge=0, le=99)


# ─── Run Results ────────────────────────────────────────────────────


class PartResult(BaseModel):
    """Sum over the whole document for one part, with its timing."""

    model_config = ConfigDict(frozen=True)

    part: Part
    total: int
    line_count: int
    elapsed_seconds: float = Field(ge=0.0)

    @property
    def elapsed_display(self) -> str:
        """Human-readable duration, e.g. '312.5us' or '4.210ms'."""
        if self.elapsed_seconds < 1e-3:
            return f"{self.elapsed_seconds * 1e6:.1f}us"
        if self.elapsed_seconds < 1.0:
            return f"{self.elapsed_seconds * 1e3:.3f}ms"
        return f"{self.elapsed_seconds:.3f}s"


class CalibrationReport(BaseModel):
    """The final output of a calibration run."""

    model_config = ConfigDict(frozen=True)

    part1: PartResult
    part2: PartResult
    line_count: int
    source_hash: str = ""  # SHA-256 of the document text for audit trail
