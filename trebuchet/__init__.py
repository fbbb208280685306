"""
Trebuchet — calibration document checksums.

Architecture: Load document → Per-line extraction (digits / words) → Sum → Report
Part 1 reads numerals only. Part 2 also reads spelled-out digits, overlaps included.
"""

__version__ = "1.0.0"
