"""
Loading the calibration document.

The whole file is read into memory once; there is no streaming.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .exceptions import MissingInputFile

logger = logging.getLogger(__name__)

DEFAULT_INPUT = Path(__file__).parent / "data" / "calibration.txt"


def load_document(path: str | Path | None = None) -> str:
    """Read a calibration document and trim surrounding whitespace.

    Args:
        path: Path to the document. Defaults to the bundled input.

    Raises:
        MissingInputFile: If the file cannot be opened or is not UTF-8 text.
    """
    resolved = DEFAULT_INPUT if path is None else Path(path)

    try:
        with resolved.open(encoding="utf-8") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise MissingInputFile(str(resolved), str(e)) from e

    logger.info("Loaded calibration document %s (%d bytes)", resolved, len(text))
    return text.strip()


def split_lines(text: str) -> list[str]:
    """Split a document on newlines, trimming trailing whitespace per line.

    An empty document still yields one (empty) line, which then fails
    extraction rather than silently summing to zero.
    """
    return [line.rstrip() for line in text.strip().split("\n")]
