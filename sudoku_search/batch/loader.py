"""Reading batches of puzzles separated by '-' lines."""

from __future__ import annotations
import logging
from typing import List

log = logging.getLogger(__name__)

DELIMITER = "-"
PUZZLE_LINES = 9


def _trim_blank(lines: List[str]) -> List[str]:
    start, end = 0, len(lines)
    while start < end and not lines[start].strip():
        start += 1
    while end > start and not lines[end - 1].strip():
        end -= 1
    return lines[start:end]


def split_puzzles(text: str) -> List[str]:
    """
    Split batch text into puzzle blocks.

    Blocks are separated by lines consisting of a single '-'. A block is
    kept only if it has exactly 9 lines once surrounding blank lines are
    dropped; anything else is skipped.
    """
    puzzles = []
    chunk: List[str] = []

    def flush():
        lines = _trim_blank(chunk)
        if len(lines) == PUZZLE_LINES:
            puzzles.append("\n".join(lines))
        elif lines:
            log.debug("Skipping block of %d lines", len(lines))

    for line in text.splitlines():
        if line.rstrip() == DELIMITER:
            flush()
            chunk = []
        else:
            chunk.append(line)
    flush()

    return puzzles


def read_puzzles(path: str) -> List[str]:
    """Read a batch file and return its puzzle blocks."""
    with open(path, "r") as f:
        contents = f.read()
    puzzles = split_puzzles(contents)
    log.info("Loaded %d puzzles from %s", len(puzzles), path)
    return puzzles
