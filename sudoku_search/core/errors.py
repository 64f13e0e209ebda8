"""Exceptions raised by the Sudoku core."""

from __future__ import annotations
from typing import List, Optional, Tuple

Coord = Tuple[int, int]


class SudokuError(ValueError):
    """Base class for all Sudoku errors."""


class RangeError(SudokuError):
    """A value, row or column is outside the board's bounds."""


class ParseError(SudokuError):
    """Puzzle text is not a 9x9 grid."""


class ConflictError(SudokuError):
    """The fixed cells of a grid already violate row/column/box uniqueness."""

    def __init__(self, message: str, conflicts: Optional[List[Tuple[Coord, Coord]]] = None):
        super().__init__(message)
        self.conflicts = conflicts or []


class NoSolutionError(SudokuError):
    """Backtracking exhausted every branch without filling the grid."""
