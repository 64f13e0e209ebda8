"""Sudoku solving by backtracking search with forward checking."""

from .core import SudokuGrid, CandidateSet, parse
from .solvers import SearchEngine, SolveOutcome, BacktrackingSolver

__version__ = "1.0.0"

__all__ = [
    "SudokuGrid",
    "CandidateSet",
    "parse",
    "SearchEngine",
    "SolveOutcome",
    "BacktrackingSolver",
]
