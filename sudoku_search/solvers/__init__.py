"""Solvers module for Sudoku puzzles."""

from .base_solver import BaseSolver, SolverStats
from .constraints import ConstraintStore
from .engine import SearchEngine, Decision, SolveOutcome, solve
from .backtracking_solver import BacktrackingSolver

__all__ = [
    "BaseSolver",
    "SolverStats",
    "ConstraintStore",
    "SearchEngine",
    "Decision",
    "SolveOutcome",
    "solve",
    "BacktrackingSolver",
]
