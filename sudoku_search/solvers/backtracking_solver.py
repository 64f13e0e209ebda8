"""Solver wrapper around the iterative search engine."""

from __future__ import annotations
from typing import Optional

from .base_solver import BaseSolver
from .engine import SearchEngine, SolveOutcome
from ..core.grid import SudokuGrid


class BacktrackingSolver(BaseSolver):
    """
    Backtracking search with forward checking and the MRV heuristic.

    Copies the engine's counters into ``SolverStats``.
    """

    name = "Backtracking+FC"

    def __init__(self, max_iterations: Optional[int] = None, track_memory: bool = False):
        super().__init__(track_memory=track_memory)
        self.max_iterations = max_iterations

    def _solve(self, grid: SudokuGrid) -> SolveOutcome:
        engine = SearchEngine(grid, max_iterations=self.max_iterations)
        outcome = engine.run()

        self.stats.iterations = engine.iterations
        self.stats.backtracks = engine.backtracks
        self.stats.nodes_explored = engine.nodes_explored
        return outcome
