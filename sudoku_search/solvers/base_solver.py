"""Base solver interface: works on a copy, times the run, reports the outcome."""

from __future__ import annotations
from abc import ABC, abstractmethod
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Dict, Iterator, Optional, Tuple
import logging
import time
import tracemalloc

from ..core.errors import SudokuError
from ..core.grid import SudokuGrid
from .engine import SolveOutcome

log = logging.getLogger(__name__)


@dataclass
class SolverStats:
    """Statistics from a solver run."""
    algorithm: str = ""
    outcome: Optional[SolveOutcome] = None
    solved: bool = False
    error: Optional[str] = None

    time_seconds: float = 0.0
    memory_bytes: int = 0

    # Search counters
    iterations: int = 0
    backtracks: int = 0
    nodes_explored: int = 0

    @property
    def reason(self) -> str:
        """Short description of why the run ended."""
        if self.error:
            return self.error
        return self.outcome.value if self.outcome is not None else "not run"

    def to_dict(self) -> Dict[str, Any]:
        """Convert stats to a JSON-friendly dictionary."""
        return {
            "algorithm": self.algorithm,
            "outcome": self.outcome.value if self.outcome is not None else None,
            "solved": self.solved,
            "error": self.error,
            "time_seconds": self.time_seconds,
            "memory_bytes": self.memory_bytes,
            "iterations": self.iterations,
            "backtracks": self.backtracks,
            "nodes_explored": self.nodes_explored,
        }


class BaseSolver(ABC):
    """
    Abstract base class for Sudoku solvers.

    Subclasses implement ``_solve``, which fills a private copy of the
    puzzle in place and returns a SolveOutcome. ``solve`` handles the
    copy, the timing and the bookkeeping in ``self.stats``.
    """

    name: str = "BaseSolver"

    def __init__(self, track_memory: bool = False):
        self.track_memory = track_memory
        self.stats = SolverStats(algorithm=self.name)

    def solve(self, grid: SudokuGrid) -> Tuple[Optional[SudokuGrid], SolverStats]:
        """
        Solve a copy of the puzzle.

        Args:
            grid: The puzzle to solve. Left untouched.

        Returns:
            Tuple of (solved grid or None, stats). The grid is only returned
            when the outcome is SOLVED and the result checks out as correct.
        """
        self.reset_stats()
        work = grid.copy()

        with self._measure():
            try:
                self.stats.outcome = self._solve(work)
            except SudokuError as e:
                log.warning("%s failed: %s", self.name, e)
                self.stats.error = str(e)

        if self.stats.outcome is SolveOutcome.SOLVED:
            self.stats.solved = work.is_correct()
            if not self.stats.solved:
                self.stats.error = "Solution is incorrect"

        return (work if self.stats.solved else None), self.stats

    @contextmanager
    def _measure(self) -> Iterator[None]:
        if self.track_memory:
            tracemalloc.start()
        start_time = time.perf_counter()
        try:
            yield
        finally:
            self.stats.time_seconds = time.perf_counter() - start_time
            if self.track_memory:
                _, peak = tracemalloc.get_traced_memory()
                tracemalloc.stop()
                self.stats.memory_bytes = peak

    @abstractmethod
    def _solve(self, grid: SudokuGrid) -> SolveOutcome:
        """Fill ``grid`` in place and say how the search ended."""

    def reset_stats(self) -> None:
        """Reset solver statistics."""
        self.stats = SolverStats(algorithm=self.name)
