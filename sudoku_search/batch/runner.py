"""Solving a batch of puzzles and summarising the timings."""

from __future__ import annotations
import json
import logging
import os
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import numpy as np
from tqdm import tqdm

from ..core.errors import NoSolutionError, SudokuError
from ..core.grid import SudokuGrid
from ..solvers import BacktrackingSolver, SolveOutcome

log = logging.getLogger(__name__)

# Rendered grids are 29 characters wide, followed by a 3-space gap.
SIDE_BY_SIDE_HEADER = "Puzzle".ljust(32) + "Solution"


def side_by_side(puzzle_text: str, solution_text: str) -> str:
    """Place two rendered grids next to each other under a header."""
    lines = [SIDE_BY_SIDE_HEADER]
    for p, s in zip(puzzle_text.splitlines(), solution_text.splitlines()):
        lines.append(f"{p}   {s}")
    return "\n".join(lines) + "\n"


@dataclass
class PuzzleResult:
    """Result of solving one puzzle from a batch."""
    puzzle_id: int
    puzzle: str
    solution: str
    time_seconds: float
    iterations: int
    backtracks: int
    nodes_explored: int

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "puzzle_id": self.puzzle_id,
            "puzzle": self.puzzle,
            "solution": self.solution,
            "time_seconds": self.time_seconds,
            "iterations": self.iterations,
            "backtracks": self.backtracks,
            "nodes_explored": self.nodes_explored,
        }


class BatchRunner:
    """
    Solves puzzles one after another and collects timings.

    Any puzzle that fails to parse, has no solution or comes back
    incorrect stops the batch with a SudokuError.
    """

    def __init__(
        self,
        solver: Optional[BacktrackingSolver] = None,
        show_progress: bool = True,
        echo: bool = False
    ):
        """
        Args:
            solver: Solver to use (default: BacktrackingSolver()).
            show_progress: Show a tqdm progress bar.
            echo: Print each puzzle beside its solution as it is solved.
        """
        self.solver = solver or BacktrackingSolver()
        self.show_progress = show_progress
        self.echo = echo
        self.results: List[PuzzleResult] = []

    def run(self, puzzles: List[str]) -> List[PuzzleResult]:
        """Solve each puzzle text in order."""
        self.results = []
        pbar = tqdm(total=len(puzzles), desc="Solving", disable=not self.show_progress)
        try:
            for puzzle_id, text in enumerate(puzzles):
                result = self.solve_one(puzzle_id, text)
                self.results.append(result)
                if self.echo:
                    tqdm.write(side_by_side(result.puzzle, result.solution))
                    tqdm.write(f"Solved in {result.time_seconds:.6f}s\n")
                pbar.update(1)
        finally:
            pbar.close()
        return self.results

    def solve_one(self, puzzle_id: int, text: str) -> PuzzleResult:
        """Parse, solve and verify a single puzzle."""
        grid = SudokuGrid.parse(text)
        solution, stats = self.solver.solve(grid)

        if stats.outcome is SolveOutcome.SOLVED and not stats.solved:
            raise SudokuError("Solution is incorrect! Oh no!")
        if solution is None:
            raise NoSolutionError(f"Puzzle {puzzle_id} could not be solved: {stats.reason}")

        log.debug("Puzzle %d solved in %.6fs", puzzle_id, stats.time_seconds)
        return PuzzleResult(
            puzzle_id=puzzle_id,
            puzzle=grid.render(),
            solution=solution.render(),
            time_seconds=stats.time_seconds,
            iterations=stats.iterations,
            backtracks=stats.backtracks,
            nodes_explored=stats.nodes_explored,
        )

    def summary(self) -> Dict[str, Any]:
        """Aggregate timing and search statistics over the batch."""
        if not self.results:
            return {"count": 0, "total_time_seconds": 0.0}

        times = np.array([r.time_seconds for r in self.results])
        backtracks = np.array([r.backtracks for r in self.results])

        return {
            "count": len(self.results),
            "total_time_seconds": float(times.sum()),
            "avg_time_seconds": float(times.mean()),
            "median_time_seconds": float(np.median(times)),
            "min_time_seconds": float(times.min()),
            "max_time_seconds": float(times.max()),
            "p95_time_seconds": float(np.percentile(times, 95)),
            "avg_backtracks": float(backtracks.mean()),
            "max_backtracks": int(backtracks.max()),
        }

    def save_results(self, path: str) -> None:
        """Write per-puzzle results and the summary as JSON."""
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(path, "w") as f:
            json.dump(
                {
                    "summary": self.summary(),
                    "results": [r.to_dict() for r in self.results],
                },
                f,
                indent=2,
            )
        log.info("Results saved to %s", path)
