"""Iterative backtracking search with forward checking."""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from ..core.candidates import CandidateSet, MAX_VALUE
from ..core.grid import SudokuGrid, Coord
from .constraints import ConstraintStore

log = logging.getLogger(__name__)


class SolveOutcome(Enum):
    """How a search run ended."""
    SOLVED = "solved"
    NO_SOLUTION = "no_solution"
    LIMIT_REACHED = "limit_reached"


@dataclass
class Decision:
    """
    One tentative assignment on the history stack.

    ``candidates`` is the cell's set just before the assignment and
    ``affected`` the peers that lost ``value`` because of it. Both are owned
    by the decision, not shared with the live store.
    """
    coord: Coord
    candidates: CandidateSet
    value: int
    affected: List[Coord] = field(default_factory=list)


class SearchEngine:
    """
    Depth-first search over a grid using an explicit undo history.

    Each iteration either assigns the next value to a cell (narrowing its
    peers' candidates) or pops the last decision and resumes that cell at
    the next higher value. The store emptying means the grid is solved; the
    history running out means no assignment exists.
    """

    def __init__(self, grid: SudokuGrid, max_iterations: Optional[int] = None):
        """
        Args:
            grid: Grid to solve in place. Owned by the engine during ``run``.
            max_iterations: Stop with LIMIT_REACHED after this many iterations.
        """
        self.grid = grid
        self.max_iterations = max_iterations
        self.store: Optional[ConstraintStore] = None
        self.history: List[Decision] = []
        self.iterations = 0
        self.backtracks = 0
        self.nodes_explored = 0

    def run(self) -> SolveOutcome:
        """Search until solved, exhausted or out of iterations."""
        self.store = ConstraintStore.derive(self.grid)
        self.history = []
        self.iterations = 0
        self.backtracks = 0
        self.nodes_explored = 0
        open_cells = list(self.store)

        # Duplicate givens can never be completed; the search would only
        # find that out after exhausting every branch.
        if self.grid.has_conflicts():
            log.debug("Given cells conflict; nothing to search")
            return SolveOutcome.NO_SOLUTION

        log.debug("Searching with %d open cells", len(open_cells))
        outcome = self._search()

        if outcome is not SolveOutcome.SOLVED:
            for row, col in open_cells:
                self.grid.clear(row, col)

        log.debug(
            "Search finished: %s after %d iterations, %d backtracks",
            outcome.value, self.iterations, self.backtracks,
        )
        return outcome

    def _search(self) -> SolveOutcome:
        store = self.store
        resume: Optional[Decision] = None

        while True:
            if store.is_empty():
                return SolveOutcome.SOLVED
            if self.max_iterations is not None and self.iterations >= self.max_iterations:
                return SolveOutcome.LIMIT_REACHED
            self.iterations += 1

            if resume is not None:
                coord, candidates = resume.coord, resume.candidates
                start = resume.value + 1
            else:
                coord, candidates = store.select_min()
                start = 1

            value = next(
                (v for v in range(start, MAX_VALUE + 1) if candidates.contains(v)), None
            )

            if value is not None:
                self._assign(coord, value)
                resume = None
                continue

            resume = self._backtrack()
            if resume is None:
                return SolveOutcome.NO_SOLUTION

    def _assign(self, coord: Coord, value: int) -> None:
        row, col = coord
        self.grid.set(row, col, value)
        candidates = self.store.take(coord)
        affected = self.store.narrow_peers(coord, value)
        self.history.append(Decision(coord, candidates, value, affected))
        self.nodes_explored += 1

    def _backtrack(self) -> Optional[Decision]:
        """Undo the latest decision. Returns None when there is nothing to undo."""
        if not self.history:
            return None
        decision = self.history.pop()
        self.backtracks += 1

        # The cell is open again; clearing keeps the grid and store in step.
        self.grid.clear(*decision.coord)
        self.store.restore(decision.coord, decision.candidates)
        self.store.widen(decision.affected, decision.value)
        return decision


def solve(grid: SudokuGrid, max_iterations: Optional[int] = None) -> SolveOutcome:
    """Solve ``grid`` in place."""
    return SearchEngine(grid, max_iterations=max_iterations).run()
