"""9x9 Sudoku grid with optional cells, text parsing and rendering."""

from __future__ import annotations
from typing import Dict, List, Optional, Tuple, TYPE_CHECKING

import numpy as np

from .candidates import CandidateSet, MIN_VALUE, MAX_VALUE
from .errors import Coord, RangeError, ParseError, ConflictError, NoSolutionError

if TYPE_CHECKING:
    from ..solvers.engine import SolveOutcome

SIZE = 9
BOX_SIZE = 3

# Row-major order; the engine's MRV tie-break relies on it.
ALL_CELLS: List[Coord] = [(r, c) for r in range(SIZE) for c in range(SIZE)]

ROW_SEPARATOR = "+".join(["-" * (3 * BOX_SIZE)] * BOX_SIZE)


def box_index(row: int, col: int) -> int:
    """Index (0-8) of the 3x3 box containing (row, col), row-major over boxes."""
    return (row // BOX_SIZE) * BOX_SIZE + (col // BOX_SIZE)


def _build_peers() -> Dict[Coord, Tuple[Coord, ...]]:
    peers = {}
    for row, col in ALL_CELLS:
        cells = []
        seen = {(row, col)}
        box_row = (row // BOX_SIZE) * BOX_SIZE
        box_col = (col // BOX_SIZE) * BOX_SIZE
        candidates = (
            [(row, j) for j in range(SIZE)]
            + [(i, col) for i in range(SIZE)]
            + [(box_row + i, box_col + j) for i in range(BOX_SIZE) for j in range(BOX_SIZE)]
        )
        for cell in candidates:
            if cell not in seen:
                seen.add(cell)
                cells.append(cell)
        peers[(row, col)] = tuple(cells)
    return peers


PEERS = _build_peers()


def peers_of(row: int, col: int) -> Tuple[Coord, ...]:
    """The 20 cells sharing a row, column or box with (row, col)."""
    return PEERS[(row, col)]


class UnitSets:
    """Values already placed in each row, column and box."""

    def __init__(self):
        self.rows = [CandidateSet() for _ in range(SIZE)]
        self.cols = [CandidateSet() for _ in range(SIZE)]
        self.boxes = [CandidateSet() for _ in range(SIZE)]

    def seen(self, row: int, col: int, value: int) -> bool:
        return (
            self.rows[row].contains(value)
            or self.cols[col].contains(value)
            or self.boxes[box_index(row, col)].contains(value)
        )

    def add(self, row: int, col: int, value: int) -> None:
        self.rows[row].insert(value)
        self.cols[col].insert(value)
        self.boxes[box_index(row, col)].insert(value)

    def used_by(self, row: int, col: int) -> CandidateSet:
        """Union of the values in the row, column and box of (row, col)."""
        used = self.rows[row].copy()
        used.union_with(self.cols[col])
        used.union_with(self.boxes[box_index(row, col)])
        return used


class SudokuGrid:
    """
    A 9x9 Sudoku board.

    Cells hold ``None`` when unassigned or a value in 1..9. Writes are
    bounds-checked but never conflict-checked; call ``has_conflicts`` for that.
    """

    def __init__(self):
        self.cells: List[List[Optional[int]]] = [[None] * SIZE for _ in range(SIZE)]

    def copy(self) -> SudokuGrid:
        """Create a deep copy of the grid."""
        new_grid = SudokuGrid()
        new_grid.cells = [row[:] for row in self.cells]
        return new_grid

    def _check_cell(self, row: int, col: int) -> None:
        if not (0 <= row < SIZE and 0 <= col < SIZE):
            raise RangeError(f"Cell ({row}, {col}) is out of bounds.")

    def get(self, row: int, col: int) -> Optional[int]:
        """Value at (row, col), or None if unassigned."""
        self._check_cell(row, col)
        return self.cells[row][col]

    def set(self, row: int, col: int, value: int) -> None:
        """Assign ``value`` at (row, col) without checking for conflicts."""
        if not MIN_VALUE <= value <= MAX_VALUE:
            raise RangeError(f"Value {value} is out of bounds. {MIN_VALUE} <= value <= {MAX_VALUE}")
        if not 0 <= row < SIZE:
            raise RangeError(f"Row {row} is out of bounds. Max row index is {SIZE - 1}.")
        if not 0 <= col < SIZE:
            raise RangeError(f"Col {col} is out of bounds. Max col index is {SIZE - 1}.")
        self.cells[row][col] = value

    def clear(self, row: int, col: int) -> None:
        """Unassign the cell at (row, col)."""
        self._check_cell(row, col)
        self.cells[row][col] = None

    def is_empty(self, row: int, col: int) -> bool:
        self._check_cell(row, col)
        return self.cells[row][col] is None

    def empty_cells(self) -> List[Coord]:
        """Unassigned cells in row-major order."""
        return [(r, c) for r, c in ALL_CELLS if self.cells[r][c] is None]

    def count_filled(self) -> int:
        return sum(1 for r, c in ALL_CELLS if self.cells[r][c] is not None)

    def unit_sets(self) -> UnitSets:
        """Collect the assigned values of every row, column and box."""
        units = UnitSets()
        for row, col in ALL_CELLS:
            value = self.cells[row][col]
            if value is not None:
                units.add(row, col, value)
        return units

    def has_conflicts(self) -> bool:
        """True if any row, column or box holds the same value twice."""
        units = UnitSets()
        for row, col in ALL_CELLS:
            value = self.cells[row][col]
            if value is None:
                continue
            if units.seen(row, col, value):
                return True
            units.add(row, col, value)
        return False

    def is_correct(self) -> bool:
        """True if every cell is assigned and there are no conflicts."""
        if any(value is None for row in self.cells for value in row):
            return False
        return not self.has_conflicts()

    def solve(self, max_iterations: Optional[int] = None, strict: bool = False) -> SolveOutcome:
        """
        Fill the grid in place by backtracking search.

        Args:
            max_iterations: Optional cap on search iterations.
            strict: Raise NoSolutionError instead of returning NO_SOLUTION.

        Returns:
            The SolveOutcome. Unless SOLVED, the grid is left as it was.
        """
        from ..solvers.engine import SearchEngine, SolveOutcome

        outcome = SearchEngine(self, max_iterations=max_iterations).run()
        if strict and outcome is SolveOutcome.NO_SOLUTION:
            raise NoSolutionError("There is no assignment satisfying the given cells.")
        return outcome

    @classmethod
    def parse(cls, text: str) -> SudokuGrid:
        """
        Build a grid from 9 lines of 9 characters.

        Digits 1-9 are assigned values; any other character is unassigned.
        Characters past the 9th column are ignored, as are blank lines
        before and after the grid.

        Raises:
            ParseError: Wrong number of lines or a line shorter than 9.
            ConflictError: The given values already violate uniqueness.
        """
        lines = [line.rstrip("\r") for line in text.split("\n")]
        while lines and not lines[0].strip():
            lines.pop(0)
        while lines and not lines[-1].strip():
            lines.pop()

        if len(lines) != SIZE:
            raise ParseError(f"Expected {SIZE} lines, got {len(lines)}")

        grid = cls()
        for row, line in enumerate(lines):
            if len(line) < SIZE:
                raise ParseError(f"Line {row + 1} has {len(line)} characters, expected {SIZE}: {line!r}")
            for col, ch in enumerate(line[:SIZE]):
                if ch in "123456789":
                    grid.set(row, col, int(ch))

        grid._check_conflicts()
        return grid

    @classmethod
    def from_string(cls, s: str) -> SudokuGrid:
        """
        Build a grid from an 81-character single-line string.

        Same character conventions as ``parse``.
        """
        s = s.strip()
        if len(s) != SIZE * SIZE:
            raise ParseError(f"String length must be {SIZE * SIZE}, got {len(s)}")
        return cls.parse("\n".join(s[i:i + SIZE] for i in range(0, SIZE * SIZE, SIZE)))

    @classmethod
    def from_array(cls, data) -> SudokuGrid:
        """Build a grid from a 9x9 array-like where 0 marks an empty cell."""
        arr = np.asarray(data, dtype=np.int32)
        if arr.shape != (SIZE, SIZE):
            raise ParseError(f"Grid shape must be ({SIZE}, {SIZE}), got {arr.shape}")
        grid = cls()
        for row, col in ALL_CELLS:
            value = int(arr[row, col])
            if value != 0:
                grid.set(row, col, value)
        grid._check_conflicts()
        return grid

    def to_array(self) -> np.ndarray:
        """9x9 int32 array with 0 for unassigned cells."""
        return np.array(
            [[value or 0 for value in row] for row in self.cells], dtype=np.int32
        )

    def to_string(self) -> str:
        """Compact 81-character form using '.' for empty cells."""
        return "".join(
            "." if value is None else str(value) for row in self.cells for value in row
        )

    def _check_conflicts(self) -> None:
        if self.has_conflicts():
            from .validator import find_conflicts

            conflicts = find_conflicts(self)
            raise ConflictError(
                f"Provided grid has conflicts: {conflicts[:3]}", conflicts
            )

    def render(self) -> str:
        """Fixed-width layout with '|' between boxes and a separator row every 3 rows."""
        lines = []
        for i, row in enumerate(self.cells):
            if i > 0 and i % BOX_SIZE == 0:
                lines.append(ROW_SEPARATOR)
            parts = []
            for j, value in enumerate(row):
                if j > 0 and j % BOX_SIZE == 0:
                    parts.append("|")
                parts.append(" . " if value is None else f" {value} ")
            lines.append("".join(parts))
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"SudokuGrid(filled={self.count_filled()})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SudokuGrid):
            return False
        return self.cells == other.cells

    # Grids are mutable; keep them out of sets and dict keys.
    __hash__ = None


def parse(text: str) -> SudokuGrid:
    """Parse puzzle text into a grid. See ``SudokuGrid.parse``."""
    return SudokuGrid.parse(text)
