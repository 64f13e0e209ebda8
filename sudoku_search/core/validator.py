"""Validation utilities for Sudoku grids."""

from __future__ import annotations
from typing import List, Tuple, TYPE_CHECKING

from .grid import ALL_CELLS, peers_of

if TYPE_CHECKING:
    from .grid import SudokuGrid, Coord


def is_valid_placement(grid: SudokuGrid, row: int, col: int, value: int) -> bool:
    """
    Check if placing a value at (row, col) would clash with a peer.

    Args:
        grid: The Sudoku grid.
        row: Row index.
        col: Column index.
        value: Value to check (1 to 9).

    Returns:
        True if no peer already holds ``value``.
    """
    if value < 1 or value > 9:
        return False
    return all(grid.get(r, c) != value for r, c in peers_of(row, col))


def find_conflicts(grid: SudokuGrid) -> List[Tuple[Coord, Coord]]:
    """
    List every pair of peer cells holding the same value.

    Each pair is reported once, earlier cell (row-major) first.
    """
    conflicts = []
    for row, col in ALL_CELLS:
        value = grid.get(row, col)
        if value is None:
            continue
        for peer in peers_of(row, col):
            if peer > (row, col) and grid.get(*peer) == value:
                conflicts.append(((row, col), peer))
    return conflicts


def validate_solution(puzzle: SudokuGrid, solution: SudokuGrid) -> bool:
    """
    Validate that a solution correctly solves the puzzle.

    Args:
        puzzle: The original puzzle.
        solution: The proposed solution.

    Returns:
        True if solution is correct and keeps every puzzle clue.
    """
    for row, col in ALL_CELLS:
        clue = puzzle.get(row, col)
        if clue is not None and solution.get(row, col) != clue:
            return False
    return solution.is_correct()
