"""Unit tests for the search engine and solver wrapper."""

import pytest

from sudoku_search.core.errors import NoSolutionError
from sudoku_search.core.grid import SudokuGrid
from sudoku_search.solvers import (
    BacktrackingSolver,
    BaseSolver,
    SearchEngine,
    SolveOutcome,
    solve,
)


class TestSearchEngine:
    """Tests for the backtracking engine."""

    def test_solve_easy(self, easy_puzzle, easy_solution):
        grid = SudokuGrid.parse(easy_puzzle)
        outcome = grid.solve()

        assert outcome is SolveOutcome.SOLVED
        assert grid.is_correct()
        assert grid == SudokuGrid.parse(easy_solution)

    def test_solve_hard(self, hard_puzzle, hard_solution):
        grid = SudokuGrid.parse(hard_puzzle)
        engine = SearchEngine(grid)

        assert engine.run() is SolveOutcome.SOLVED
        assert grid.is_correct()
        assert grid == SudokuGrid.parse(hard_solution)
        assert engine.backtracks > 0
        assert engine.store.is_empty()

    def test_solve_empty_grid(self):
        grid = SudokuGrid()
        assert solve(grid) is SolveOutcome.SOLVED
        assert grid.is_correct()

    def test_keeps_given_cells(self, hard_puzzle):
        puzzle = SudokuGrid.parse(hard_puzzle)
        grid = puzzle.copy()
        grid.solve()
        for row, col in [(0, 3), (4, 1), (8, 6)]:
            assert grid.get(row, col) == puzzle.get(row, col)

    def test_solve_twice_is_noop(self, easy_puzzle):
        grid = SudokuGrid.parse(easy_puzzle)
        grid.solve()
        solved = grid.copy()

        engine = SearchEngine(grid)
        assert engine.run() is SolveOutcome.SOLVED
        assert engine.iterations == 0
        assert grid == solved

    def test_deterministic(self, hard_puzzle):
        counts = []
        for _ in range(2):
            engine = SearchEngine(SudokuGrid.parse(hard_puzzle))
            engine.run()
            counts.append((engine.iterations, engine.backtracks))
        assert counts[0] == counts[1]

    def test_no_solution(self, unsatisfiable_puzzle):
        puzzle = SudokuGrid.parse(unsatisfiable_puzzle)
        grid = puzzle.copy()
        engine = SearchEngine(grid)

        assert engine.run() is SolveOutcome.NO_SOLUTION
        assert engine.history == []
        assert engine.backtracks == 1
        # The grid is handed back unchanged
        assert grid == puzzle

    def test_no_solution_strict(self, unsatisfiable_puzzle):
        grid = SudokuGrid.parse(unsatisfiable_puzzle)
        with pytest.raises(NoSolutionError):
            grid.solve(strict=True)

    def test_cell_without_candidates_fails_immediately(self):
        grid = SudokuGrid()
        for col, value in enumerate(range(1, 9)):
            grid.set(0, col, value)
        grid.set(1, 8, 9)
        assert not grid.has_conflicts()

        engine = SearchEngine(grid)
        assert engine.run() is SolveOutcome.NO_SOLUTION
        assert engine.iterations == 1
        assert engine.backtracks == 0

    def test_iteration_limit(self, hard_puzzle):
        puzzle = SudokuGrid.parse(hard_puzzle)
        grid = puzzle.copy()

        assert grid.solve(max_iterations=5) is SolveOutcome.LIMIT_REACHED
        assert grid == puzzle

    def test_conflicting_givens_fail_without_searching(self):
        grid = SudokuGrid()
        grid.set(0, 0, 5)
        grid.set(0, 1, 5)
        before = grid.copy()

        engine = SearchEngine(grid)
        assert engine.run() is SolveOutcome.NO_SOLUTION
        assert engine.iterations == 0
        assert engine.history == []
        assert grid == before

    def test_conflicting_givens_strict(self):
        grid = SudokuGrid()
        grid.set(3, 3, 7)
        grid.set(5, 5, 7)
        with pytest.raises(NoSolutionError):
            grid.solve(strict=True)


class TestBacktrackingSolver:
    """Tests for the timed solver wrapper."""

    def test_solve_puzzle(self, easy_puzzle, easy_solution):
        grid = SudokuGrid.parse(easy_puzzle)
        solver = BacktrackingSolver()

        solution, stats = solver.solve(grid)

        assert stats.solved
        assert solution is not None
        assert solution == SudokuGrid.parse(easy_solution)
        assert stats.outcome is SolveOutcome.SOLVED
        # Input grid is left untouched
        assert grid == SudokuGrid.parse(easy_puzzle)

    def test_stats_collected(self, hard_puzzle):
        solver = BacktrackingSolver(track_memory=True)
        solution, stats = solver.solve(SudokuGrid.parse(hard_puzzle))

        assert stats.time_seconds > 0
        assert stats.iterations > 0
        assert stats.nodes_explored >= stats.iterations - stats.backtracks
        assert stats.memory_bytes > 0
        assert stats.to_dict()["algorithm"] == BacktrackingSolver.name

    def test_unsolvable(self, unsatisfiable_puzzle):
        solver = BacktrackingSolver()
        solution, stats = solver.solve(SudokuGrid.parse(unsatisfiable_puzzle))

        assert solution is None
        assert not stats.solved
        assert stats.outcome is SolveOutcome.NO_SOLUTION

    def test_limit(self, hard_puzzle):
        solver = BacktrackingSolver(max_iterations=3)
        solution, stats = solver.solve(SudokuGrid.parse(hard_puzzle))

        assert solution is None
        assert stats.outcome is SolveOutcome.LIMIT_REACHED
        assert stats.iterations == 3

    def test_conflicting_grid_reports_no_solution(self):
        grid = SudokuGrid()
        grid.set(0, 0, 5)
        grid.set(0, 1, 5)
        solution, stats = BacktrackingSolver().solve(grid)

        assert solution is None
        assert stats.outcome is SolveOutcome.NO_SOLUTION
        assert stats.reason == "no_solution"
        assert stats.iterations == 0


class FailingSolver(BaseSolver):
    name = "Failing"

    def _solve(self, grid):
        grid.set(0, 0, 10)


class WrongSolver(BaseSolver):
    name = "Wrong"

    def _solve(self, grid):
        for row, col in grid.empty_cells():
            grid.set(row, col, 1)
        return SolveOutcome.SOLVED


class TestBaseSolver:
    """Tests for the shared solve bookkeeping."""

    def test_error_is_recorded(self, easy_puzzle):
        solution, stats = FailingSolver().solve(SudokuGrid.parse(easy_puzzle))

        assert solution is None
        assert stats.outcome is None
        assert not stats.solved
        assert "out of bounds" in stats.error
        assert stats.reason == stats.error
        assert stats.time_seconds >= 0

    def test_incorrect_result_is_not_returned(self, easy_puzzle):
        solution, stats = WrongSolver().solve(SudokuGrid.parse(easy_puzzle))

        assert solution is None
        assert stats.outcome is SolveOutcome.SOLVED
        assert not stats.solved
        assert stats.error == "Solution is incorrect"

    def test_to_dict(self, easy_puzzle):
        _, stats = BacktrackingSolver().solve(SudokuGrid.parse(easy_puzzle))
        data = stats.to_dict()

        assert data["outcome"] == "solved"
        assert data["solved"] is True
        assert data["error"] is None

    def test_stats_reset_between_runs(self, easy_puzzle, unsatisfiable_puzzle):
        solver = BacktrackingSolver()
        solver.solve(SudokuGrid.parse(easy_puzzle))
        _, stats = solver.solve(SudokuGrid.parse(unsatisfiable_puzzle))

        assert stats.outcome is SolveOutcome.NO_SOLUTION
        assert not stats.solved


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
