"""Tests for the command-line interface."""

import pytest

from sudoku_search.cli import main


class TestBatchCommand:
    """Tests for `sudoku-search batch`."""

    def test_batch(self, tmp_path, easy_puzzle, hard_puzzle, capsys):
        path = tmp_path / "puzzles.txt"
        path.write_text(easy_puzzle + "-\n" + hard_puzzle)

        main(["batch", str(path)])

        out = capsys.readouterr().out
        assert f"Solved 2 sudoku puzzles from {path}" in out
        assert "It took an average of" in out
        assert out.count("Puzzle                          Solution") == 2

    def test_batch_quiet_with_json(self, tmp_path, easy_puzzle, capsys):
        path = tmp_path / "puzzles.txt"
        path.write_text(easy_puzzle)
        json_path = tmp_path / "results.json"

        main(["batch", str(path), "--quiet", "--json", str(json_path)])

        out = capsys.readouterr().out
        assert "Solved 1 sudoku puzzles" in out
        assert "Puzzle                          Solution" not in out
        assert json_path.exists()

    def test_batch_with_charts(self, tmp_path, easy_puzzle, hard_puzzle, capsys):
        path = tmp_path / "puzzles.txt"
        path.write_text(easy_puzzle + "-\n" + hard_puzzle)
        chart_dir = tmp_path / "charts"

        main(["batch", str(path), "--quiet", "--chart", str(chart_dir)])

        out = capsys.readouterr().out
        assert "  - time_distribution.png" in out
        assert "  - time_per_puzzle.png" in out
        assert (chart_dir / "time_distribution.png").exists()

    def test_batch_conflict_exits(self, tmp_path, easy_puzzle, capsys):
        path = tmp_path / "puzzles.txt"
        path.write_text("55" + easy_puzzle[2:])

        with pytest.raises(SystemExit) as excinfo:
            main(["batch", str(path)])
        assert excinfo.value.code == 1
        assert "Application error" in capsys.readouterr().err

    def test_missing_file_exits(self, tmp_path):
        with pytest.raises(SystemExit) as excinfo:
            main(["batch", str(tmp_path / "nope.txt")])
        assert excinfo.value.code == 1


class TestSolveCommand:
    """Tests for `sudoku-search solve`."""

    def test_solve(self, easy_puzzle, capsys):
        main(["solve", "--puzzle", easy_puzzle.replace("\n", "")])
        out = capsys.readouterr().out
        assert "Solved in" in out
        assert " 4  3  5 | 2  6  9 | 7  8  1 " in out

    def test_bad_puzzle(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(["solve", "--puzzle", "123"])
        assert excinfo.value.code == 1
        assert "Error parsing puzzle" in capsys.readouterr().err

    def test_unsolvable(self, unsatisfiable_puzzle, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(["solve", "--puzzle", unsatisfiable_puzzle.replace("\n", "")])
        assert excinfo.value.code == 1
        assert "Failed to solve (no_solution)" in capsys.readouterr().out

    def test_no_command(self):
        with pytest.raises(SystemExit):
            main([])


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
