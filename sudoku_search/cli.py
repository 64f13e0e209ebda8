"""Command-line interface for the Sudoku solver."""

import argparse
import logging
import os
import sys

from .batch import BatchRunner, read_puzzles, side_by_side
from .core.errors import SudokuError
from .core.grid import SudokuGrid
from .solvers import BacktrackingSolver


def main(argv=None):
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Sudoku solver using backtracking search with forward checking",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Solve every puzzle in a file (puzzles separated by '-' lines)
  sudoku-search batch puzzles.txt

  # Solve a single puzzle given as 81 characters
  sudoku-search solve --puzzle "...26.7.168..7..9.19...45..82.1...4...46.29...5...3.28..93...74.4..5..367.3.18..."
        """
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Batch command
    batch_parser = subparsers.add_parser("batch", help="Solve every puzzle in a file")
    batch_parser.add_argument("filename", help="File of 9-line puzzles separated by '-' lines")
    batch_parser.add_argument(
        "--quiet", "-q", action="store_true",
        help="Only print the summary"
    )
    batch_parser.add_argument(
        "--json", "-j", type=str, default=None,
        help="Write per-puzzle results and summary to this JSON file"
    )
    batch_parser.add_argument(
        "--chart", "-c", type=str, default=None,
        help="Write solve-time charts into this directory"
    )

    # Solve command
    solve_parser = subparsers.add_parser("solve", help="Solve a single puzzle")
    solve_parser.add_argument(
        "--puzzle", "-p", type=str, required=True,
        help="Puzzle string (81 chars, '.' or 0 for empty cells)"
    )
    solve_parser.add_argument(
        "--max-iterations", type=int, default=None,
        help="Give up after this many search iterations"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    if args.command == "batch":
        cmd_batch(args)
    elif args.command == "solve":
        cmd_solve(args)


def cmd_batch(args):
    """Handle the batch command."""
    try:
        puzzles = read_puzzles(args.filename)
    except OSError as e:
        print(f"Error reading {args.filename}: {e}", file=sys.stderr)
        sys.exit(1)

    if not puzzles:
        print(f"No puzzles found in {args.filename}", file=sys.stderr)
        sys.exit(1)

    runner = BatchRunner(show_progress=args.quiet, echo=not args.quiet)
    try:
        runner.run(puzzles)
    except SudokuError as e:
        print(f"Application error: {e}", file=sys.stderr)
        sys.exit(1)

    summary = runner.summary()
    print(f"Solved {summary['count']} sudoku puzzles from {args.filename} "
          f"in {summary['total_time_seconds']:.6f}s.")
    print(f"It took an average of {summary['avg_time_seconds']:.6f}s to solve each sudoku puzzle.")
    print(f"  Median: {summary['median_time_seconds']:.6f}s  "
          f"Max: {summary['max_time_seconds']:.6f}s  "
          f"Avg backtracks: {summary['avg_backtracks']:.1f}")

    if args.json:
        runner.save_results(args.json)
        print(f"Results saved to {args.json}")

    if args.chart:
        # Charts pull in matplotlib; only import when asked for.
        from .batch.visualizer import Visualizer

        charts = Visualizer(runner.results, args.chart).generate_all()
        print(f"Charts saved to {args.chart}/")
        for chart in charts:
            print(f"  - {os.path.basename(chart)}")


def cmd_solve(args):
    """Handle the solve command."""
    try:
        grid = SudokuGrid.from_string(args.puzzle)
    except SudokuError as e:
        print(f"Error parsing puzzle: {e}", file=sys.stderr)
        sys.exit(1)

    solver = BacktrackingSolver(max_iterations=args.max_iterations)
    solution, stats = solver.solve(grid)

    if not stats.solved:
        print(f"✗ Failed to solve ({stats.reason})")
        print(f"  Iterations: {stats.iterations:,}")
        sys.exit(1)

    print(side_by_side(grid.render(), solution.render()))
    print(f"✓ Solved in {stats.time_seconds:.6f}s")
    print(f"  Iterations: {stats.iterations:,}")
    print(f"  Backtracks: {stats.backtracks:,}")


if __name__ == "__main__":
    main()
