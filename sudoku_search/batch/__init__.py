"""Batch module for solving files of puzzles."""

from .loader import read_puzzles, split_puzzles
from .runner import BatchRunner, PuzzleResult, side_by_side

__all__ = ["read_puzzles", "split_puzzles", "BatchRunner", "PuzzleResult", "side_by_side"]
