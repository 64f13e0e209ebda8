"""Core module for Sudoku grid representation and validation."""

from .candidates import CandidateSet, VALUE_MASK
from .errors import SudokuError, RangeError, ParseError, ConflictError, NoSolutionError
from .grid import SudokuGrid, parse, peers_of
from .validator import is_valid_placement, find_conflicts, validate_solution

__all__ = [
    "CandidateSet",
    "VALUE_MASK",
    "SudokuError",
    "RangeError",
    "ParseError",
    "ConflictError",
    "NoSolutionError",
    "SudokuGrid",
    "parse",
    "peers_of",
    "is_valid_placement",
    "find_conflicts",
    "validate_solution",
]
