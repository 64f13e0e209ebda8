"""Shared puzzles for the test suite."""

import pytest


EASY_PUZZLE = """\
...26.7.1
68..7..9.
19...45..
82.1...4.
..46.29..
.5...3.28
..93...74
.4..5..36
7.3.18...
"""

EASY_SOLUTION = """\
435269781
682571493
197834562
826195347
374682915
951743628
519326874
248957136
763418259"""

HARD_PUZZLE = """\
...6..4..
7....36..
....91.8.
.........
.5.18...3
...3.6.45
.4.2...6.
9.3......
.2....1..
"""

HARD_SOLUTION = """\
581672439
792843651
364591782
438957216
256184973
179326845
845219367
913768524
627435198"""

# Conflict-free, but (0, 7) and (0, 8) can both only take 8.
UNSATISFIABLE_PUZZLE = """\
1234567..
.........
.........
.......9.
.........
.........
........9
.........
.........
"""


@pytest.fixture
def easy_puzzle():
    return EASY_PUZZLE


@pytest.fixture
def easy_solution():
    return EASY_SOLUTION


@pytest.fixture
def hard_puzzle():
    return HARD_PUZZLE


@pytest.fixture
def hard_solution():
    return HARD_SOLUTION


@pytest.fixture
def unsatisfiable_puzzle():
    return UNSATISFIABLE_PUZZLE
