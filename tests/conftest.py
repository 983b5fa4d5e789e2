# tests/conftest.py
import sys
from pathlib import Path

import pytest

# Add project root to sys.path so "apps", "solver" and "types_sudoku" can be imported in tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from solver.puzzle_io import parse_puzzle  # noqa: E402

# The widely published "easy" puzzle and its unique solution.
CLASSIC_PUZZLE = """
53__7____
6__195___
_98____6_
8___6___3
4__8_3__1
7___2___6
_6____28_
___419__5
____8__79
"""

CLASSIC_SOLUTION = [
    [5, 3, 4, 6, 7, 8, 9, 1, 2],
    [6, 7, 2, 1, 9, 5, 3, 4, 8],
    [1, 9, 8, 3, 4, 2, 5, 6, 7],
    [8, 5, 9, 7, 6, 1, 4, 2, 3],
    [4, 2, 6, 8, 5, 3, 7, 9, 1],
    [7, 1, 3, 9, 2, 4, 8, 5, 6],
    [9, 6, 1, 5, 3, 7, 2, 8, 4],
    [2, 8, 7, 4, 1, 9, 6, 3, 5],
    [3, 4, 5, 2, 8, 6, 1, 7, 9],
]


@pytest.fixture
def classic_text():
    return CLASSIC_PUZZLE


@pytest.fixture
def classic_solution():
    return [row[:] for row in CLASSIC_SOLUTION]


@pytest.fixture
def classic_board():
    return parse_puzzle(CLASSIC_PUZZLE)


def assert_valid_full_grid(grid):
    """Every row, column and box holds 1..9 exactly once."""
    digits = set(range(1, 10))
    for r in range(9):
        assert set(grid[r]) == digits
    for c in range(9):
        assert {grid[r][c] for r in range(9)} == digits
    for br in range(3):
        for bc in range(3):
            box = {grid[3 * br + i][3 * bc + j] for i in range(3) for j in range(3)}
            assert box == digits
