# tests/conftest.py
import sys
from pathlib import Path

import pytest

# Add project root to sys.path so "apps", "solver" and "types_sudoku" can be imported in tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


# Classic puzzle with a unique solution
CLASSIC_PUZZLE = [
    [5, 3, 0, 0, 7, 0, 0, 0, 0],
    [6, 0, 0, 1, 9, 5, 0, 0, 0],
    [0, 9, 8, 0, 0, 0, 0, 6, 0],
    [8, 0, 0, 0, 6, 0, 0, 0, 3],
    [4, 0, 0, 8, 0, 3, 0, 0, 1],
    [7, 0, 0, 0, 2, 0, 0, 0, 6],
    [0, 6, 0, 0, 0, 0, 2, 8, 0],
    [0, 0, 0, 4, 1, 9, 0, 0, 5],
    [0, 0, 0, 0, 8, 0, 0, 7, 9],
]

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

# 25 at (4, 3)
OUT_OF_RANGE_PUZZLE = [
    [0, 0, 9, 0, 0, 3, 0, 0, 0],
    [0, 0, 0, 6, 2, 0, 9, 0, 4],
    [8, 2, 7, 0, 0, 0, 6, 0, 3],
    [2, 1, 0, 3, 6, 0, 0, 4, 5],
    [0, 9, 6, 25, 7, 0, 0, 0, 0],
    [7, 0, 0, 0, 4, 0, 1, 9, 0],
    [0, 6, 2, 4, 5, 0, 3, 0, 0],
    [1, 0, 0, 7, 0, 6, 4, 0, 0],
    [3, 0, 0, 9, 8, 2, 0, 6, 0],
]

# Two 5s in the middle-right box: (3, 8) and (4, 6)
ILLEGAL_PUZZLE = [
    [0, 0, 9, 0, 0, 3, 0, 0, 0],
    [0, 0, 0, 6, 2, 0, 9, 0, 4],
    [8, 2, 7, 0, 0, 0, 6, 0, 3],
    [2, 1, 0, 3, 6, 0, 0, 4, 5],
    [0, 9, 6, 0, 7, 0, 5, 0, 0],
    [7, 0, 0, 0, 4, 0, 1, 9, 0],
    [0, 6, 2, 4, 5, 0, 3, 0, 0],
    [1, 0, 0, 7, 0, 6, 4, 0, 0],
    [3, 0, 0, 9, 8, 2, 0, 6, 0],
]

HARD_PUZZLE = [
    [3, 0, 5, 0, 7, 1, 0, 0, 9],
    [0, 0, 0, 3, 4, 0, 0, 0, 0],
    [0, 9, 0, 2, 0, 0, 0, 0, 0],
    [0, 3, 0, 0, 0, 4, 0, 0, 0],
    [0, 6, 0, 0, 0, 0, 0, 0, 7],
    [0, 0, 0, 0, 0, 2, 8, 5, 0],
    [0, 0, 0, 0, 0, 0, 0, 8, 0],
    [0, 5, 4, 0, 0, 0, 9, 0, 1],
    [0, 0, 7, 0, 0, 0, 4, 0, 0],
]


def _copy(grid):
    return [row[:] for row in grid]


def _diagonal_blanked():
    # One blank per row, so every blank has exactly one candidate
    grid = _copy(CLASSIC_SOLUTION)
    for i in range(9):
        grid[i][i] = 0
    return grid


def _three_cells_two_values():
    # (0,0), (0,1), (0,2) can only take 1 or 2: no single, no empty list, no solution
    grid = [[0] * 9 for _ in range(9)]
    grid[0] = [0, 0, 0, 3, 4, 5, 6, 7, 8]
    grid[1][0] = 9
    return grid


def _no_candidate_cell():
    # (0,0) sees 1..8 in its row and 9 in its column
    grid = [[0] * 9 for _ in range(9)]
    grid[0] = [0, 1, 2, 3, 4, 5, 6, 7, 8]
    grid[3][0] = 9
    return grid


@pytest.fixture
def classic_puzzle():
    return _copy(CLASSIC_PUZZLE)


@pytest.fixture
def classic_solution():
    return _copy(CLASSIC_SOLUTION)


@pytest.fixture
def out_of_range_puzzle():
    return _copy(OUT_OF_RANGE_PUZZLE)


@pytest.fixture
def illegal_puzzle():
    return _copy(ILLEGAL_PUZZLE)


@pytest.fixture
def hard_puzzle():
    return _copy(HARD_PUZZLE)


@pytest.fixture
def deduction_puzzle():
    return _diagonal_blanked()


@pytest.fixture
def unsolvable_puzzle():
    return _three_cells_two_values()


@pytest.fixture
def no_candidate_puzzle():
    return _no_candidate_cell()
