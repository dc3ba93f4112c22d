"""Core Sudoku utilities shared by the engine and the tool facade: constants, index math and plain-grid helpers."""

# solver_core.py
# Grid is 9x9 list of lists of ints (0..9). 0 = blank. Coordinates are 0-based.
from collections.abc import Iterable

from types_sudoku import Cell, Grid

GRID_SIZE = 9
BOX_SIZE = 3
MIN_VALUE = 1
MAX_VALUE = 9
BLANK = 0

DIGITS = frozenset(range(MIN_VALUE, MAX_VALUE + 1))


def is_valid_value(val) -> bool:
    """True for an int in 0..9. Bools are rejected even though they are ints."""
    return isinstance(val, int) and not isinstance(val, bool) and BLANK <= val <= MAX_VALUE


def box_origin(row: int, col: int) -> Cell:
    return (row - row % BOX_SIZE, col - col % BOX_SIZE)


def rc_to_key(row: int, col: int) -> str:
    return f"r{row + 1}c{col + 1}"


def clone_grid(grid: Grid) -> Grid:
    return [row[:] for row in grid]


def row_cells(row: int) -> list[Cell]:
    return [(row, c) for c in range(GRID_SIZE)]


def col_cells(col: int) -> list[Cell]:
    return [(r, col) for r in range(GRID_SIZE)]


def box_cells(row: int, col: int) -> list[Cell]:
    """Cells of the box holding (row, col), in row-major order."""
    top, left = box_origin(row, col)
    return [(top + i, left + j) for i in range(BOX_SIZE) for j in range(BOX_SIZE)]


def all_boxes() -> list[list[Cell]]:
    return [
        box_cells(top, left)
        for top in range(0, GRID_SIZE, BOX_SIZE)
        for left in range(0, GRID_SIZE, BOX_SIZE)
    ]


def peers(row: int, col: int) -> set[Cell]:
    """Return the set of peer coordinates for a given cell (same row, column, and 3x3 box)."""
    ps = set(row_cells(row)) | set(col_cells(col)) | set(box_cells(row, col))
    ps.discard((row, col))
    return ps


def check_digits(values: Iterable[int]) -> bool:
    """True when a row, column or box holds exactly one of each digit 1..9."""
    vals = list(values)
    return len(vals) == GRID_SIZE and set(vals) == DIGITS
