"""Sudoku solving engine: constraint queries, candidate lists, first-pass deduction and MRV backtracking search."""

# sudoku_engine.py
# The engine owns a 9x9 array of cell states (see cell_state.py). One engine
# is built per solve call and discarded afterwards.
from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from itertools import product

from solver.cell_state import CellState, Fixed, Open, Trial
from solver.solver_core import (
    BLANK,
    DIGITS,
    GRID_SIZE,
    all_boxes,
    box_cells,
    check_digits,
    col_cells,
    peers,
    row_cells,
)
from solver.sudoku_errors import IllegalConfigurationError
from types_sudoku import Cell, Grid


def _scan_order() -> Iterator[Cell]:
    """Row-major traversal of every cell."""
    return product(range(GRID_SIZE), repeat=2)


# House membership never changes, so it is computed once
_ROWS = [row_cells(i) for i in range(GRID_SIZE)]
_COLS = [col_cells(i) for i in range(GRID_SIZE)]
_BOXES = {(r, c): box_cells(r, c) for r, c in _scan_order()}
_PEERS = {(r, c): sorted(peers(r, c)) for r, c in _scan_order()}


class SudokuEngine:
    """Mutable solving state for one puzzle."""

    def __init__(self) -> None:
        self._cells: list[list[CellState]] = [[Open() for _ in range(GRID_SIZE)] for _ in range(GRID_SIZE)]
        self.search_nodes = 0
        self._logger = logging.getLogger("SudokuEngine")

    @classmethod
    def from_grid(cls, grid: Grid) -> SudokuEngine:
        """Seed an engine: non-blank values become Fixed, blanks start Open with no candidates.

        Values are expected to be validated already (see sudoku_tools.solve).
        """
        engine = cls()
        for row, col in _scan_order():
            if grid[row][col] != BLANK:
                engine.set_fixed(row, col, grid[row][col])
        return engine

    def to_grid(self) -> Grid:
        return [[state.value for state in row] for row in self._cells]

    # --------------------------
    # Cell state access
    # --------------------------
    def state(self, row: int, col: int) -> CellState:
        return self._cells[row][col]

    def set_fixed(self, row: int, col: int, value: int) -> None:
        self._cells[row][col] = Fixed(value)

    def set_trial(self, row: int, col: int, value: int) -> None:
        self._cells[row][col] = Trial(value)

    def reopen(self, row: int, col: int) -> None:
        self._cells[row][col] = Open()

    def is_solved_by_deduction(self) -> bool:
        return all(isinstance(self._cells[row][col], Fixed) for row, col in _scan_order())

    # --------------------------
    # Constraint queries
    # --------------------------
    def _values(self, cells: list[Cell]) -> set[int]:
        return {self._cells[r][c].value for r, c in cells} - {BLANK}

    def row_values(self, row: int) -> set[int]:
        return self._values(_ROWS[row])

    def col_values(self, col: int) -> set[int]:
        return self._values(_COLS[col])

    def box_values(self, row: int, col: int) -> set[int]:
        return self._values(_BOXES[(row, col)])

    def value_in_row(self, value: int, row: int) -> bool:
        return value in self.row_values(row)

    def value_in_col(self, value: int, col: int) -> bool:
        return value in self.col_values(col)

    def value_in_box(self, value: int, row: int, col: int) -> bool:
        return value in self.box_values(row, col)

    def build_candidates(self, row: int, col: int) -> int:
        """Rebuild the candidate list of an open cell and return its length.

        Raises TypeError on a Fixed or Trial cell.
        """
        if not isinstance(self._cells[row][col], Open):
            raise TypeError(f"cell {row}, {col} is not open")
        used = self.row_values(row) | self.col_values(col) | self.box_values(row, col)
        candidates = tuple(sorted(DIGITS - used))
        self._cells[row][col] = Open(candidates)
        return len(candidates)

    def is_grid_valid(self) -> bool:
        """True when every row, column and box holds each digit 1..9 exactly once."""
        grid = self.to_grid()
        for i in range(GRID_SIZE):
            if not check_digits(grid[i]):
                return False
            if not check_digits(grid[r][i] for r in range(GRID_SIZE)):
                return False
        for cells in all_boxes():
            if not check_digits(grid[r][c] for r, c in cells):
                return False
        return True

    def check_givens(self) -> None:
        """Raise IllegalConfigurationError for the first Fixed cell whose value repeats in a peer."""
        for row, col in _scan_order():
            state = self._cells[row][col]
            if not isinstance(state, Fixed):
                continue
            for r, c in _PEERS[(row, col)]:
                if self._cells[r][c].value == state.value:
                    raise IllegalConfigurationError(
                        f"illegal config. Value {state.value} repeated at cell {row}, {col}",
                        cell=(row, col),
                        error_details={"value": state.value, "conflict": (r, c)},
                    )

    # --------------------------
    # Propagation
    # --------------------------
    def _propagate(self, settle: Callable[[int, int, int], None]) -> Cell | None:
        """Settle single-candidate cells until a sweep changes nothing.

        Each settled cell restarts the sweep at (0, 0) since it shrinks other
        candidate lists. Returns the first cell left with no candidates, or None.
        """
        changed = True
        while changed:
            changed = False
            for row, col in _scan_order():
                if not isinstance(self._cells[row][col], Open):
                    continue
                count = self.build_candidates(row, col)
                if count == 0:
                    return (row, col)
                if count == 1:
                    settle(row, col, self._cells[row][col].candidates[0])
                    changed = True
                    break
        return None

    def first_pass_solve(self) -> bool:
        """Fix every cell reachable by pure elimination from the givens.

        Returns True if that alone solves the puzzle. Otherwise returns False
        with every open cell holding a fresh candidate list. Raises
        IllegalConfigurationError if the givens repeat a value in a house or
        leave some cell without a legal value.
        """
        self.check_givens()
        empty = self._propagate(self.set_fixed)
        if empty is not None:
            row, col = empty
            raise IllegalConfigurationError(f"illegal config. No legal value for cell {row}, {col}", cell=empty)
        solved = self.is_solved_by_deduction()
        self._logger.debug("First pass done, solved=%s", solved)
        return solved

    def recalc_candidates(self) -> bool:
        """Propagate after a branch value was set. Singles become Trial. False on contradiction."""
        return self._propagate(self.set_trial) is None

    def clear_trials(self) -> None:
        for row, col in _scan_order():
            if isinstance(self._cells[row][col], Trial):
                self.reopen(row, col)

    # --------------------------
    # Search
    # --------------------------
    def find_min_options_cell(self) -> Cell | None:
        """Open cell with the fewest candidates. Ties go to the first one in row-major order."""
        best: Cell | None = None
        best_count = 0
        for row, col in _scan_order():
            state = self._cells[row][col]
            if not isinstance(state, Open):
                continue
            if best is None or len(state.candidates) < best_count:
                best, best_count = (row, col), len(state.candidates)
        return best

    def recursive_solve(self) -> bool:
        """Depth-first search branching on the MRV cell. Returns True once the grid is solved.

        Expects every open cell to hold a current candidate list, as left by
        first_pass_solve or recalc_candidates.
        """
        self.search_nodes += 1
        cell = self.find_min_options_cell()
        if cell is None:
            return self.is_grid_valid()

        row, col = cell
        options = self._cells[row][col].candidates
        if not options:
            return False

        for val in options:
            self._logger.debug("Node %d: trying %d at cell %d, %d", self.search_nodes, val, row, col)
            self.set_fixed(row, col, val)

            if not self.recalc_candidates():
                self.clear_trials()
                continue

            if self.is_grid_valid():
                return True

            if self.recursive_solve():
                return True

            self.clear_trials()

        # Every value failed, back up one level
        self.reopen(row, col)
        return False
