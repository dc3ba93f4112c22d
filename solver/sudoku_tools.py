"""Public solving facade: validate a puzzle, run the engine, copy the solution back. Also provides the JSON-shaped interface used by the HTTP adapter and CLI."""

# sudoku_tools.py
from __future__ import annotations

import logging

from solver.solver_core import (
    BLANK,
    GRID_SIZE,
    all_boxes,
    clone_grid,
    col_cells,
    is_valid_value,
    rc_to_key,
    row_cells,
)
from solver.sudoku_engine import SudokuEngine
from solver.sudoku_errors import GridShapeError, OutOfRangeError, SudokuError, UnsolvableError
from types_sudoku import SUCCESS_STATUS, Cell, Grid, JsonGrid

logger = logging.getLogger("SudokuTools")

HORZ_LINE = "─" * 25


def validate_grid(grid: Grid) -> None:
    """Raise GridShapeError or OutOfRangeError if `grid` is not a 9x9 grid of values 0..9."""
    if not isinstance(grid, list):
        raise GridShapeError(f"grid must be 9x9, got {type(grid).__name__}")
    if len(grid) != GRID_SIZE:
        raise GridShapeError(f"grid must be 9x9, got {len(grid)} rows")
    for r, row in enumerate(grid):
        if not isinstance(row, list) or len(row) != GRID_SIZE:
            raise GridShapeError(f"grid must be 9x9, row {r} is malformed", error_details={"row": r})
    for r in range(GRID_SIZE):
        for c in range(GRID_SIZE):
            if not is_valid_value(grid[r][c]):
                raise OutOfRangeError(
                    f"illegal value for cell {r}, {c}", cell=(r, c), error_details={"value": grid[r][c]}
                )


def solve(grid: Grid) -> Grid:
    """Solve `grid` in place and return it.

    Blanks are 0. Raises a SudokuError subclass (GridShapeError, OutOfRangeError,
    IllegalConfigurationError, UnsolvableError) and leaves `grid` untouched if
    no solution can be produced.
    """
    validate_grid(grid)

    engine = SudokuEngine.from_grid(grid)
    solved = engine.first_pass_solve()
    if solved:
        logger.info("Solved by direct deduction")
    else:
        if not engine.recursive_solve():
            logger.info("Search exhausted after %d nodes", engine.search_nodes)
            raise UnsolvableError("No solution found.")
        logger.info("Solved by search after %d nodes", engine.search_nodes)

    solution = engine.to_grid()
    for r in range(GRID_SIZE):
        grid[r][:] = solution[r]
    return grid


def jsolve(payload: JsonGrid) -> JsonGrid:
    """Solve a JSON-shaped puzzle. Failures are reported in `status`, never raised.

    On failure the input grid is echoed back unchanged.
    """
    grid = payload.get("solution")
    try:
        validate_grid(grid)
        solution = solve(clone_grid(grid))
    except SudokuError as e:
        logger.warning("Solve failed: %s", e)
        return {"solution": grid, "status": str(e)}
    return {"solution": solution, "status": SUCCESS_STATUS}


def sanity_check(original: Grid, current: Grid) -> dict:
    """Compare a grid against its givens. Reports overwritten givens and duplicate digits per house.

    Cells are reported with 1-based 'r1c1' keys.
    """
    issues = []
    for r in range(GRID_SIZE):
        for c in range(GRID_SIZE):
            if original[r][c] != BLANK and current[r][c] != original[r][c]:
                issues.append(
                    {"type": "given_overwritten", "cell": rc_to_key(r, c), "given": original[r][c], "found": current[r][c]}
                )

    def duplicates_in_unit(cells: list[Cell]) -> list[str]:
        seen = set()
        dups = set()
        for r, c in cells:
            v = current[r][c]
            if v == BLANK:
                continue
            if v in seen:
                dups.add(v)
            seen.add(v)
        return sorted(dups)

    units = (
        [(f"r{i + 1}", row_cells(i)) for i in range(GRID_SIZE)]
        + [(f"c{i + 1}", col_cells(i)) for i in range(GRID_SIZE)]
        + [(f"b{i + 1}", cells) for i, cells in enumerate(all_boxes())]
    )
    for unit, cells in units:
        dups = duplicates_in_unit(cells)
        if dups:
            bad = [rc_to_key(r, c) for r, c in cells if current[r][c] in dups]
            issues.append({"type": "duplicate", "unit": unit, "digits": dups, "cells": bad})
    return {"ok": len(issues) == 0, "issues": issues}


def format_grid(grid: Grid) -> str:
    """Render a grid as text with box separators. Blanks print as '.'."""
    lines = []
    for r in range(GRID_SIZE):
        if r % 3 == 0:
            lines.append(HORZ_LINE)
        parts = []
        for c in range(GRID_SIZE):
            if c % 3 == 0:
                parts.append("|")
            v = grid[r][c]
            parts.append(str(v) if v != BLANK else ".")
        parts.append("|")
        lines.append(" ".join(parts))
    lines.append(HORZ_LINE)
    return "\n".join(lines)
