# types_sudoku.py
from __future__ import annotations

from typing import TypedDict

Grid = list[list[int]]
"""A 9x9 Sudoku grid as rows of integers (0 = blank)."""

Cell = tuple[int, int]
"""A (row, col) coordinate, both 0-based."""

SUCCESS_STATUS = "Success"


class JsonGrid(TypedDict):
    """Wire shape exchanged with callers of the JSON facade and the HTTP adapter."""

    solution: Grid  # puzzle on input, solved grid on success
    status: str  # empty on input; "Success" or a failure description on output
