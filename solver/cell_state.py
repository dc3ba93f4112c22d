"""Per-cell solver state. A cell is exactly one of Fixed, Trial or Open at any time."""

# cell_state.py
from __future__ import annotations

from dataclasses import dataclass

from solver.solver_core import BLANK


@dataclass(frozen=True)
class Fixed:
    """Value supplied by the caller, deduced with certainty, or the current search branch value."""

    value: int


@dataclass(frozen=True)
class Trial:
    """Value deduced while propagating a search branch. Cleared on backtrack."""

    value: int


@dataclass(frozen=True)
class Open:
    """Blank cell with its ascending candidate list. An empty list is a contradiction."""

    candidates: tuple[int, ...] = ()

    @property
    def value(self) -> int:
        return BLANK


CellState = Fixed | Trial | Open
