"""Custom exceptions raised by the Sudoku engine and facade."""

from typing import Any

from types_sudoku import Cell


class SudokuError(Exception):
    """Base exception for solver failures."""

    def __init__(self, message: str, cell: Cell | None = None, error_details: dict[str, Any] | None = None):
        """
        Initialize the exception.

        Args:
            message: Error message, also used as the JSON status string
            cell: Offending (row, col), when the failure has one
            error_details: Optional dictionary with detailed error information
        """
        super().__init__(message)
        self.cell = cell
        self.error_details = error_details


class GridShapeError(SudokuError):
    """Raised when the input is not 9 rows of 9 values."""


class OutOfRangeError(SudokuError):
    """Raised when an input value is not an integer in 0..9."""


class IllegalConfigurationError(SudokuError):
    """Raised when the givens violate Sudoku rules, directly or after first-pass deduction."""


class UnsolvableError(SudokuError):
    """Raised when the backtracking search exhausts every branch."""
