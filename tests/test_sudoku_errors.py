"""Tests for solver exceptions."""

import pytest

from solver.sudoku_errors import (
    GridShapeError,
    IllegalConfigurationError,
    OutOfRangeError,
    SudokuError,
    UnsolvableError,
)


class TestSudokuError:
    """Test base SudokuError exception."""

    def test_create_simple_error(self):
        error = SudokuError("Something went wrong")
        assert str(error) == "Something went wrong"
        assert error.cell is None
        assert error.error_details is None

    def test_create_error_with_cell_and_details(self):
        error = SudokuError("bad", cell=(2, 3), error_details={"value": 12})
        assert error.cell == (2, 3)
        assert error.error_details["value"] == 12

    def test_raise_and_catch(self):
        with pytest.raises(SudokuError) as exc_info:
            raise SudokuError("test error")
        assert "test error" in str(exc_info.value)


@pytest.mark.parametrize(
    "error_class",
    [GridShapeError, OutOfRangeError, IllegalConfigurationError, UnsolvableError],
)
def test_subclasses_inherit_from_sudoku_error(error_class):
    error = error_class("x", cell=(0, 0))
    assert isinstance(error, SudokuError)
    assert isinstance(error, Exception)
    assert error.cell == (0, 0)
