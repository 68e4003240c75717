"""Tests for the botboard exception hierarchy."""

import pytest

import botboard
from botboard.errors import (
    AlreadyOccupiedError,
    BoardError,
    GridDimensionError,
    LocationError,
    NotOccupiedError,
    OutOfBoundsError,
)


def test_message_carries_version():
    """Every error message is prefixed with the package version."""
    error = BoardError("something broke")
    assert str(error) == f"[botboard {botboard.__version__}] something broke"
    assert error.original_message == "something broke"
    assert error.botboard_version == botboard.__version__


@pytest.mark.parametrize(
    "error",
    [
        OutOfBoundsError((4, 0), (4, 3)),
        AlreadyOccupiedError((1, 1), 7),
        NotOccupiedError((2, 2)),
    ],
)
def test_location_errors_share_a_base(error):
    """Location errors can be caught together."""
    assert isinstance(error, LocationError)
    assert isinstance(error, BoardError)


def test_out_of_bounds_error_fields():
    """OutOfBoundsError keeps the position and the dimensions."""
    error = OutOfBoundsError(12, (4, 3))
    assert error.pos == 12
    assert error.dimensions == (4, 3)
    assert "out of bounds" in error.original_message


def test_already_occupied_error_fields():
    """AlreadyOccupiedError keeps the position and the current content."""
    error = AlreadyOccupiedError((1, 1), 7)
    assert error.pos == (1, 1)
    assert error.content == 7
    assert error.original_message == "Cell (1, 1) is already occupied by 7."


def test_not_occupied_error_fields():
    """NotOccupiedError keeps the position."""
    error = NotOccupiedError((0, 2))
    assert error.pos == (0, 2)
    assert error.original_message == "Cell (0, 2) is not occupied."


def test_grid_dimension_error_is_not_a_location_error():
    """Bad dimensions are a separate kind of failure."""
    assert not issubclass(GridDimensionError, LocationError)
    assert issubclass(GridDimensionError, BoardError)
