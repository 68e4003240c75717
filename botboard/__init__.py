"""botboard: a fixed-size board tracking where bots stand and which way they face.

Core Objects: Board, Occupant
"""

__version__ = "0.1.0"

from botboard.board import Board, Occupant  # noqa: E402
from botboard.errors import (  # noqa: E402
    AlreadyOccupiedError,
    BoardError,
    GridDimensionError,
    LocationError,
    NotOccupiedError,
    OutOfBoundsError,
)
from botboard.facing import EAST, NORTH, SOUTH, WEST  # noqa: E402
from botboard.protocols import AgentView, Identifiable  # noqa: E402

__all__ = [
    "EAST",
    "NORTH",
    "SOUTH",
    "WEST",
    "AgentView",
    "AlreadyOccupiedError",
    "Board",
    "BoardError",
    "GridDimensionError",
    "Identifiable",
    "LocationError",
    "NotOccupiedError",
    "Occupant",
    "OutOfBoundsError",
]

__title__ = "botboard"
