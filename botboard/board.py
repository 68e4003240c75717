"""Fixed-size board holding at most one bot per cell.

Provides the two core objects:
- Board: a width x height table of cells, stored row-major in a single list
- Occupant: a bot placed on the board together with the direction it faces

Cells are addressed either by an (x, y) coordinate or by their linear index
``x + y * width``. Coordinate based methods translate through
``Board.coordinate_to_index`` and then delegate to their index based sibling,
so callers that already hold an index can skip the translation.

All failing operations raise a ``LocationError`` subclass and leave the board
exactly as it was before the call.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

import numpy as np

from botboard.board_logging import create_module_logger, method_logger
from botboard.errors import (
    AlreadyOccupiedError,
    GridDimensionError,
    NotOccupiedError,
    OutOfBoundsError,
)
from botboard.facing import NORTH, FacingLike, resolve_facing
from botboard.protocols import AgentView, Identifiable

_board_logger = create_module_logger()


class Occupant:
    """A bot placed in a board cell.

    Attributes:
        agent: the bot held in the cell
        facing: degrees clockwise from north
    """

    __slots__ = ("_agent", "_facing")

    def __init__(self, agent: Identifiable, facing: FacingLike = NORTH) -> None:
        """Pair a bot with its facing.

        Args:
            agent: the bot
            facing: angle in degrees clockwise from north, or a direction name
        """
        self._agent = agent
        self._facing = resolve_facing(facing)

    @property
    def agent(self) -> Identifiable:
        """The bot held by this occupant."""
        return self._agent

    @property
    def agent_view(self) -> AgentView:
        """Read-only view of the bot held by this occupant."""
        return AgentView(self._agent)

    @property
    def facing(self) -> int:
        """Direction the bot faces, in degrees clockwise from north."""
        return self._facing

    def set_facing(self, facing: FacingLike) -> None:
        """Overwrite the facing. Angles are stored as given, without a range check.

        Args:
            facing: angle in degrees clockwise from north, or a direction name
        """
        self._facing = resolve_facing(facing)

    def __str__(self) -> str:  # noqa: D105
        return f"[Bot: {self._agent}, Facing: {self._facing}]"

    def __repr__(self) -> str:  # noqa: D105
        return f"Occupant(agent={self._agent!r}, facing={self._facing})"


class Board:
    """A fixed-size rectangular board of single-occupancy cells.

    Attributes:
        width (int): number of columns
        height (int): number of rows
        cells (list[Occupant | None]): row-major cell contents, ``width * height`` long

    Notes:
        A width or height of 0 is allowed. Such a board has no cells, and
        every coordinate or index is out of bounds.

        The board does no locking of its own. Share it between threads only
        behind a lock that covers each whole operation.

    """

    @method_logger(__name__)
    def __init__(self, width: int, height: int) -> None:
        """Create an empty board.

        Args:
            width: number of columns
            height: number of rows

        Raises:
            GridDimensionError: if width or height is not a non-negative integer
        """
        self.width = width
        self.height = height
        self._validate_parameters()
        self.cells: list[Occupant | None] = [None] * (width * height)

    def _validate_parameters(self):
        for name, value in (("width", self.width), ("height", self.height)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise GridDimensionError(f"Board {name} must be an integer, got {value!r}.")
            if value < 0:
                raise GridDimensionError(f"Board {name} must not be negative, got {value}.")

    @property
    def dimensions(self) -> tuple[int, int]:
        """Convenience access to (width, height)."""
        return self.width, self.height

    @property
    def num_cells(self) -> int:
        """Total number of cells on the board."""
        return len(self.cells)

    @property
    def num_occupied(self) -> int:
        """Number of occupied cells, counted by scanning every cell."""
        return sum(1 for cell in self.cells if cell is not None)

    # coordinate translation
    def coordinate_to_index(self, x: int, y: int) -> int:
        """Translate an (x, y) coordinate into its row-major index.

        Raises:
            OutOfBoundsError: if the coordinate lies outside the board
        """
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise OutOfBoundsError((x, y), self.dimensions)
        return x + y * self.width

    def index_to_coordinate(self, index: int) -> tuple[int, int]:
        """Translate a row-major index back into its (x, y) coordinate.

        Raises:
            OutOfBoundsError: if the index lies outside the board
        """
        self._check_index(index)
        y, x = divmod(index, self.width)
        return x, y

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self.cells):
            raise OutOfBoundsError(index, self.dimensions)

    # placement
    def place(
        self, agent: Identifiable, x: int, y: int, facing: FacingLike = NORTH
    ) -> None:
        """Place a bot on an empty cell.

        Args:
            agent: the bot to place, it must expose a ``unique_id``
            x: column of the target cell
            y: row of the target cell
            facing: angle in degrees clockwise from north, or a direction name

        Raises:
            OutOfBoundsError: if (x, y) is outside the board
            AlreadyOccupiedError: if the cell already holds a bot
        """
        self.place_at_index(agent, self.coordinate_to_index(x, y), facing)

    def place_at_index(
        self, agent: Identifiable, index: int, facing: FacingLike = NORTH
    ) -> None:
        """Place a bot on the empty cell at ``index``.

        Raises:
            OutOfBoundsError: if index is outside the board
            AlreadyOccupiedError: if the cell already holds a bot
            TypeError: if agent has no ``unique_id``
        """
        if not isinstance(agent, Identifiable):
            raise TypeError(
                f"Agents placed on a board must have a unique_id, got {type(agent).__name__}"
            )
        self._check_index(index)
        current = self.cells[index]
        if current is not None:
            raise AlreadyOccupiedError(
                self.index_to_coordinate(index), current.agent.unique_id
            )

        self.cells[index] = Occupant(agent, facing)
        _board_logger.debug(
            f"placed bot {agent.unique_id} at index {index} facing {self.cells[index].facing}"
        )

    # removal
    def remove_at(self, x: int, y: int) -> Occupant:
        """Take the occupant out of the cell at (x, y).

        Returns:
            the removed occupant, the cell is empty afterwards

        Raises:
            OutOfBoundsError: if (x, y) is outside the board
            NotOccupiedError: if the cell is empty
        """
        return self.remove_at_index(self.coordinate_to_index(x, y))

    def remove_at_index(self, index: int) -> Occupant:
        """Take the occupant out of the cell at ``index``.

        Raises:
            OutOfBoundsError: if index is outside the board
            NotOccupiedError: if the cell is empty
        """
        occupant = self.get_occupant_at_index(index)
        self.cells[index] = None
        _board_logger.debug(
            f"removed bot {occupant.agent.unique_id} from index {index}"
        )
        return occupant

    # lookup
    def get_occupant_at(self, x: int, y: int) -> Occupant:
        """Return the occupant at (x, y) without removing it.

        Raises:
            OutOfBoundsError: if (x, y) is outside the board
            NotOccupiedError: if the cell is empty
        """
        return self.get_occupant_at_index(self.coordinate_to_index(x, y))

    def get_occupant_at_index(self, index: int) -> Occupant:
        """Return the occupant at ``index`` without removing it.

        Raises:
            OutOfBoundsError: if index is outside the board
            NotOccupiedError: if the cell is empty
        """
        self._check_index(index)
        occupant = self.cells[index]
        if occupant is None:
            raise NotOccupiedError(self.index_to_coordinate(index))
        return occupant

    def get_agent_at(self, x: int, y: int, read_only: bool = True) -> Any:
        """Return the bot at (x, y) without removing it.

        Args:
            x: column of the cell
            y: row of the cell
            read_only: if True, return an ``AgentView`` that refuses attribute
                assignment. If False, return the bot itself so its state can
                be changed in place.

        Raises:
            OutOfBoundsError: if (x, y) is outside the board
            NotOccupiedError: if the cell is empty
        """
        return self.get_agent_at_index(self.coordinate_to_index(x, y), read_only)

    def get_agent_at_index(self, index: int, read_only: bool = True) -> Any:
        """Return the bot at ``index`` without removing it.

        See ``get_agent_at`` for the meaning of ``read_only``.
        """
        occupant = self.get_occupant_at_index(index)
        return occupant.agent_view if read_only else occupant.agent

    def is_empty(self, x: int, y: int) -> bool:
        """Whether the cell at (x, y) holds no bot."""
        return self.is_empty_at_index(self.coordinate_to_index(x, y))

    def is_empty_at_index(self, index: int) -> bool:
        """Whether the cell at ``index`` holds no bot."""
        self._check_index(index)
        return self.cells[index] is None

    # movement
    def move_agent(
        self,
        x: int,
        y: int,
        new_x: int,
        new_y: int,
        facing: FacingLike | None = None,
    ) -> None:
        """Move the bot at (x, y) to (new_x, new_y).

        Args:
            x: column of the bot to move
            y: row of the bot to move
            new_x: column of the target cell
            new_y: row of the target cell
            facing: new facing for the bot, keeps the current facing if None

        Raises:
            OutOfBoundsError: if either coordinate is outside the board
            NotOccupiedError: if there is no bot at (x, y)
            AlreadyOccupiedError: if another bot holds (new_x, new_y)

        Notes:
            Moving a bot onto its own cell only updates its facing.
        """
        source = self.coordinate_to_index(x, y)
        target = self.coordinate_to_index(new_x, new_y)
        occupant = self.get_occupant_at_index(source)
        current = self.cells[target]
        if current is not None and current is not occupant:
            raise AlreadyOccupiedError((new_x, new_y), current.agent.unique_id)
        new_facing = occupant.facing if facing is None else resolve_facing(facing)

        self.cells[source] = None
        self.cells[target] = occupant
        occupant.set_facing(new_facing)
        _board_logger.debug(
            f"moved bot {occupant.agent.unique_id} from {(x, y)} to {(new_x, new_y)}"
        )

    # scans
    def occupants(self) -> Iterator[tuple[tuple[int, int], Occupant]]:
        """Iterate over ((x, y), occupant) pairs in row-major order."""
        for index, occupant in enumerate(self.cells):
            if occupant is not None:
                yield self.index_to_coordinate(index), occupant

    def occupancy_mask(self) -> np.ndarray:
        """Return a boolean array of shape (height, width), True where occupied.

        The array is indexed ``[y, x]`` and is a snapshot: changing it does
        not change the board.
        """
        occupied = np.fromiter(
            (cell is not None for cell in self.cells), dtype=bool, count=len(self.cells)
        )
        return occupied.reshape((self.height, self.width))

    def empty_coordinates(self) -> list[tuple[int, int]]:
        """Return the (x, y) coordinates of all empty cells in row-major order."""
        return [(int(x), int(y)) for y, x in np.argwhere(~self.occupancy_mask())]

    def render(self) -> str:
        """Render the board as text, top row first and left to right.

        An occupied cell shows the ``unique_id`` of its bot, an empty cell shows
        its own coordinate. Rows are separated by a blank line.
        """
        parts = []
        for y in range(self.height):
            for x in range(self.width):
                occupant = self.cells[self.coordinate_to_index(x, y)]
                if occupant is not None:
                    parts.append(f"  {occupant.agent.unique_id}   ")
                else:
                    parts.append(f"({x},{y}) ")
            parts.append("\n\n")
        return "".join(parts)

    def __str__(self) -> str:  # noqa: D105
        return (
            f"(width:{self.width}, height:{self.height}, "
            f"number of bots:{self.num_occupied})"
        )

    def __repr__(self) -> str:  # noqa: D105
        return f"Board(width={self.width}, height={self.height})"
