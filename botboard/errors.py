import botboard


class BoardError(Exception):
    """Base class for all botboard-specific exceptions.
    It automatically appends the botboard version to help with debugging reports.
    """

    def __init__(self, message: str):
        self.botboard_version = getattr(botboard, "__version__", "unknown")
        # Store the original message cleanly for programmatic access
        self.original_message = message
        full_message = f"[botboard {self.botboard_version}] {message}"
        super().__init__(full_message)


class GridDimensionError(BoardError):
    """Raised when board dimensions are invalid.
    Examples: Negative width/height or non-integer dimensions.
    """


# Location Errors
class LocationError(BoardError):
    """Generic errors related to cell locations on the board."""


class OutOfBoundsError(LocationError):
    """Raised when a coordinate or index lies outside the board."""

    def __init__(self, pos, dimensions):
        self.pos = pos
        self.dimensions = dimensions
        message = f"Position {pos} is out of bounds for board dimensions {dimensions}."
        super().__init__(message)


class AlreadyOccupiedError(LocationError):
    """Raised when placing or moving a bot onto an occupied cell."""

    def __init__(self, pos, content):
        self.pos = pos
        self.content = content
        message = f"Cell {pos} is already occupied by {content}."
        super().__init__(message)


class NotOccupiedError(LocationError):
    """Raised when removing or looking up a bot in an empty cell."""

    def __init__(self, pos):
        self.pos = pos
        message = f"Cell {pos} is not occupied."
        super().__init__(message)
