"""Facing angles for bots placed on a board.

A facing is an integer number of degrees measured clockwise from north. The
four cardinal directions have named constants, but any integer is a legal
facing; the board stores whatever it is given.
"""

from __future__ import annotations

NORTH: int = 0
EAST: int = 90
SOUTH: int = 180
WEST: int = 270

FacingLike = int | str

# fmt: off
DIRECTION_MAP: dict[str, int] = {
    "n": NORTH, "north": NORTH, "up": NORTH,
    "e": EAST, "east": EAST, "right": EAST,
    "s": SOUTH, "south": SOUTH, "down": SOUTH,
    "w": WEST, "west": WEST, "left": WEST,
    "ne": 45, "northeast": 45, "upright": 45,
    "se": 135, "southeast": 135, "downright": 135,
    "sw": 225, "southwest": 225, "downleft": 225,
    "nw": 315, "northwest": 315, "upleft": 315,
}
# fmt: on


def resolve_facing(facing: FacingLike) -> int:
    """Turn a facing given as an angle or a direction name into an angle.

    Args:
        facing: degrees clockwise from north, or a direction name such as
            ``"north"``, ``"e"`` or ``"downleft"`` (case-insensitive).

    Returns:
        the angle in degrees. Integer angles are returned unchanged, with
        no range check or modulo.

    Raises:
        ValueError: if a direction name is not recognised.
        TypeError: if facing is neither an integer nor a string.
    """
    if isinstance(facing, str):
        direction = facing.lower()
        if direction not in DIRECTION_MAP:
            raise ValueError(f"Invalid direction: {facing}")
        return DIRECTION_MAP[direction]
    if isinstance(facing, bool) or not hasattr(facing, "__index__"):
        raise TypeError(f"Facing must be an integer angle or a direction name, got {facing!r}")
    return int(facing)
