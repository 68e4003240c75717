"""Protocols describing what the board needs from the agents it holds.

This module provides:
- ``Identifiable``: a Protocol for any agent exposing a stable ``unique_id``
- ``AgentView``: a read-only proxy handed out by board lookups

The board treats agents as opaque payloads. The only thing it reads from an
agent is ``unique_id``, which ``Board.render`` prints as the cell marker.
Any class with that attribute satisfies ``Identifiable`` through structural
typing, so Mesa agents can be placed on a board as they are::

    from botboard import Board

    class Kilobot:
        def __init__(self, unique_id):
            self.unique_id = unique_id

    board = Board(4, 3)
    board.place(Kilobot(7), 1, 2)
    print(board.render())
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Identifiable(Protocol):
    """Protocol for any agent that can be told apart from other agents."""

    @property
    def unique_id(self) -> Any:
        """A stable identifier, printed by ``Board.render``."""
        ...


class AgentView:
    """Read-only view of an agent held by a board.

    Attribute reads and method calls are forwarded to the wrapped agent.
    Rebinding or deleting attributes through the view raises
    ``AttributeError``. A view compares equal to, and hashes like, the agent
    it wraps.
    """

    __slots__ = ("_agent",)

    def __init__(self, agent: Any) -> None:
        """Wrap an agent.

        Args:
            agent: the agent to expose read-only
        """
        object.__setattr__(self, "_agent", agent)

    def __getattr__(self, name: str) -> Any:  # noqa: D105
        return getattr(self._agent, name)

    def __setattr__(self, name: str, value: Any) -> None:  # noqa: D105
        raise AttributeError(f"Cannot set '{name}' through a read-only agent view")

    def __delattr__(self, name: str) -> None:  # noqa: D105
        raise AttributeError(f"Cannot delete '{name}' through a read-only agent view")

    def __eq__(self, other: object) -> bool:  # noqa: D105
        if isinstance(other, AgentView):
            other = other._agent
        return self._agent is other or self._agent == other

    def __hash__(self) -> int:  # noqa: D105
        return hash(self._agent)

    def __str__(self) -> str:  # noqa: D105
        return str(self._agent)

    def __repr__(self) -> str:  # noqa: D105
        return f"AgentView({self._agent!r})"
