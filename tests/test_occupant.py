"""Tests for the Occupant class."""

import pytest

from botboard import EAST, NORTH, SOUTH, AgentView, Occupant


def test_occupant_initialization(make_bot):
    """Occupant stores the bot and its facing."""
    bot = make_bot(1)
    occupant = Occupant(bot, SOUTH)
    assert occupant.agent is bot
    assert occupant.facing == SOUTH


def test_occupant_default_facing(make_bot):
    """Facing defaults to north."""
    assert Occupant(make_bot(1)).facing == NORTH


def test_occupant_set_facing(make_bot):
    """set_facing overwrites without validating the range."""
    occupant = Occupant(make_bot(1), NORTH)
    occupant.set_facing(EAST)
    assert occupant.facing == EAST
    occupant.set_facing(720)
    assert occupant.facing == 720
    occupant.set_facing("SW")
    assert occupant.facing == 225


def test_occupant_agent_cannot_be_rebound(make_bot):
    """The held bot is exposed through a read-only property."""
    occupant = Occupant(make_bot(1))
    with pytest.raises(AttributeError):
        occupant.agent = make_bot(2)
    with pytest.raises(AttributeError):
        occupant.facing = EAST


def test_occupant_agent_view(make_bot):
    """agent_view wraps the bot read-only."""
    bot = make_bot(1)
    occupant = Occupant(bot)
    view = occupant.agent_view
    assert isinstance(view, AgentView)
    assert view == bot
    with pytest.raises(AttributeError):
        view.unique_id = 2

    occupant.agent.recharge(5)
    assert view.energy == 105


def test_occupant_str(make_bot):
    """Occupant renders its bot and facing."""
    occupant = Occupant(make_bot(3), 90)
    assert str(occupant) == "[Bot: Kilobot 3, Facing: 90]"
    assert "Occupant(" in repr(occupant)
