"""Shared fixtures for the botboard test suite."""

import pytest

from botboard import Board


class Kilobot:
    """Minimal bot used as board payload in tests."""

    def __init__(self, unique_id, energy=100):
        self.unique_id = unique_id
        self.energy = energy

    def recharge(self, amount):
        self.energy += amount

    def __str__(self):
        return f"Kilobot {self.unique_id}"


@pytest.fixture
def board():
    """A 4 x 3 board."""
    return Board(4, 3)


@pytest.fixture
def make_bot():
    """Factory for Kilobots with the given id."""
    return Kilobot
