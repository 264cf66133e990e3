"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/helpers required for testing multiple layers.
"""

from typing import Callable, Iterable

import pytest

from src.bowling.game import Game

RollMany = Callable[[Game, Iterable[int]], Game]


def _roll_many(game: Game, rolls: Iterable[int]) -> Game:
    for pins in rolls:
        game.roll(pins)
    return game


@pytest.fixture
def game() -> Game:
    """A fresh game that validates the pins of every roll."""
    return Game.new_game(strict=True)


@pytest.fixture
def lenient_game() -> Game:
    """A fresh game that accepts any pins (the unvalidated behaviour)."""
    return Game.new_game(strict=False)


@pytest.fixture
def roll_many() -> RollMany:
    """Feed a sequence of rolls to a game, one at a time."""
    return _roll_many
