"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/helpers required for testing multiple layers.
"""

from typing import Callable, Optional

import pytest

from src.connect4.game import Game
from src.core.settings import GameSettings
from tests.stubs import ScriptedRandom, no_sleep


@pytest.fixture
def make_game() -> Callable[..., Game]:
    """Call the inner function with the desired starting index / scripted columns / board size"""

    def _create_game(
        starts: Optional[list[int]] = None,
        columns: Optional[list[int]] = None,
        width: int = 7,
        height: int = 6,
    ) -> Game:
        return Game(
            settings=GameSettings(width=width, height=height, thinking_delay=0),
            rng=ScriptedRandom(starts, columns),
            sleep=no_sleep,
        )

    return _create_game


@pytest.fixture
def two_player_game(make_game: Callable[..., Game]) -> Game:
    """Started 7x6 game between two humans: 'alice' moves first."""
    game = make_game(starts=[0])
    game.register_player("alice", "#ff0000")
    game.register_player("bob", "#ffff00")
    game.start()
    return game
