"""Defines the players taking part in a game: humans wait for input, automated players take their own turns."""

import logging
from dataclasses import dataclass, field
from typing import Protocol, Sequence, TypeVar

from src.core.shared_types import PlayerKind

logger = logging.getLogger(__name__)

T = TypeVar("T")

_UINT32 = 0xFFFFFFFF


class RandomSource(Protocol):
    """Just the parts of random.Random the game needs (makes it easy to swap in a deterministic stub)"""

    def randrange(self, stop: int) -> int: ...
    def choice(self, seq: Sequence[T]) -> T: ...


def _to_int32(value: int) -> int:
    value &= _UINT32
    return value - (1 << 32) if value >= (1 << 31) else value


def _first_utf16_unit(character: str) -> int:
    """Characters outside the BMP contribute their high surrogate (as a UTF-16 string would)."""
    code_point = ord(character)
    if code_point > 0xFFFF:
        return 0xD800 + ((code_point - 0x10000) >> 10)
    return code_point


def player_id(name: str) -> str:
    """Stable id derived from the player's name: 32-bit rolling hash (h * 31 + c), hex encoded."""
    value = 0
    for character in name:
        value = _to_int32(_to_int32(value) << 5) - value + _first_utf16_unit(character)
    return format(value & _UINT32, "x")


@dataclass
class Player:
    name: str
    color: str
    id: str = field(init=False)

    def __post_init__(self):
        self.id = player_id(self.name)

    @property
    def kind(self) -> PlayerKind:
        return PlayerKind.HUMAN

    @property
    def takes_turns(self) -> bool:
        """Human players never act on their own: the game waits for their input."""
        return False

    def new_game(self, width: int) -> None:
        """Humans have nothing to reset between games."""


@dataclass
class AutomatedPlayer(Player):
    """Drops pieces in a random column that has not (yet) been found full during the current game."""

    candidate_columns: list[int] = field(default_factory=list)

    @property
    def kind(self) -> PlayerKind:
        return PlayerKind.AUTOMATED

    @property
    def takes_turns(self) -> bool:
        return True

    def new_game(self, width: int) -> None:
        """Let the player know a new game started: every column is worth trying again."""
        self.candidate_columns = list(range(width))

    def choose_column(self, rng: RandomSource) -> int:
        return rng.choice(self.candidate_columns)

    def discard_column(self, col: int) -> None:
        """The column turned out to be full, stop trying it for the rest of the game."""
        if col in self.candidate_columns:
            self.candidate_columns.remove(col)
        logger.debug(
            "%s discarded full column %d, candidates left: %s",
            self.name,
            col,
            self.candidate_columns,
        )
