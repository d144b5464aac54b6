"""
Type definitions used across layers
"""

from enum import StrEnum


class Status(StrEnum):
    WAITING_FOR_PLAYERS = "waiting for players"
    IN_PROGRESS = "in progress"
    WIN = "win"
    TIE = "tie"


class DropOutcome(StrEnum):
    """What happened to a single drop request."""

    ACCEPTED = "accepted"
    REJECTED = "rejected"
    WIN = "win"
    TIE = "tie"


class PlayerKind(StrEnum):
    HUMAN = "human"
    AUTOMATED = "automated"
