"""Requests and Response models"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, field_validator

from src.core.exceptions import InvalidRequestError
from src.core.settings import DEFAULT_HEIGHT, DEFAULT_THINKING_DELAY, DEFAULT_WIDTH
from src.core.shared_types import DropOutcome, PlayerKind, Status

# A line of four needs at least this many rows / columns to fit vertically / horizontally
MINIMUM_DIMENSION = 4

PlayerId = str
CoordinatePair = tuple[int, int]


# --- REQUEST MODELS ---
class CreateSessionRequest(BaseModel):
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    thinking_delay: float = DEFAULT_THINKING_DELAY

    @field_validator(*["width", "height"])
    @classmethod
    def validate_dimension(cls, value: int) -> int:
        if value < MINIMUM_DIMENSION:
            raise InvalidRequestError(
                f"Board dimensions must be at least {MINIMUM_DIMENSION}, got {value}."
            )
        return value

    @field_validator("thinking_delay")
    @classmethod
    def validate_thinking_delay(cls, value: float) -> float:
        if value < 0:
            raise InvalidRequestError("Thinking delay cannot be negative.")
        return value


class AddPlayerRequest(BaseModel):
    session_id: UUID
    name: str
    color: str
    is_automated: bool = False

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        if value.strip() == "":
            raise InvalidRequestError("Player names must not be empty!")
        return value


class RemovePlayerRequest(BaseModel):
    session_id: UUID
    player_id: PlayerId


class StartGameRequest(BaseModel):
    session_id: UUID


class DropPieceRequest(BaseModel):
    session_id: UUID
    column: int


class GetSessionRequest(BaseModel):
    session_id: UUID


class DeleteSessionRequest(BaseModel):
    session_id: UUID


# --- RESPONSE MODELS ---
class PlayerResponse(BaseModel):
    id: PlayerId
    name: str
    color: str
    kind: PlayerKind


class SessionResponse(BaseModel):
    session_id: UUID
    width: int
    height: int
    board: list[list[Optional[PlayerId]]]
    players: list[PlayerResponse]
    current_player: Optional[PlayerId]
    status: Status
    winner: Optional[PlayerId] = None
    winning_line: Optional[list[CoordinatePair]] = None


class DropResponse(BaseModel):
    outcome: DropOutcome
    player_id: Optional[PlayerId]
    column: int
    row: Optional[int] = None
    winning_line: Optional[list[CoordinatePair]] = None
    session: SessionResponse
