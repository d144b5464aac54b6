"""Configuration of a game session."""

from pydantic import BaseModel, ConfigDict, Field

# Classic Connect Four board. Just in case we want to try some funky stuff, make it adjustable
DEFAULT_WIDTH = 7
DEFAULT_HEIGHT = 6

# Seconds an automated player "thinks" before dropping a piece
DEFAULT_THINKING_DELAY = 0.2


class GameSettings(BaseModel):
    """Dimensions of the board and pacing of automated players."""

    model_config = ConfigDict(frozen=True)

    width: int = Field(default=DEFAULT_WIDTH, ge=1)
    height: int = Field(default=DEFAULT_HEIGHT, ge=1)
    thinking_delay: float = Field(default=DEFAULT_THINKING_DELAY, ge=0)
