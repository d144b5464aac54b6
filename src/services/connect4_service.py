"""Orchestration of communication from API router to the game logic and the session storage (and the reverse direction)."""

import logging
import random
import time
from typing import Callable, Optional
from uuid import UUID

from src.api.models import (
    AddPlayerRequest,
    CreateSessionRequest,
    DeleteSessionRequest,
    DropPieceRequest,
    DropResponse,
    GetSessionRequest,
    PlayerResponse,
    RemovePlayerRequest,
    SessionResponse,
    StartGameRequest,
)
from src.connect4.game import Game
from src.connect4.players import RandomSource
from src.core.exceptions import RepositoryError
from src.core.models import GameModel
from src.core.settings import GameSettings
from src.db.repository import SessionRepository

logger = logging.getLogger(__name__)


class ConnectFourService:
    """Orchestration of layers for Connect Four sessions."""

    def __init__(
        self,
        repository: SessionRepository,
        rng_factory: Callable[[], RandomSource] = random.Random,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.repo = repository
        self.rng_factory = rng_factory
        self.sleep = sleep

    # -- API routes logic ---
    def create_session(self, request: CreateSessionRequest) -> SessionResponse:
        """Create a new (empty) session: players still need to be added."""
        settings = GameSettings(
            width=request.width,
            height=request.height,
            thinking_delay=request.thinking_delay,
        )
        game = Game(settings=settings, rng=self.rng_factory(), sleep=self.sleep)
        session_id = self.repo.create_session(game)
        logger.info("Created session %s (%dx%d)", session_id, request.width, request.height)
        return self._create_session_response(session_id, game.to_model())

    def add_player(self, request: AddPlayerRequest) -> SessionResponse:
        game = self._fetch_session(request.session_id)
        game.register_player(request.name, request.color, request.is_automated)
        return self._create_session_response(request.session_id, game.to_model())

    def remove_player(self, request: RemovePlayerRequest) -> SessionResponse:
        game = self._fetch_session(request.session_id)
        game.remove_player(request.player_id)
        return self._create_session_response(request.session_id, game.to_model())

    def start_game(self, request: StartGameRequest) -> SessionResponse:
        """Start (or restart) the game. Automated players who move first have already played when this returns."""
        game = self._fetch_session(request.session_id)
        game.start()
        return self._create_session_response(request.session_id, game.to_model())

    def drop_piece(self, request: DropPieceRequest) -> DropResponse:
        """A (human) player clicked on a column."""
        game = self._fetch_session(request.session_id)
        result = game.drop_piece(request.column)
        return DropResponse(
            outcome=result.outcome,
            player_id=result.player_id,
            column=request.column,
            row=result.row,
            winning_line=(
                [c.as_pair() for c in result.winning_line] if result.winning_line else None
            ),
            session=self._create_session_response(request.session_id, game.to_model()),
        )

    def get_session(self, request: GetSessionRequest) -> SessionResponse:
        """
        Retrieve current session state.
        ----
        Used in "polling" loop by frontend to render the board and see whose turn it is.
        """
        game = self._fetch_session(request.session_id)
        return self._create_session_response(request.session_id, game.to_model())

    def delete_session(self, request: DeleteSessionRequest) -> None:
        """Handle a request to throw away a session."""
        self.repo.delete_session(request.session_id)

    # -- Internal helpers --
    def _create_session_response(self, session_id: UUID, model: GameModel) -> SessionResponse:
        """Convert info in GameModel to a SessionResponse (for session with given ID.)"""
        return SessionResponse(
            session_id=session_id,
            width=model.width,
            height=model.height,
            board=model.board,
            players=[
                PlayerResponse(id=p.id, name=p.name, color=p.color, kind=p.kind)
                for p in model.players
            ],
            current_player=model.current_player,
            status=model.status,
            winner=model.winner,
            winning_line=model.winning_line,
        )

    def _fetch_session(self, session_id: UUID) -> Game:
        """Attempt to find the session in the repository and raise error if it fails."""
        game: Optional[Game] = self.repo.get_session(session_id)
        if game is None:
            raise RepositoryError(f"Session with {session_id=} not found.")
        return game
