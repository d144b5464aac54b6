"""Implementation of (Session)Repository keeping the live Game objects in a dictionary"""

import logging
from uuid import UUID, uuid4

from src.connect4.game import Game

logger = logging.getLogger(__name__)


class InMemorySessionRepository:
    """Sessions live as long as the process (games are not persisted)"""

    def __init__(self) -> None:
        self._sessions: dict[UUID, Game] = {}

    def get_session(self, session_id: UUID) -> Game | None:
        """Get session by ID, if it exists."""
        return self._sessions.get(session_id)

    def create_session(self, game: Game) -> UUID:
        """Store a new session and return its newly created ID."""
        session_id = uuid4()
        self._sessions[session_id] = game
        logger.debug("Stored session %s", session_id)
        return session_id

    def delete_session(self, session_id: UUID) -> Game | None:
        """Remove a session."""
        return self._sessions.pop(session_id, None)

    def clear(self) -> None:
        self._sessions.clear()
