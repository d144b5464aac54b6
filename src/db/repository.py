"""Protocol repository (games are only kept in memory, but the Service should not care where they live)"""

from typing import Protocol
from uuid import UUID

from src.connect4.game import Game


class SessionRepository(Protocol):
    """Storage of live game sessions"""

    def get_session(self, session_id: UUID) -> Game | None:
        """Get session by ID, if it exists."""
        ...

    def create_session(self, game: Game) -> UUID:
        """Store a new session and return its newly created ID."""
        ...

    def delete_session(self, session_id: UUID) -> Game | None:
        """Remove a session."""
        ...
