"""
Custom exceptions shared by all layers.

Everything derives from GameError, so the service (or whatever sits on top of it) can catch a single type.
"""


class GameError(Exception):
    """Base class for all errors raised by the game engine."""


# --- Game / session state ---
class GameStateError(GameError):
    """The requested action does not fit the current state of the session."""


class SessionAlreadyStartedError(GameStateError):
    """The roster is frozen while a game is in progress."""


class SessionNotStartedError(GameStateError):
    """Pieces can only be dropped once the game has been started."""


class InsufficientPlayersError(GameStateError):
    """At least two players are required to start a game."""


class InvariantViolationError(GameStateError):
    """The board and the controller disagree (ex. an automated player ran out of columns on a board that is not full)."""


# --- Board ---
class InvalidMoveError(GameError):
    """A drop was attempted in a column that does not exist."""


class InvalidBoardError(GameError):
    """A board cannot be built with the requested dimensions."""


# --- Players ---
class PlayerError(GameError):
    """Base class for roster problems."""


class DuplicateNameError(PlayerError):
    """Player names must be unique within a session."""


class InvalidPlayerError(PlayerError):
    """Player names must not be empty."""


class PlayerNotFoundError(PlayerError):
    """No player with the given id is registered."""


# --- Boundary layers ---
class InvalidRequestError(GameError):
    """Raised by the request model validators."""


class RepositoryError(GameError):
    """The requested session could not be found / stored."""
