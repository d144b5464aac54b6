"""
The Game class will be the entrypoint into the domain layer for the service layer.
It owns the roster and the board of one session, and orchestrates a turn:
drop -> update the board -> check for the end of the game -> hand the turn to the next player.
Automated players take their turns as soon as it is their turn to move.
"""

import logging
import random
import time
from dataclasses import dataclass, field
from typing import Callable, Optional, Self
from uuid import UUID, uuid4

from src.connect4.board import Board, MoveEvaluation
from src.connect4.players import AutomatedPlayer, Player, RandomSource
from src.connect4.win_lines import WinLine
from src.core.exceptions import (
    DuplicateNameError,
    InsufficientPlayersError,
    InvalidPlayerError,
    InvariantViolationError,
    PlayerNotFoundError,
    SessionAlreadyStartedError,
    SessionNotStartedError,
)
from src.core.models import GameModel, PlayerModel
from src.core.settings import GameSettings
from src.core.shared_types import DropOutcome, Status

logger = logging.getLogger(__name__)

MINIMUM_PLAYERS = 2


@dataclass(frozen=True)
class DropResult:
    """What happened to a single drop. Row and winning line are only known for pieces that actually landed."""

    outcome: DropOutcome
    player_id: Optional[str] = None
    column: Optional[int] = None
    row: Optional[int] = None
    winning_line: Optional[WinLine] = None


@dataclass
class Game:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    settings: GameSettings = field(default_factory=GameSettings)
    rng: RandomSource = field(default_factory=random.Random)
    sleep: Callable[[float], None] = field(default=time.sleep)
    players: list[Player] = field(default_factory=list, init=False)
    board: Board = field(init=False)
    current_player_index: Optional[int] = field(default=None, init=False)
    started: bool = field(default=False, init=False)
    ended: bool = field(default=False, init=False)
    session_token: UUID = field(default_factory=uuid4, init=False)
    winner_id: Optional[str] = field(default=None, init=False)
    winning_line: Optional[WinLine] = field(default=None, init=False)
    last_result: Optional[DropResult] = field(default=None, init=False)

    def __post_init__(self):
        # an empty board is available for rendering before the first start
        self.board = Board.empty(self.settings.width, self.settings.height)

    @classmethod
    def new_session(
        cls,
        width: int,
        height: int,
        thinking_delay: Optional[float] = None,
        rng: Optional[RandomSource] = None,
    ) -> Self:
        """Convenience constructor for a session with the given board dimensions."""
        fields: dict[str, float] = {"width": width, "height": height}
        if thinking_delay is not None:
            fields["thinking_delay"] = thinking_delay
        game = cls(settings=GameSettings(**fields))
        if rng is not None:
            game.rng = rng
        return game

    @property
    def in_progress(self) -> bool:
        return self.started and not self.ended

    @property
    def current_player(self) -> Optional[Player]:
        if self.current_player_index is None or not self.started:
            return None
        return self.players[self.current_player_index]

    @property
    def winner(self) -> Optional[Player]:
        if self.winner_id is None:
            return None
        return self._find_player(self.winner_id)

    @property
    def status(self) -> Status:
        if not self.started:
            return Status.WAITING_FOR_PLAYERS
        if not self.ended:
            return Status.IN_PROGRESS
        return Status.WIN if self.winner_id is not None else Status.TIE

    # --- ROSTER ---
    def add_player(self, player: Player) -> None:
        self._assert_roster_editable()
        if not player.name.strip():
            raise InvalidPlayerError("Player names must not be empty.")
        if any(existing.name == player.name for existing in self.players):
            raise DuplicateNameError(f"Player name {player.name!r} is already taken.")
        if self._find_player(player.id) is not None:
            raise DuplicateNameError(
                f"Player name {player.name!r} maps to id {player.id}, which another player already has."
            )
        self.players.append(player)
        logger.info("Added %s player %s (id %s)", player.kind, player.name, player.id)

    def register_player(self, name: str, color: str, is_automated: bool = False) -> Player:
        """Create the right kind of player and add it to the roster."""
        player = AutomatedPlayer(name, color) if is_automated else Player(name, color)
        self.add_player(player)
        return player

    def remove_player(self, player_id: str) -> Player:
        self._assert_roster_editable()
        player = self._find_player(player_id)
        if player is None:
            raise PlayerNotFoundError(f"No player with id {player_id!r} in this game.")
        self.players.remove(player)
        logger.info("Removed player %s (id %s)", player.name, player_id)
        return player

    # --- GAME FLOW ---
    def start(self) -> None:
        """(Re)start the game: fresh board, random first player.

        If the first player is automated, it (and any automated player after it) moves before this returns.
        """
        if len(self.players) < MINIMUM_PLAYERS:
            raise InsufficientPlayersError(
                f"Need at least {MINIMUM_PLAYERS} players to start, got {len(self.players)}."
            )
        if self.in_progress:
            logger.info("Restarting game in progress, abandoning session %s", self.session_token)

        self.board = Board.empty(self.settings.width, self.settings.height)
        # a new token makes any automated turn still waiting on the previous board stale
        self.session_token = uuid4()
        self.started = True
        self.ended = False
        self.winner_id = None
        self.winning_line = None
        self.last_result = None

        for player in self.players:
            player.new_game(self.settings.width)

        self.current_player_index = self.rng.randrange(len(self.players))
        logger.info(
            "Started %dx%d game %s, %s moves first",
            self.settings.width,
            self.settings.height,
            self.session_token,
            self.players[self.current_player_index].name,
        )
        self._play_automated_turns()

    def drop_piece(self, col: int) -> DropResult:
        """
        Attempt to drop a piece for the player on move.
        ----

        1. game over, or an automated player is on move? --> rejected, nothing happens
        2. column full? --> rejected, nothing happens (try another column)
        3. place the piece and check for the end of the game
        4. game continues? --> next player, and let automated players take their turns
        """
        if not self.started:
            raise SessionNotStartedError("Start the game before dropping pieces.")
        if self.ended:
            return DropResult(DropOutcome.REJECTED, column=col)

        player = self.players[self.current_player_index]
        if player.takes_turns:
            logger.debug("Ignoring drop in column %d: %s is thinking", col, player.name)
            return DropResult(DropOutcome.REJECTED, player.id, col)

        result = self._drop(col)
        if result.outcome == DropOutcome.ACCEPTED:
            self._play_automated_turns()
        return result

    def to_model(self) -> GameModel:
        """Encode into a format the Service layer uses"""
        current = self.current_player
        return GameModel(
            width=self.board.width,
            height=self.board.height,
            board=self.board.snapshot(),
            placed_pieces=[c.as_pair() for c in self.board.placed_pieces],
            players=[
                PlayerModel(id=p.id, name=p.name, color=p.color, kind=p.kind.value)
                for p in self.players
            ],
            current_player=current.id if current else None,
            status=self.status.value,
            winner=self.winner_id,
            winning_line=self._line_pairs(),
        )

    # -- PRIVATE HELPERS ---
    def _find_player(self, player_id: str) -> Optional[Player]:
        return next((p for p in self.players if p.id == player_id), None)

    def _assert_roster_editable(self) -> None:
        """The roster is frozen while a game is being played. Once it ended, players can be changed before restarting."""
        if self.in_progress:
            raise SessionAlreadyStartedError(
                "Cannot change the players while a game is in progress."
            )

    def _is_live(self, token: UUID) -> bool:
        return token == self.session_token and self.in_progress

    def _drop(self, col: int) -> DropResult:
        """Drop for the player on move, without triggering automated turns."""
        player = self.players[self.current_player_index]
        row = self.board.drop_column(col)
        if row is None:
            return DropResult(DropOutcome.REJECTED, player.id, col)

        self.board.place(row, col, player.id)
        evaluation = self.board.evaluate_last_move(row, col, player.id)

        if evaluation.kind == MoveEvaluation.WIN:
            self.winner_id = player.id
            self.winning_line = evaluation.winning_line
            self._end_game()
            logger.info("Player %s has won with line %s", player.name, self._line_pairs())
            result = DropResult(DropOutcome.WIN, player.id, col, row, evaluation.winning_line)
        elif evaluation.kind == MoveEvaluation.TIE:
            self._end_game()
            logger.info("It's a tie!")
            result = DropResult(DropOutcome.TIE, player.id, col, row)
        else:
            self._advance_turn()
            result = DropResult(DropOutcome.ACCEPTED, player.id, col, row)

        self.last_result = result
        return result

    def _end_game(self) -> None:
        self.ended = True

    def _advance_turn(self) -> None:
        """Round-robin over the roster, wrapping around after the last player."""
        self.current_player_index = (self.current_player_index + 1) % len(self.players)
        logger.debug("Current player now: %s", self.players[self.current_player_index].name)

    def _play_automated_turns(self) -> None:
        """Keep going until a human is on move or the game is over."""
        token = self.session_token
        while self._is_live(token):
            player = self.players[self.current_player_index]
            if not player.takes_turns:
                return
            self._take_automated_turn(player, token)

    def _take_automated_turn(self, player: AutomatedPlayer, token: UUID) -> Optional[DropResult]:
        """
        Think, then pick random columns until one accepts the piece.
        ----

        Every rejection removes a (full) column from the candidates, so there are at most as many attempts as columns.
        Running out of candidates cannot happen on a board that is not full (that would have been a tie already).
        """
        self.sleep(self.settings.thinking_delay)
        if not self._is_live(token):
            logger.warning("Abandoning stale turn of %s: the game was restarted or ended", player.name)
            return None

        for _ in range(self.board.width):
            if not player.candidate_columns:
                break
            col = player.choose_column(self.rng)
            result = self._drop(col)
            if result.outcome != DropOutcome.REJECTED:
                return result
            player.discard_column(col)

        raise InvariantViolationError(
            f"{player.name} found no column to play, but the board is not full. Playable columns: {self.board.playable_columns()}"
        )

    def _line_pairs(self) -> Optional[list[tuple[int, int]]]:
        if self.winning_line is None:
            return None
        return [c.as_pair() for c in self.winning_line]
