"""The Game board implements all rules that affect the grid: gravity, landing rows, and detecting a win or a tie."""

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional, Self

from src.connect4.coordinate import Coordinate
from src.connect4.win_lines import WinLine, compute_win_lines
from src.core.exceptions import InvalidBoardError, InvalidMoveError

logger = logging.getLogger(__name__)

Occupant = Optional[str]


@dataclass
class Cell:
    """Single slot of the grid: who occupies it, and which lines of four run through it."""

    win_lines: tuple[WinLine, ...] = ()
    occupant: Occupant = None

    @property
    def is_empty(self) -> bool:
        return self.occupant is None


class MoveEvaluation(Enum):
    CONTINUE = auto()
    WIN = auto()
    TIE = auto()


@dataclass(frozen=True)
class Evaluation:
    """Result of checking the last move. The winning line is only set for a win."""

    kind: MoveEvaluation
    winning_line: Optional[WinLine] = None


@dataclass
class Board:
    width: int
    height: int
    cells: dict[Coordinate, Cell] = field(default_factory=dict)
    placed_pieces: list[Coordinate] = field(default_factory=list)

    @classmethod
    def empty(cls, width: int, height: int) -> Self:
        """Two phases: allocate all (empty) cells first, then attach the winning lines to each one of them."""
        if width < 1 or height < 1:
            raise InvalidBoardError(
                f"Board needs at least one row and one column, got {width=} and {height=}."
            )
        board = cls(width, height)
        board._allocate_cells()
        board._populate_win_lines()
        logger.debug("Created empty %dx%d board", width, height)
        return board

    def _allocate_cells(self) -> None:
        for row in range(self.height):
            for col in range(self.width):
                self.cells[Coordinate(row, col)] = Cell()

    def _populate_win_lines(self) -> None:
        for coordinate, cell in self.cells.items():
            cell.win_lines = compute_win_lines(coordinate, self.width, self.height)

    # --- QUERIES ---
    def cell(self, coordinate: Coordinate) -> Cell:
        return self.cells[coordinate]

    def occupant(self, row: int, col: int) -> Occupant:
        return self.cells[Coordinate(row, col)].occupant

    def is_column_full(self, col: int) -> bool:
        """Gravity fills a column from the bottom, so only the top cell needs to be checked."""
        self._assert_column_exists(col)
        return not self.cells[Coordinate(0, col)].is_empty

    def playable_columns(self) -> list[int]:
        return [col for col in range(self.width) if not self.is_column_full(col)]

    def is_full(self) -> bool:
        """A full top row implies a full board (see is_column_full)."""
        return all(not self.cells[Coordinate(0, col)].is_empty for col in range(self.width))

    def snapshot(self) -> list[list[Occupant]]:
        """Grid of occupants, top row first. Used for rendering."""
        return [
            [self.cells[Coordinate(row, col)].occupant for col in range(self.width)]
            for row in range(self.height)
        ]

    # --- MOVES ---
    def drop_column(self, col: int) -> Optional[int]:
        """Row in which a piece dropped into the column would land, or None when the column is full.

        Scans the column top to bottom: the piece lands right above the first occupied cell, or on the bottom row if there is none.
        Does not change the board.
        """
        if self.is_column_full(col):
            logger.debug("Column %d is full", col)
            return None

        for row in range(self.height):
            if not self.cells[Coordinate(row, col)].is_empty:
                return row - 1
        return self.height - 1

    def place(self, row: int, col: int, player_id: str) -> None:
        """Occupy the cell and record it in the log of placed pieces. Does not check for a win."""
        coordinate = Coordinate(row, col)
        self.cells[coordinate].occupant = player_id
        self.placed_pieces.append(coordinate)
        logger.debug("Player %s placed a piece at %s", player_id, coordinate.as_pair())

    def evaluate_last_move(self, row: int, col: int, player_id: str) -> Evaluation:
        """Only the piece just played can complete a new line, so only the lines through that cell are checked.

        NOTE the tie check comes after the win check: a last piece that fills the board and connects four is a win.
        """
        for line in self.cells[Coordinate(row, col)].win_lines:
            if all(self.cells[c].occupant == player_id for c in line):
                return Evaluation(MoveEvaluation.WIN, line)

        if self.is_full():
            return Evaluation(MoveEvaluation.TIE)
        return Evaluation(MoveEvaluation.CONTINUE)

    def _assert_column_exists(self, col: int) -> None:
        if not 0 <= col < self.width:
            raise InvalidMoveError(
                f"Column {col} does not exist. Pick one from 0 to {self.width - 1}."
            )
