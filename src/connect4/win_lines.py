"""
Geometry of winning lines

Key idea: every line of four that could ever win the game is known as soon as the board dimensions are known.
So each cell gets the (immutable) list of lines running through it once, when the board is created.
Checking for a win afterwards only needs to look at the lines of the cell that was just played.
"""

from enum import Enum

from src.connect4.coordinate import Coordinate

# Number of pieces in a row needed to win
WIN_LENGTH = 4

Vector = tuple[int, int]
WinLine = tuple[Coordinate, ...]


class Direction(Enum):
    """The four canonical directions. Order of the members is the order in which lines are evaluated."""

    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"
    DIAGONAL_UP_RIGHT = "diagonal up-right"
    DIAGONAL_UP_LEFT = "diagonal up-left"


# (row, col) step from one coordinate of a line to the next.
# NOTE row 0 is the top of the board, so "up" means decreasing the row index.
DIRECTION_VECTORS: dict[Direction, Vector] = {
    Direction.VERTICAL: (-1, 0),  # bottom to top
    Direction.HORIZONTAL: (0, 1),  # left to right
    Direction.DIAGONAL_UP_RIGHT: (-1, 1),  # starting from the lower-left end
    Direction.DIAGONAL_UP_LEFT: (-1, -1),  # starting from the lower-right end
}


def lines_in_direction(
    coordinate: Coordinate, direction: Direction, width: int, height: int
) -> list[WinLine]:
    """All lines of WIN_LENGTH in one direction that contain the coordinate and lie entirely on the board.

    The coordinate can be at any position within the line. Lines are ordered by where they start:
    the one starting furthest 'behind' the coordinate comes first.
    """
    vector = DIRECTION_VECTORS[direction]
    lines: list[WinLine] = []
    for position in range(WIN_LENGTH - 1, -1, -1):
        start = coordinate.shift(vector, -position)
        line = tuple(start.shift(vector, step) for step in range(WIN_LENGTH))
        if all(c.is_within_bounds(width, height) for c in line):
            lines.append(line)
    return lines


def compute_win_lines(coordinate: Coordinate, width: int, height: int) -> tuple[WinLine, ...]:
    """Every potential winning line through a cell, grouped by direction in the order of Direction.

    A dimension smaller than WIN_LENGTH simply produces no lines for the directions that need it.
    """
    lines: list[WinLine] = []
    for direction in Direction:
        lines.extend(lines_in_direction(coordinate, direction, width, height))
    return tuple(lines)
