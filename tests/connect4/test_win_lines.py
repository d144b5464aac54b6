"""Unit tests for /src/connect4/win_lines.py"""

import pytest

from src.connect4.coordinate import Coordinate
from src.connect4.win_lines import (
    DIRECTION_VECTORS,
    WIN_LENGTH,
    Direction,
    compute_win_lines,
    lines_in_direction,
)

WIDTH = 7
HEIGHT = 6
ALL_COORDINATES = [Coordinate(row, col) for row in range(HEIGHT) for col in range(WIDTH)]


def _line(*pairs: tuple[int, int]) -> tuple[Coordinate, ...]:
    return tuple(Coordinate(row, col) for row, col in pairs)


def test_vertical_lines_run_bottom_to_top() -> None:
    """The line starting furthest below the cell comes first."""
    lines = lines_in_direction(Coordinate(2, 0), Direction.VERTICAL, WIDTH, HEIGHT)
    assert lines == [
        _line((5, 0), (4, 0), (3, 0), (2, 0)),
        _line((4, 0), (3, 0), (2, 0), (1, 0)),
        _line((3, 0), (2, 0), (1, 0), (0, 0)),
    ]


def test_horizontal_lines_run_left_to_right() -> None:
    lines = lines_in_direction(Coordinate(5, 1), Direction.HORIZONTAL, WIDTH, HEIGHT)
    assert lines == [
        _line((5, 0), (5, 1), (5, 2), (5, 3)),
        _line((5, 1), (5, 2), (5, 3), (5, 4)),
    ]


def test_diagonal_lines() -> None:
    up_right = lines_in_direction(Coordinate(5, 0), Direction.DIAGONAL_UP_RIGHT, WIDTH, HEIGHT)
    assert up_right == [_line((5, 0), (4, 1), (3, 2), (2, 3))]

    up_left = lines_in_direction(Coordinate(5, 6), Direction.DIAGONAL_UP_LEFT, WIDTH, HEIGHT)
    assert up_left == [_line((5, 6), (4, 5), (3, 4), (2, 3))]


def test_corner_cell() -> None:
    """Top-left corner: one line up, one to the right, one on the up-left diagonal. No room for an up-right diagonal."""
    lines = compute_win_lines(Coordinate(0, 0), WIDTH, HEIGHT)
    assert lines == (
        _line((3, 0), (2, 0), (1, 0), (0, 0)),
        _line((0, 0), (0, 1), (0, 2), (0, 3)),
        _line((3, 3), (2, 2), (1, 1), (0, 0)),
    )


def test_lines_are_grouped_in_direction_order() -> None:
    """Lines of a cell are ordered: vertical, horizontal, diagonal up-right, diagonal up-left"""
    coordinate = Coordinate(3, 3)
    expected = []
    for direction in Direction:
        expected.extend(lines_in_direction(coordinate, direction, WIDTH, HEIGHT))
    assert list(compute_win_lines(coordinate, WIDTH, HEIGHT)) == expected
    assert list(Direction) == [
        Direction.VERTICAL,
        Direction.HORIZONTAL,
        Direction.DIAGONAL_UP_RIGHT,
        Direction.DIAGONAL_UP_LEFT,
    ]


@pytest.mark.parametrize("coordinate", ALL_COORDINATES)
def test_lines_stay_on_the_board(coordinate: Coordinate) -> None:
    for line in compute_win_lines(coordinate, WIDTH, HEIGHT):
        assert len(line) == WIN_LENGTH
        assert coordinate in line
        assert all(c.is_within_bounds(WIDTH, HEIGHT) for c in line)


def test_lines_are_symmetric() -> None:
    """If a line of cell A contains cell B, cell B holds that same line."""
    lines_per_cell = {c: compute_win_lines(c, WIDTH, HEIGHT) for c in ALL_COORDINATES}
    for coordinate, lines in lines_per_cell.items():
        for line in lines:
            for other in line:
                assert line in lines_per_cell[other]


def test_number_of_distinct_lines_on_standard_board() -> None:
    """A 7x6 board has 69 ways to connect four: 21 vertical, 24 horizontal, 12 + 12 diagonal."""
    distinct = {line for c in ALL_COORDINATES for line in compute_win_lines(c, WIDTH, HEIGHT)}
    assert len(distinct) == 69


@pytest.mark.parametrize(
    "width, height, missing",
    [
        (3, 6, [Direction.HORIZONTAL, Direction.DIAGONAL_UP_RIGHT, Direction.DIAGONAL_UP_LEFT]),
        (7, 3, [Direction.VERTICAL, Direction.DIAGONAL_UP_RIGHT, Direction.DIAGONAL_UP_LEFT]),
    ],
)
def test_small_dimensions_yield_no_lines(width: int, height: int, missing: list[Direction]) -> None:
    """Too narrow / too low for a direction: simply no lines in that direction (and no crash)."""
    for row in range(height):
        for col in range(width):
            for direction in missing:
                assert lines_in_direction(Coordinate(row, col), direction, width, height) == []


def test_direction_vectors_point_up_or_right() -> None:
    """Row 0 is the top of the board: no direction should point down."""
    for vector in DIRECTION_VECTORS.values():
        assert vector[0] <= 0
