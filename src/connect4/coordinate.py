"""
A coordinate on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Coordinate:
    """Row 0 is the top row, column 0 the leftmost column."""

    row: int
    col: int

    def shift(self, vector: tuple[int, int], steps: int = 1) -> Coordinate:
        return Coordinate(self.row + vector[0] * steps, self.col + vector[1] * steps)

    def is_within_bounds(self, width: int, height: int) -> bool:
        return (0 <= self.row < height) and (0 <= self.col < width)

    def as_pair(self) -> tuple[int, int]:
        return (self.row, self.col)
