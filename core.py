"""Core data structures: grid geometry and regions."""

from __future__ import annotations
from dataclasses import dataclass


BOARD_WIDTH = 10
BOARD_HEIGHT = 10

# Fixed enumeration order keeps the search reproducible.
KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (1, 2),
    (1, -2),
    (-1, 2),
    (-1, -2),
    (2, 1),
    (2, -1),
    (-2, 1),
    (-2, -1),
)


@dataclass(frozen=True)
class Pos:
    x: int
    y: int

    def index(self, width: int = BOARD_WIDTH) -> int:
        """Linear index into flat per-cell tables."""
        return self.y * width + self.x

    @staticmethod
    def from_index(i: int, width: int = BOARD_WIDTH) -> Pos:
        return Pos(i % width, i // width)

    def in_bounds(self, width: int = BOARD_WIDTH, height: int = BOARD_HEIGHT) -> bool:
        return 0 <= self.x < width and 0 <= self.y < height

    def offset(self, dx: int, dy: int) -> Pos:
        return Pos(self.x + dx, self.y + dy)


@dataclass(frozen=True)
class Region:
    """A set of positions."""

    cells: frozenset[Pos]
