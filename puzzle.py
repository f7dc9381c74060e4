"""Puzzle input: the region layout and the waypoint hints."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable

from core import BOARD_HEIGHT, BOARD_WIDTH, Pos
from regions import RegionTable


@dataclass(frozen=True)
class Waypoint:
    """The path's head must be at `cell` after `move_number` moves."""

    move_number: int
    cell: Pos


def validate_waypoints(
    waypoints: Iterable[Waypoint],
    width: int = BOARD_WIDTH,
    height: int = BOARD_HEIGHT,
) -> tuple[Waypoint, ...]:
    result = tuple(waypoints)
    if not result:
        raise ValueError("At least one waypoint (the start cell) is required")
    if result[0].move_number != 1:
        raise ValueError(f"First waypoint must be move 1, got {result[0].move_number}")
    for prev, wp in zip(result, result[1:]):
        if wp.move_number <= prev.move_number:
            raise ValueError(
                f"Waypoint move numbers must increase: {prev.move_number} then {wp.move_number}"
            )
    for wp in result:
        if not wp.cell.in_bounds(width, height):
            raise ValueError(
                f"Waypoint at move {wp.move_number} is outside the grid: ({wp.cell.x}, {wp.cell.y})"
            )
    return result


def _cells(*coords: tuple[int, int]) -> tuple[Pos, ...]:
    return tuple(Pos(x, y) for x, y in coords)


PUZZLE_REGIONS: tuple[tuple[Pos, ...], ...] = (
    _cells((0, 0), (1, 0), (2, 0), (3, 0), (3, 1), (0, 1), (0, 2), (0, 3)),
    _cells((0, 4), (0, 5), (0, 6), (0, 7), (0, 8), (0, 9), (1, 5)),
    _cells((1, 1), (1, 2), (2, 1), (1, 3), (1, 4), (2, 3), (2, 4), (3, 4), (3, 5), (4, 4), (5, 4)),
    _cells((2, 5), (2, 6), (1, 6), (1, 7), (1, 8), (2, 8)),
    _cells((1, 9), (2, 9), (3, 9), (4, 9), (3, 8), (3, 7), (3, 6), (2, 7)),
    _cells((2, 2), (3, 2), (4, 2), (5, 2), (6, 2), (3, 3), (4, 3), (5, 3), (6, 3), (7, 3), (6, 4)),
    _cells((4, 0), (5, 0), (6, 0), (7, 0), (8, 0), (9, 0), (4, 1), (5, 1), (6, 1), (7, 1), (8, 1)),
    _cells((9, 1), (9, 2), (9, 3), (8, 2), (7, 2)),
    _cells((8, 3), (8, 4), (8, 5), (9, 4), (9, 5)),
    _cells((5, 5), (6, 5), (7, 5), (7, 4), (7, 6), (7, 7), (8, 6), (9, 6)),
    _cells(
        (9, 9), (8, 9), (7, 9), (9, 8), (8, 8), (7, 8), (6, 8), (9, 7),
        (8, 7), (6, 7), (4, 7), (6, 6), (5, 6), (4, 6), (4, 5),
    ),
    _cells((6, 9), (5, 9), (5, 8), (5, 7), (4, 8)),
)

PUZZLE_WAYPOINTS: tuple[Waypoint, ...] = (
    Waypoint(1, Pos(0, 0)),
    Waypoint(4, Pos(1, 2)),
    Waypoint(7, Pos(5, 3)),
    Waypoint(10, Pos(9, 4)),
    Waypoint(13, Pos(9, 1)),
    Waypoint(16, Pos(5, 4)),
    Waypoint(19, Pos(3, 7)),
    Waypoint(22, Pos(2, 9)),
    Waypoint(25, Pos(2, 8)),
    Waypoint(28, Pos(4, 5)),
    Waypoint(31, Pos(9, 5)),
    Waypoint(34, Pos(8, 5)),
    Waypoint(37, Pos(8, 8)),
    Waypoint(40, Pos(9, 2)),
    Waypoint(43, Pos(6, 0)),
    Waypoint(46, Pos(2, 3)),
    Waypoint(49, Pos(0, 6)),
)


def make_puzzle_table() -> RegionTable:
    return RegionTable.from_cells(PUZZLE_REGIONS)


def puzzle_waypoints() -> tuple[Waypoint, ...]:
    return validate_waypoints(PUZZLE_WAYPOINTS)
