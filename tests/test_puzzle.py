"""Tests for puzzle input data and validation."""

import pytest

from core import Pos
from puzzle import (
    PUZZLE_REGIONS,
    PUZZLE_WAYPOINTS,
    Waypoint,
    make_puzzle_table,
    puzzle_waypoints,
    validate_waypoints,
)


class TestPuzzleData:
    def test_regions_cover_the_board(self) -> None:
        assert sum(len(r) for r in PUZZLE_REGIONS) == 100
        assert make_puzzle_table().size == 100

    def test_waypoints_start_at_origin(self) -> None:
        assert puzzle_waypoints()[0] == Waypoint(1, Pos(0, 0))

    def test_waypoint_gaps_are_three(self) -> None:
        gaps = {b.move_number - a.move_number for a, b in zip(PUZZLE_WAYPOINTS, PUZZLE_WAYPOINTS[1:])}
        assert gaps == {3}

    def test_second_waypoint(self) -> None:
        assert PUZZLE_WAYPOINTS[1] == Waypoint(4, Pos(1, 2))


class TestValidateWaypoints:
    def test_returns_tuple(self) -> None:
        waypoints = [Waypoint(1, Pos(0, 0)), Waypoint(3, Pos(1, 1))]
        assert validate_waypoints(waypoints) == tuple(waypoints)

    def test_rejects_empty_list(self) -> None:
        with pytest.raises(ValueError, match="At least one"):
            validate_waypoints([])

    def test_rejects_first_move_other_than_one(self) -> None:
        with pytest.raises(ValueError, match="move 1"):
            validate_waypoints([Waypoint(2, Pos(0, 0))])

    def test_rejects_non_increasing_move_numbers(self) -> None:
        with pytest.raises(ValueError, match="increase"):
            validate_waypoints([Waypoint(1, Pos(0, 0)), Waypoint(4, Pos(1, 2)), Waypoint(4, Pos(2, 1))])

    def test_rejects_cells_outside_grid(self) -> None:
        with pytest.raises(ValueError, match="outside"):
            validate_waypoints([Waypoint(1, Pos(0, 0)), Waypoint(4, Pos(0, 10))])

    def test_respects_custom_grid_size(self) -> None:
        with pytest.raises(ValueError, match="outside"):
            validate_waypoints([Waypoint(1, Pos(3, 0))], width=3, height=3)
