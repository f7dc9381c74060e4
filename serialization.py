"""JSON serialization for puzzle definitions and search results."""

from __future__ import annotations
from pathlib import Path
from typing import Any, Dict, List
import json

from core import BOARD_HEIGHT, BOARD_WIDTH, Pos, Region
from path_state import PathState
from puzzle import Waypoint, validate_waypoints
from regions import RegionTable
from search import SearchResult


# ===== Basic Types =====


def serialize_pos(pos: Pos) -> Dict[str, int]:
    return {"x": pos.x, "y": pos.y}


def _int_field(data: Dict[str, Any], key: str) -> int:
    value = data[key]
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Field {key!r} must be an integer, got {value!r}")
    return value


def deserialize_pos(data: Dict[str, Any]) -> Pos:
    return Pos(x=_int_field(data, "x"), y=_int_field(data, "y"))


def serialize_region(region: Region) -> Dict[str, List[Dict[str, int]]]:
    cells = sorted(region.cells, key=lambda p: (p.y, p.x))
    return {"cells": [serialize_pos(p) for p in cells]}


def deserialize_region(data: Dict[str, Any]) -> Region:
    cells = frozenset(deserialize_pos(p) for p in data["cells"])
    return Region(cells=cells)


def serialize_waypoint(waypoint: Waypoint) -> Dict[str, Any]:
    return {"move": waypoint.move_number, "cell": serialize_pos(waypoint.cell)}


def deserialize_waypoint(data: Dict[str, Any]) -> Waypoint:
    return Waypoint(move_number=_int_field(data, "move"), cell=deserialize_pos(data["cell"]))


# ===== Puzzle Definitions =====


def serialize_puzzle(table: RegionTable, waypoints: List[Waypoint]) -> Dict[str, Any]:
    return {
        "width": table.width,
        "height": table.height,
        "regions": [serialize_region(r) for r in table.regions],
        "waypoints": [serialize_waypoint(w) for w in waypoints],
    }


def deserialize_puzzle(data: Dict[str, Any]) -> tuple[RegionTable, tuple[Waypoint, ...]]:
    """Build and validate a region table and waypoint list.

    Region cells are passed through as listed so that duplicates are caught.
    `width` and `height` default to the 10x10 board; smaller boards are
    accepted for toy puzzles.
    """
    if not isinstance(data, dict):
        raise ValueError(f"Puzzle definition must be a JSON object, got {type(data).__name__}")
    try:
        width = _int_field(data, "width") if "width" in data else BOARD_WIDTH
        height = _int_field(data, "height") if "height" in data else BOARD_HEIGHT
        regions = [[deserialize_pos(p) for p in r["cells"]] for r in data["regions"]]
        waypoints = [deserialize_waypoint(w) for w in data["waypoints"]]
    except (KeyError, TypeError) as e:
        raise ValueError(f"Malformed puzzle definition: {e!r}") from e
    if width < 1 or height < 1:
        raise ValueError(f"Board must be at least 1x1, got {width}x{height}")
    table = RegionTable.from_cells(regions, width, height)
    return table, validate_waypoints(waypoints, width, height)


def load_puzzle(path: str | Path) -> tuple[RegionTable, tuple[Waypoint, ...]]:
    with open(path) as f:
        return deserialize_puzzle(json.load(f))


# ===== Results =====


def serialize_path_state(state: PathState) -> Dict[str, Any]:
    return {
        "head": serialize_pos(state.head),
        "head_region": state.head_region,
        "history": [serialize_pos(p) for p in state.history],
        "marked": [[int(v) for v in row] for row in state.grid()],
    }


def serialize_result(result: SearchResult) -> Dict[str, Any]:
    return {
        "outcome": result.outcome.name,
        "phase": result.phase,
        "rounds": result.rounds,
        "frontier_size": result.frontier_size,
        "solution": (
            serialize_path_state(result.solution) if result.solution is not None else None
        ),
    }
