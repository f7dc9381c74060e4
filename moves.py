"""Knight move generation under the region rules."""

from __future__ import annotations

from core import KNIGHT_OFFSETS, Pos
from path_state import PathState


# A region accepts no further entries once it holds this many visited cells.
REGION_CAPACITY = 5


def knight_targets(pos: Pos, width: int, height: int) -> list[Pos]:
    """All in-bounds knight jumps from `pos`, in offset order."""
    targets = [pos.offset(dx, dy) for dx, dy in KNIGHT_OFFSETS]
    return [t for t in targets if t.in_bounds(width, height)]


def is_legal_move(state: PathState, pos: Pos) -> bool:
    table = state.table
    if not pos.in_bounds(table.width, table.height):
        return False
    if state.is_marked(pos):
        return False
    region_id = table.region_id(pos)
    if region_id == state.head_region:
        return False
    return state.region_occupancy(region_id) < REGION_CAPACITY


def legal_moves(state: PathState) -> list[Pos]:
    """Cells the path may jump to next from its head."""
    table = state.table
    return [
        target
        for target in knight_targets(state.head, table.width, table.height)
        if is_legal_move(state, target)
    ]
