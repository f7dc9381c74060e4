"""Plain-text renderings of boards and region maps."""

from __future__ import annotations
import string

from path_state import PathState
from regions import RegionTable


REGION_SIGILS = string.ascii_uppercase


def render_marks(state: PathState) -> str:
    lines = [f"board - current region: {state.head_region}"]
    for row in state.grid():
        lines.append(" ".join("1" if v else "0" for v in row))
    return "\n".join(lines)


def render_move_numbers(state: PathState) -> str:
    """Board with the 1-based move number in each visited cell, 0 elsewhere."""
    table = state.table
    numbers = [0] * table.size
    for move, pos in enumerate(state.history, start=1):
        numbers[pos.index(table.width)] = move
    cell_width = len(str(len(state.history)))
    lines = [f"board - current region: {state.head_region}"]
    for y in range(table.height):
        row = numbers[y * table.width:(y + 1) * table.width]
        lines.append(" ".join(str(n).rjust(cell_width) for n in row))
    return "\n".join(lines)


def render_regions(table: RegionTable) -> str:
    if len(table) > len(REGION_SIGILS):
        raise ValueError(f"Can only label {len(REGION_SIGILS)} regions, got {len(table)}")
    lines = []
    for y in range(table.height):
        row = table.region_of[y * table.width:(y + 1) * table.width]
        lines.append(" ".join(REGION_SIGILS[r] for r in row))
    return "\n".join(lines)
