"""Path state: one candidate partial knight path."""

from __future__ import annotations
from dataclasses import dataclass

import numpy as np

from core import Pos
from regions import RegionTable


@dataclass(frozen=True, eq=False)
class PathState:
    """A snapshot of which cells are visited, in what order, ending at `head`.

    States are never mutated. `derive` copies the marked grid so that a parent
    can fan out into many independent children.
    """

    table: RegionTable
    marked: np.ndarray
    head: Pos
    head_region: int
    history: tuple[Pos, ...]

    @staticmethod
    def start(table: RegionTable, cell: Pos = Pos(0, 0)) -> PathState:
        if not cell.in_bounds(table.width, table.height):
            raise ValueError(f"Start cell ({cell.x}, {cell.y}) is outside the grid")
        marked = np.zeros(table.size, dtype=bool)
        marked[cell.index(table.width)] = True
        marked.setflags(write=False)
        return PathState(
            table=table,
            marked=marked,
            head=cell,
            head_region=table.region_id(cell),
            history=(cell,),
        )

    def derive(self, cell: Pos) -> PathState:
        """Return a new state extending this path by one move to `cell`."""
        i = cell.index(self.table.width)
        if self.marked[i]:
            raise ValueError(f"Cell ({cell.x}, {cell.y}) is already visited")
        marked = self.marked.copy()
        marked[i] = True
        marked.setflags(write=False)
        return PathState(
            table=self.table,
            marked=marked,
            head=cell,
            head_region=int(self.table.region_of[i]),
            history=self.history + (cell,),
        )

    @property
    def move_count(self) -> int:
        return len(self.history)

    def is_marked(self, pos: Pos) -> bool:
        return bool(self.marked[pos.index(self.table.width)])

    def region_occupancy(self, region_id: int) -> int:
        """Count the visited cells in a region."""
        return int(np.count_nonzero(self.marked[self.table.cell_indices[region_id]]))

    def grid(self) -> np.ndarray:
        """The marked cells as a (height, width) array, indexed [y, x]."""
        return self.marked.reshape(self.table.height, self.table.width)

    def __repr__(self) -> str:
        return (
            f"PathState(head=({self.head.x}, {self.head.y}), "
            f"head_region={self.head_region}, moves={self.move_count})"
        )
