"""The region table: a validated partition of the grid into regions."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Sequence

import numpy as np

from core import BOARD_HEIGHT, BOARD_WIDTH, Pos, Region


@dataclass(frozen=True, eq=False)
class RegionTable:
    """Ordered regions plus a flat cell -> region id lookup.

    Built once and shared read-only by every path state of a search.
    """

    regions: tuple[Region, ...]
    width: int
    height: int
    region_of: np.ndarray
    cell_indices: tuple[np.ndarray, ...]

    @staticmethod
    def from_cells(
        regions: Iterable[Iterable[Pos]],
        width: int = BOARD_WIDTH,
        height: int = BOARD_HEIGHT,
    ) -> RegionTable:
        """Build a table from ordered cell lists, rejecting anything that isn't a partition."""
        region_of = np.full(width * height, -1, dtype=np.int64)
        built: list[Region] = []
        for region_id, region_cells in enumerate(regions):
            cells = list(region_cells)
            if not cells:
                raise ValueError(f"Region {region_id} is empty")
            for cell in cells:
                if not cell.in_bounds(width, height):
                    raise ValueError(
                        f"Region {region_id} has cell ({cell.x}, {cell.y}) outside the {width}x{height} grid"
                    )
                i = cell.index(width)
                if region_of[i] == region_id:
                    raise ValueError(f"Cell ({cell.x}, {cell.y}) is listed twice in region {region_id}")
                if region_of[i] != -1:
                    raise ValueError(
                        f"Cell ({cell.x}, {cell.y}) is in region {region_of[i]} and region {region_id}"
                    )
                region_of[i] = region_id
            built.append(Region(frozenset(cells)))

        uncovered = [Pos.from_index(int(i), width) for i in np.flatnonzero(region_of == -1)]
        if uncovered:
            raise ValueError(
                f"{len(uncovered)} cells belong to no region, first is ({uncovered[0].x}, {uncovered[0].y})"
            )

        region_of.setflags(write=False)
        cell_indices = []
        for region_id in range(len(built)):
            indices = np.flatnonzero(region_of == region_id)
            indices.setflags(write=False)
            cell_indices.append(indices)

        return RegionTable(
            regions=tuple(built),
            width=width,
            height=height,
            region_of=region_of,
            cell_indices=tuple(cell_indices),
        )

    def __len__(self) -> int:
        return len(self.regions)

    @property
    def size(self) -> int:
        return self.width * self.height

    def region_id(self, pos: Pos) -> int:
        return int(self.region_of[pos.index(self.width)])

    def relabeled(self, order: Sequence[int]) -> RegionTable:
        """Return a table with the same regions listed in `order`."""
        if sorted(order) != list(range(len(self.regions))):
            raise ValueError(f"Not a permutation of {len(self.regions)} regions: {list(order)}")
        return RegionTable.from_cells(
            [self.regions[i].cells for i in order], self.width, self.height
        )
