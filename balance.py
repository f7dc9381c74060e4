"""The solution condition: balanced visitation counts."""

import numpy as np

from path_state import PathState


def row_counts(state: PathState) -> np.ndarray:
    return state.grid().sum(axis=1)


def column_counts(state: PathState) -> np.ndarray:
    return state.grid().sum(axis=0)


def region_counts(state: PathState) -> np.ndarray:
    table = state.table
    return np.bincount(table.region_of[state.marked], minlength=len(table))


def _all_equal(counts: np.ndarray) -> bool:
    return bool(np.all(counts == counts[0]))


def is_balanced(state: PathState) -> bool:
    """Check that rows, columns and regions each hold equal counts.

    Each group is compared against its own first member only; the row,
    column and region targets may differ from one another.
    """
    return (
        _all_equal(row_counts(state))
        and _all_equal(column_counts(state))
        and _all_equal(region_counts(state))
    )
