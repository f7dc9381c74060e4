"""Frontier search: breadth-first expansion of path states in lock-step."""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterator, Sequence

from balance import is_balanced
from core import Pos
from moves import legal_moves
from path_state import PathState
from puzzle import Waypoint, validate_waypoints
from regions import RegionTable


Frontier = list[PathState]
RoundCallback = Callable[[str, int, int], None]


class FrontierLimitError(RuntimeError):
    """Raised when an expansion would grow the frontier past its cap."""

    def __init__(self, size: int, limit: int) -> None:
        super().__init__(f"Frontier grew to {size} states (limit {limit})")
        self.size = size
        self.limit = limit


@dataclass(frozen=True)
class SearchConfig:
    """Caps on the search. None means unlimited."""

    max_unguided_rounds: int | None = None
    max_frontier: int | None = None


class Outcome(Enum):
    SOLVED = "SOLVED"
    EXHAUSTED = "EXHAUSTED"
    LIMIT_REACHED = "LIMIT_REACHED"


@dataclass
class SearchResult:
    outcome: Outcome
    solution: PathState | None
    phase: str
    rounds: int
    frontier_size: int

    @property
    def solved(self) -> bool:
        return self.outcome == Outcome.SOLVED


def expand(frontier: Sequence[PathState], max_size: int | None = None) -> Frontier:
    """Replace every state with all of its one-move children."""
    children: Frontier = []
    for state in frontier:
        for move in legal_moves(state):
            children.append(state.derive(move))
        if max_size is not None and len(children) > max_size:
            raise FrontierLimitError(len(children), max_size)
    return children


def advance_to(
    frontier: Sequence[PathState],
    target: Pos,
    moves_remaining: int,
    max_size: int | None = None,
) -> Frontier:
    """Expand exactly `moves_remaining` times, keeping states whose head is `target`.

    An empty result means no path in the frontier reaches the waypoint in that
    many moves.
    """
    if moves_remaining < 0:
        raise ValueError(f"moves_remaining must be non-negative, got {moves_remaining}")
    states = list(frontier)
    for _ in range(moves_remaining):
        if not states:
            break
        states = expand(states, max_size)
    return [state for state in states if state.head == target]


def unguided_rounds(
    frontier: Sequence[PathState], max_size: int | None = None
) -> Iterator[Frontier]:
    """Yield each successive one-move expansion until the frontier dies out."""
    states = list(frontier)
    while states:
        states = expand(states, max_size)
        yield states


def _first_balanced(frontier: Sequence[PathState]) -> PathState | None:
    for state in frontier:
        if is_balanced(state):
            return state
    return None


def solve(
    table: RegionTable,
    waypoints: Sequence[Waypoint],
    config: SearchConfig | None = None,
    on_round: RoundCallback | None = None,
) -> SearchResult:
    """Follow the waypoints, then search unguided until a balanced path appears.

    The path starts at the first waypoint's cell. Once a waypoint has been
    reached the search never backtracks past it.
    """
    waypoints = validate_waypoints(waypoints, table.width, table.height)
    if config is None:
        config = SearchConfig()
    frontier: Frontier = [PathState.start(table, waypoints[0].cell)]
    rounds = 0

    def report(phase: str, n: int) -> None:
        if on_round is not None:
            on_round(phase, n, len(frontier))

    for i, (prev, waypoint) in enumerate(zip(waypoints, waypoints[1:]), start=1):
        try:
            frontier = advance_to(
                frontier,
                waypoint.cell,
                waypoint.move_number - prev.move_number,
                config.max_frontier,
            )
        except FrontierLimitError as e:
            return SearchResult(Outcome.LIMIT_REACHED, None, "guided", rounds, e.size)
        rounds += waypoint.move_number - prev.move_number
        report("guided", i)

        solution = _first_balanced(frontier)
        if solution is not None:
            return SearchResult(Outcome.SOLVED, solution, "guided", rounds, len(frontier))
        if not frontier:
            return SearchResult(Outcome.EXHAUSTED, None, "guided", rounds, 0)

    unguided = 0
    try:
        for frontier in unguided_rounds(frontier, config.max_frontier):
            rounds += 1
            unguided += 1
            report("unguided", unguided)

            solution = _first_balanced(frontier)
            if solution is not None:
                return SearchResult(Outcome.SOLVED, solution, "unguided", rounds, len(frontier))
            if frontier and config.max_unguided_rounds is not None and unguided >= config.max_unguided_rounds:
                return SearchResult(Outcome.LIMIT_REACHED, None, "unguided", rounds, len(frontier))
    except FrontierLimitError as e:
        return SearchResult(Outcome.LIMIT_REACHED, None, "unguided", rounds, e.size)

    return SearchResult(Outcome.EXHAUSTED, None, "unguided", rounds, 0)
