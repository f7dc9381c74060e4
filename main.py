#!/usr/bin/env python3
"""Command-line entry point: solve the knight balance puzzle."""

from __future__ import annotations
import argparse
import json
import sys
import time

from puzzle import make_puzzle_table, puzzle_waypoints
from render import render_marks, render_move_numbers, render_regions
from search import SearchConfig, SearchResult, solve
from serialization import load_puzzle, serialize_result


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments for the search."""
    parser = argparse.ArgumentParser(description="Knight path balance solver")
    parser.add_argument(
        "--puzzle",
        type=str,
        default=None,
        help="JSON puzzle definition (default: built-in puzzle)",
    )
    parser.add_argument(
        "--max-rounds",
        type=int,
        default=None,
        help="Stop after this many unguided rounds (default: unlimited)",
    )
    parser.add_argument(
        "--max-frontier",
        type=int,
        default=None,
        help="Stop if the frontier grows past this many states (default: unlimited)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON",
    )
    parser.add_argument(
        "--show-regions",
        action="store_true",
        help="Print the region map before searching",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Don't print per-round progress",
    )

    args = parser.parse_args(argv)

    if args.max_rounds is not None and args.max_rounds < 1:
        parser.error("--max-rounds must be at least 1")
    if args.max_frontier is not None and args.max_frontier < 1:
        parser.error("--max-frontier must be at least 1")
    if args.puzzle is not None:
        try:
            args.table, args.waypoints = load_puzzle(args.puzzle)
        except (OSError, ValueError) as e:
            parser.error(f"can't load puzzle {args.puzzle}: {e}")
    else:
        args.table, args.waypoints = make_puzzle_table(), puzzle_waypoints()

    return args


def config_from_args(args: argparse.Namespace) -> SearchConfig:
    return SearchConfig(
        max_unguided_rounds=args.max_rounds,
        max_frontier=args.max_frontier,
    )


def print_progress(phase: str, round_number: int, frontier_size: int) -> None:
    if phase == "guided":
        print(f"guided: waypoint {round_number}     frontier: {frontier_size}")
    else:
        print(f"unguided: {round_number}     frontier: {frontier_size}")


def report(result: SearchResult, elapsed: float) -> None:
    if result.solution is None:
        print(f"no solution: {result.outcome.name} after {result.rounds} moves ({elapsed:.2f}s)")
        return
    print(f"bingo! found in {result.phase} phase after {result.rounds} moves ({elapsed:.2f}s)")
    print(render_marks(result.solution))
    print(render_move_numbers(result.solution))


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    if args.show_regions:
        print(render_regions(args.table))

    start = time.monotonic()
    result = solve(
        args.table,
        args.waypoints,
        config=config_from_args(args),
        on_round=None if args.quiet or args.json else print_progress,
    )
    elapsed = time.monotonic() - start

    if args.json:
        print(json.dumps(serialize_result(result), indent=2))
    else:
        report(result, elapsed)

    return 0 if result.solved else 1


if __name__ == "__main__":
    sys.exit(main())
