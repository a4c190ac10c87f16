# jug_lab/solve.py
# Solve one two-container puzzle from the command line and print the move trace.
from __future__ import annotations
import argparse
import logging
from typing import List, Optional

from .algorithms.engine import SearchEngine
from .core import config
from .core.errors import JugLabError
from .core.state import PuzzleState
from .problems.water_jug import moves_along


def format_trace(path: List[PuzzleState]) -> List[str]:
    """One line per state: step number, move that produced it, amounts."""
    lines = [f"{0:>4}  {'Start':<10} {path[0]}"]
    for i, (state, move) in enumerate(zip(path[1:], moves_along(path)), start=1):
        label = move.label if move is not None else "?"
        lines.append(f"{i:>4}  {label:<10} {state}")
    return lines


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Two-container (water jug) puzzle solver.")
    ap.add_argument("--capacities", type=int, nargs=2, metavar=("A", "B"), required=True,
                    help="capacity of container A and container B")
    ap.add_argument("--start", type=int, nargs=2, metavar=("A", "B"), default=[0, 0],
                    help="starting amounts (default: 0 0)")
    ap.add_argument("--goal", type=int, nargs=2, metavar=("A", "B"), required=True,
                    help="desired amounts")
    ap.add_argument("--strategy", default=config.DEFAULT_STRATEGY,
                    help=f"{config.BFS} (fewest moves) or {config.DFS} (default: %(default)s)")
    ap.add_argument("--max-expansions", type=int, default=config.MAX_EXPANSIONS,
                    help="stop after expanding this many states (default: unlimited)")
    ap.add_argument("--verbose", action="store_true", help="log every expansion")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        cap_a, cap_b = args.capacities
        start = PuzzleState.from_amounts(cap_a, cap_b, *args.start)
        engine = SearchEngine(start, tuple(args.goal), max_expansions=args.max_expansions)
        result = engine.run(args.strategy)
    except JugLabError as e:
        ap.error(str(e))

    if result.cutoff:
        print(f"Search stopped after {result.nodes_expanded} expansions (limit reached).")
        return 3
    if not result.success:
        print("No solution.")
        return 1
    print(f"{result.algo}: {result.moves} moves, {result.nodes_expanded} states expanded")
    for line in format_trace(result.path):
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
