# jug_lab/benchmarks/run_all.py
from __future__ import annotations

import json
import os
import time
from pathlib import Path
from typing import Any, Callable, Dict, List, Tuple

from ..algorithms.bfs import breadth_first_search
from ..algorithms.dfs import depth_first_search
from ..core.config import MAX_EXPANSIONS
from ..problems.water_jug import WaterJugProblem

PuzzleSpec = Tuple[int, int, int, int]  # capA, capB, goalA, goalB (start is always 0, 0)

# ---- Tunables (overridable via environment variables) -----------------------
DEFAULT_PUZZLES = "5,3,4,0;3,5,0,4;8,5,4,0;7,5,6,0;9,4,6,0;4,2,1,0"
PUZZLES = os.getenv("JUG_BENCH_PUZZLES", DEFAULT_PUZZLES)

# ---- Helpers ----------------------------------------------------------------
def _fmt_time(x):
    if x is None:
        return "n/a"
    return f"{float(x):.4f}"

def parse_puzzles(raw: str) -> List[PuzzleSpec]:
    """'5,3,4,0;8,5,4,0' -> [(5, 3, 4, 0), (8, 5, 4, 0)]"""
    specs = []
    for chunk in raw.split(";"):
        chunk = chunk.strip()
        if not chunk:
            continue
        parts = [int(p) for p in chunk.split(",")]
        if len(parts) != 4:
            raise ValueError(f"puzzle spec needs capA,capB,goalA,goalB; got {chunk!r}")
        specs.append(tuple(parts))
    return specs

def _load_algos() -> List[Tuple[str, Callable[[Any], Any]]]:
    return [
        ("BFS", lambda p: breadth_first_search(p, max_expansions=MAX_EXPANSIONS)),
        ("DFS", lambda p: depth_first_search(p, max_expansions=MAX_EXPANSIONS)),
    ]

def run(puzzles: List[PuzzleSpec]) -> List[Dict[str, Any]]:
    rows = []
    for cap_a, cap_b, goal_a, goal_b in puzzles:
        problem = WaterJugProblem(cap_a, cap_b, start=(0, 0), goal=(goal_a, goal_b))
        label = f"{cap_a}/{cap_b}->({goal_a},{goal_b})"
        for name, fn in _load_algos():
            print(f"→ Running {name} on {label} ...")
            r = fn(problem)
            print(
                f"  {r.algo}: "
                f"{'OK' if r.success else 'FAIL'} "
                f"moves={r.moves} "
                f"expanded={r.nodes_expanded}, "
                f"time={_fmt_time(r.time_s)}s"
            )
            row = r.to_row()
            row["puzzle"] = label
            rows.append(row)
    return rows

def main():
    rows = run(parse_puzzles(PUZZLES))
    out = {"results": rows, "ts": time.time()}
    print(json.dumps(out, indent=2))

    # Save JSON next to this script
    out_path = Path(__file__).with_name("results.json")
    try:
        out_path.write_text(json.dumps(out, indent=2))
    except OSError as e:
        print(f"Could not write {out_path}: {e}")

if __name__ == "__main__":
    main()
