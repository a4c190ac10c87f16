# jug_lab/algorithms/bfs.py
# Breadth-first search: FIFO frontier, fewest moves when a solution exists.
from __future__ import annotations
from typing import Optional

from ..core.frontiers import Strategy
from ..core.metrics import SearchResult
from ..core.problem import Problem
from .engine import SearchEngine


def breadth_first_search(problem: Problem, max_expansions: Optional[int] = None) -> SearchResult:
    engine = SearchEngine.for_problem(problem, max_expansions=max_expansions)
    return engine.run(Strategy.BFS, name="BFS")
