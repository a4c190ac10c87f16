# jug_lab/algorithms/dfs.py
# Depth-first search: LIFO frontier. Terminates on finite capacities because every
# value is expanded at most once, but the path found need not be the shortest.
from __future__ import annotations
from typing import Optional

from ..core.frontiers import Strategy
from ..core.metrics import SearchResult
from ..core.problem import Problem
from .engine import SearchEngine


def depth_first_search(problem: Problem, max_expansions: Optional[int] = None) -> SearchResult:
    engine = SearchEngine.for_problem(problem, max_expansions=max_expansions)
    return engine.run(Strategy.DFS, name="DFS")
