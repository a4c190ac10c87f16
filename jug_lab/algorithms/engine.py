# jug_lab/algorithms/engine.py
# Graph search over the implicit two-container state space, with a pluggable frontier.
from __future__ import annotations
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional, Tuple, Union

from ..core import config
from ..core.errors import SearchNotSolved
from ..core.frontiers import Frontier, Strategy, make_frontier
from ..core.metrics import MeasuredRun, SearchResult
from ..core.problem import Problem
from ..core.state import PuzzleState
from ..core.utils import reconstruct_path
from ..core.visited import VisitedSet
from ..problems.water_jug import coerce_goal, moves_along, successors

logger = logging.getLogger(__name__)

SuccessorFn = Callable[[PuzzleState], List[PuzzleState]]


class Phase(Enum):
    READY = "ready"
    RUNNING = "running"
    SOLVED = "solved"
    EXHAUSTED = "exhausted"
    CUTOFF = "cutoff"  # expansion cap hit before the space was covered


@dataclass
class SearchSession:
    """Bookkeeping owned by a single run; rebuilt at the start of every run."""
    strategy: Strategy
    frontier: Frontier
    visited: VisitedSet = field(default_factory=VisitedSet)
    found_goal: Optional[PuzzleState] = None
    path: List[PuzzleState] = field(default_factory=list)
    expanded: int = 0
    cutoff: bool = False


class SearchEngine:
    """
    Ready -> Running -> {Solved, Exhausted, Cutoff}.

    Pop a state, skip it if its values were already expanded, stop if it
    matches the goal, otherwise mark it visited and push every successor.
    Duplicates are filtered when popped, not when pushed, so the first
    parent chain popped for a value is the one that is kept.
    """

    def __init__(self, start: PuzzleState,
                 goal: Union[PuzzleState, Tuple[int, int]],
                 successor_fn: SuccessorFn = successors,
                 max_expansions: Optional[int] = config.MAX_EXPANSIONS):
        self.start = start
        self.goal = coerce_goal(start, goal)
        self.successor_fn = successor_fn
        self.max_expansions = max_expansions
        self.phase = Phase.READY
        self.session: Optional[SearchSession] = None

    @classmethod
    def for_problem(cls, problem: Problem, **kwargs) -> "SearchEngine":
        return cls(problem.initial_state(), problem.goal_state(),
                   successor_fn=problem.successors, **kwargs)

    def _reset(self, strategy: Strategy) -> SearchSession:
        self.session = SearchSession(strategy=strategy, frontier=make_frontier(strategy))
        self.phase = Phase.READY
        return self.session

    def find_path_if_exists(self, strategy: Union[Strategy, str] = config.DEFAULT_STRATEGY) -> bool:
        """Run a full search; True if a state equal to the goal was reached."""
        strategy = Strategy.parse(strategy)  # InvalidStrategy before any bookkeeping changes
        session = self._reset(strategy)
        self.phase = Phase.RUNNING
        logger.info("search %s: start=%s goal=%s", strategy.value, self.start, self.goal)

        frontier, visited = session.frontier, session.visited
        frontier.add(self.start)
        while not frontier.is_empty():
            state = frontier.remove()
            if state in visited:
                continue
            if state == self.goal:
                session.found_goal = state
                self.phase = Phase.SOLVED
                logger.info("search %s: solved after %d expansions (depth %d)",
                            strategy.value, session.expanded, state.depth)
                return True
            if self.max_expansions is not None and session.expanded >= self.max_expansions:
                session.cutoff = True
                self.phase = Phase.CUTOFF
                logger.info("search %s: expansion cap %d reached", strategy.value, self.max_expansions)
                return False
            visited.add(state)
            session.expanded += 1
            children = self.successor_fn(state)
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug("expand %s -> %s", state, " ".join(str(c) for c in children))
            for child in children:
                frontier.add(child)

        self.phase = Phase.EXHAUSTED
        logger.info("search %s: no solution (%d states expanded)", strategy.value, session.expanded)
        return False

    def retrieve_path(self) -> List[PuzzleState]:
        """States from start to goal inclusive; only valid once solved."""
        if self.phase is not Phase.SOLVED or self.session is None:
            raise SearchNotSolved(f"no path available: search is {self.phase.value}")
        if not self.session.path:
            self.session.path = reconstruct_path(self.session.found_goal)
        return list(self.session.path)

    def run(self, strategy: Union[Strategy, str] = config.DEFAULT_STRATEGY,
            name: Optional[str] = None) -> SearchResult:
        strategy = Strategy.parse(strategy)
        name = name or strategy.value
        with MeasuredRun() as meter:
            success = self.find_path_if_exists(strategy)
            path = self.retrieve_path() if success else []
        actions = [m.label if m is not None else "?" for m in moves_along(path)]
        return SearchResult(name, success, path, actions, self.session.expanded,
                            meter.elapsed, meter.peak_kb, cutoff=self.session.cutoff)
