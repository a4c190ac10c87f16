# Defines the interface the search engine expects from a puzzle (start, goal, moves).
# jug_lab/core/problem.py
from __future__ import annotations
from typing import Hashable, Iterable, List, Protocol

from .state import PuzzleState

Action = Hashable


class Problem(Protocol):
    """State-space view of a puzzle: states are generated lazily from the start."""
    def initial_state(self) -> PuzzleState: ...
    def goal_state(self) -> PuzzleState: ...
    def is_goal(self, s: PuzzleState) -> bool: ...
    def actions(self, s: PuzzleState) -> Iterable[Action]: ...
    def result(self, s: PuzzleState, a: Action) -> PuzzleState: ...
    # Successors with no-op moves already removed, in a fixed order
    def successors(self, s: PuzzleState) -> List[PuzzleState]: ...
