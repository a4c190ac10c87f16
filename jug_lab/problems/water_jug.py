# jug_lab/problems/water_jug.py
from __future__ import annotations
from enum import Enum
from math import gcd
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from ..core.container import Container
from ..core.problem import Problem
from ..core.state import PuzzleState

Amounts = Tuple[int, int]


class Move(Enum):
    """The six transition rules, in reference emission order."""
    FILL_A = "Fill A"
    FILL_B = "Fill B"
    EMPTY_A = "Empty A"
    EMPTY_B = "Empty B"
    POUR_A_B = "Pour A->B"
    POUR_B_A = "Pour B->A"

    @property
    def label(self) -> str:
        return self.value


def _pour(src: Container, dst: Container) -> Tuple[Container, Container]:
    transfer = min(src.current_amount, dst.room)
    return (src.with_amount(src.current_amount - transfer),
            dst.with_amount(dst.current_amount + transfer))


def apply_move(state: PuzzleState, move: Move) -> PuzzleState:
    """New state produced by `move` from `state`; its parent is `state`."""
    a, b = state.container_a, state.container_b
    if move is Move.FILL_A:
        a = a.filled()
    elif move is Move.FILL_B:
        b = b.filled()
    elif move is Move.EMPTY_A:
        a = a.emptied()
    elif move is Move.EMPTY_B:
        b = b.emptied()
    elif move is Move.POUR_A_B:
        a, b = _pour(a, b)
    elif move is Move.POUR_B_A:
        b, a = _pour(b, a)
    else:
        raise ValueError(f"unknown move {move!r}")
    return PuzzleState(a, b, parent=state)


def labelled_successors(state: PuzzleState) -> List[Tuple[Move, PuzzleState]]:
    """
    Apply every rule to `state` (never chained) and drop the candidates whose
    values equal `state`: a move that changes nothing is not a move.
    """
    out = []
    for move in Move:
        nxt = apply_move(state, move)
        if nxt != state:
            out.append((move, nxt))
    return out


def successors(state: PuzzleState) -> List[PuzzleState]:
    return [s for _, s in labelled_successors(state)]


def classify_move(prev: PuzzleState, nxt: PuzzleState) -> Optional[Move]:
    """First rule that turns `prev` into `nxt` (by value), or None."""
    for move, candidate in labelled_successors(prev):
        if candidate == nxt:
            return move
    return None


def moves_along(path: Sequence[PuzzleState]) -> List[Optional[Move]]:
    return [classify_move(p, n) for p, n in zip(path, path[1:])]


class WaterJugProblem(Problem):
    """
    Two-container measuring puzzle.

    - State: PuzzleState (two Containers + parent link)
    - ACTIONS(s): the Moves that change s, in reference order
    - RESULT(s,a): apply_move(s, a)
    - IS-GOAL(s): container values equal the goal's
    """
    def __init__(self, capacity_a: int, capacity_b: int,
                 start: Amounts = (0, 0),
                 goal: Union[Amounts, PuzzleState] = (0, 0)):
        self._start = PuzzleState.from_amounts(capacity_a, capacity_b, *start)
        self._goal = coerce_goal(self._start, goal)

    @property
    def capacities(self) -> Amounts:
        return self._start.capacities

    def initial_state(self) -> PuzzleState:
        return self._start

    def goal_state(self) -> PuzzleState:
        return self._goal

    def is_goal(self, state: PuzzleState) -> bool:
        return state == self._goal

    def actions(self, state: PuzzleState) -> Iterable[Move]:
        return [m for m, _ in labelled_successors(state)]

    def result(self, state: PuzzleState, action: Move) -> PuzzleState:
        return apply_move(state, action)

    def successors(self, state: PuzzleState) -> List[PuzzleState]:
        return successors(state)

    def reachable_from_empty(self) -> bool:
        """
        Closed-form check of whether the goal can be reached from (0, 0).

        Every move leaves one container empty or full, and all reachable
        amounts are multiples of gcd(capA, capB). Both containers can always
        be emptied, so True also means the goal is reachable from any start;
        False is only conclusive when the start is (0, 0) itself.
        """
        ca, cb = self.capacities
        ga, gb = self._goal.amounts
        g = gcd(ca, cb)
        if g == 0:
            return (ga, gb) == (0, 0)
        if ga % g or gb % g:
            return False
        return ga in (0, ca) or gb in (0, cb)

    def __repr__(self) -> str:
        ca, cb = self.capacities
        return (f"WaterJugProblem(capacities=({ca}, {cb}), "
                f"start={self._start.amounts}, goal={self._goal.amounts})")


def coerce_goal(start: PuzzleState, goal: Union[Amounts, PuzzleState]) -> PuzzleState:
    """Bare (amtA, amtB) goals take the start state's capacities; a goal's parent is dropped."""
    if isinstance(goal, PuzzleState):
        return PuzzleState(goal.container_a, goal.container_b)
    ca, cb = start.capacities
    amt_a, amt_b = goal
    return PuzzleState.from_amounts(ca, cb, amt_a, amt_b)


def water_jug_problem(capacity_a: int = 5, capacity_b: int = 3,
                      start: Amounts = (0, 0), goal: Amounts = (4, 0)) -> WaterJugProblem:
    """Factory for a ready-to-use puzzle (defaults: the 5/3 measure-four puzzle)."""
    return WaterJugProblem(capacity_a, capacity_b, start=start, goal=goal)
