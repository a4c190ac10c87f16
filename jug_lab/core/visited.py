# jug_lab/core/visited.py
from __future__ import annotations
from typing import List, Set, Tuple

from .state import PuzzleState


class VisitedSet:
    """States already expanded, keyed by container values (never by parent)."""

    def __init__(self):
        self._keys: Set[Tuple[int, int, int, int]] = set()
        self.processed: List[PuzzleState] = []  # expansion order

    @staticmethod
    def _key(state: PuzzleState) -> Tuple[int, int, int, int]:
        a, b = state.container_a, state.container_b
        return a.capacity, a.current_amount, b.capacity, b.current_amount

    def add(self, state: PuzzleState) -> None:
        k = self._key(state)
        if k not in self._keys:
            self._keys.add(k)
            self.processed.append(state)

    def __contains__(self, state: PuzzleState) -> bool:
        return self._key(state) in self._keys

    def __len__(self) -> int:
        return len(self._keys)

    def clear(self) -> None:
        self._keys.clear()
        self.processed.clear()
