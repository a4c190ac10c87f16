# jug_lab/core/state.py
# A snapshot of both containers, linked to the state it was generated from.
from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .container import Container


@dataclass(frozen=True)
class PuzzleState:
    """
    Search-tree node for the two-container puzzle.

    Equality and hashing use the containers only; `parent` is the back-link
    used for path reconstruction and is ignored when comparing, so the same
    values reached along two different routes are the same state.
    """
    container_a: Container
    container_b: Container
    parent: Optional["PuzzleState"] = field(default=None, compare=False, repr=False)

    @classmethod
    def create(cls, container_a: Container, container_b: Container,
               parent: Optional["PuzzleState"] = None) -> "PuzzleState":
        return cls(container_a, container_b, parent)

    @classmethod
    def from_amounts(cls, capacity_a: int, capacity_b: int,
                     amount_a: int = 0, amount_b: int = 0) -> "PuzzleState":
        return cls(Container(capacity_a, amount_a), Container(capacity_b, amount_b))

    @property
    def amounts(self) -> Tuple[int, int]:
        return self.container_a.current_amount, self.container_b.current_amount

    @property
    def capacities(self) -> Tuple[int, int]:
        return self.container_a.capacity, self.container_b.capacity

    @property
    def depth(self) -> int:
        d, cur = 0, self.parent
        while cur is not None:
            d += 1
            cur = cur.parent
        return d

    def equals(self, other: "PuzzleState") -> bool:
        return self == other

    def path(self) -> List["PuzzleState"]:
        """States from the root of this state's tree down to self, inclusive."""
        from .utils import reconstruct_path
        return reconstruct_path(self)

    def __str__(self) -> str:
        return f"({self.container_a}, {self.container_b})"
