# jug_lab/core/frontiers.py
# Work-lists of not-yet-expanded states: FIFO for breadth-first, LIFO for depth-first.
from __future__ import annotations
from abc import ABC, abstractmethod
from collections import deque
from enum import Enum
from typing import Iterator, Union

from . import config
from .errors import InvalidStrategy
from .state import PuzzleState


class Frontier(ABC):
    """Shared contract: add / remove / is_empty / clear.

    remove() and peek() on an empty frontier raise IndexError; callers are
    expected to check is_empty() first.
    """

    @abstractmethod
    def add(self, state: PuzzleState) -> None: ...

    @abstractmethod
    def remove(self) -> PuzzleState: ...

    @abstractmethod
    def peek(self) -> PuzzleState: ...

    @abstractmethod
    def __len__(self) -> int: ...

    @abstractmethod
    def __iter__(self) -> Iterator[PuzzleState]:
        """Iterate in removal order without consuming."""

    def is_empty(self) -> bool:
        return len(self) == 0

    @abstractmethod
    def clear(self) -> None: ...

    def __str__(self) -> str:
        return " ".join(str(s) for s in self)


class FIFOQueue(Frontier):
    def __init__(self):
        self.q = deque()
    def add(self, state): self.q.append(state)
    def remove(self): return self.q.popleft()
    def clear(self): self.q.clear()
    def peek(self):
        if not self.q:
            raise IndexError("peek from an empty queue")
        return self.q[0]
    def __len__(self): return len(self.q)
    def __iter__(self): return iter(self.q)


class LIFOStack(Frontier):
    def __init__(self):
        self.q = []
    def add(self, state): self.q.append(state)
    def remove(self): return self.q.pop()
    def clear(self): self.q.clear()
    def peek(self):
        if not self.q:
            raise IndexError("peek from an empty stack")
        return self.q[-1]
    def __len__(self): return len(self.q)
    def __iter__(self): return reversed(self.q)


class Strategy(Enum):
    BFS = config.BFS
    DFS = config.DFS

    @classmethod
    def parse(cls, token: Union["Strategy", str]) -> "Strategy":
        if isinstance(token, cls):
            return token
        for member in cls:
            if member.value == token:
                return member
        raise InvalidStrategy(token)


def make_frontier(strategy: Union[Strategy, str]) -> Frontier:
    strategy = Strategy.parse(strategy)
    if strategy is Strategy.BFS:
        return FIFOQueue()
    return LIFOStack()
