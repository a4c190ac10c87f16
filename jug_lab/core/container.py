# jug_lab/core/container.py
# One vessel: a fixed capacity and the amount currently in it.
from __future__ import annotations
from dataclasses import dataclass

from .errors import InvalidContainer


def _is_int(x) -> bool:
    return isinstance(x, int) and not isinstance(x, bool)


@dataclass(frozen=True)
class Container:
    """
    Immutable capacity/current-fill value.

    Construction fails with InvalidContainer unless both fields are integers
    and 0 <= current_amount <= capacity. Every transformation returns a new
    Container; equality compares capacity and current_amount.
    """
    capacity: int
    current_amount: int = 0

    def __post_init__(self):
        c, a = self.capacity, self.current_amount
        if not (_is_int(c) and _is_int(a)) or c < 0 or a < 0 or a > c:
            raise InvalidContainer(c, a)

    @classmethod
    def create(cls, capacity: int, current_amount: int = 0) -> "Container":
        return cls(capacity, current_amount)

    @property
    def room(self) -> int:
        return self.capacity - self.current_amount

    @property
    def is_full(self) -> bool:
        return self.current_amount == self.capacity

    @property
    def is_empty(self) -> bool:
        return self.current_amount == 0

    def filled(self) -> "Container":
        return Container(self.capacity, self.capacity)

    def emptied(self) -> "Container":
        return Container(self.capacity, 0)

    def with_amount(self, amount: int) -> "Container":
        return Container(self.capacity, amount)

    def __str__(self) -> str:
        return str(self.current_amount)
