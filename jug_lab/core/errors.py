# jug_lab/core/errors.py
# Error taxonomy for the two-container search engine.
from __future__ import annotations

from .config import INVALID_ALGORITHM


class JugLabError(Exception):
    """Base class for every error raised by jug_lab."""


class InvalidContainer(JugLabError, ValueError):
    """Capacity/amount pair violates 0 <= current_amount <= capacity."""

    def __init__(self, capacity, current_amount):
        self.capacity = capacity
        self.current_amount = current_amount
        super().__init__(
            f"invalid container: capacity={capacity!r}, current_amount={current_amount!r} "
            "(need integers with 0 <= current_amount <= capacity)"
        )


class InvalidStrategy(JugLabError, ValueError):
    """Unrecognized traversal strategy token."""

    def __init__(self, token):
        self.token = token
        super().__init__(f"{INVALID_ALGORITHM}: {token!r}")


class SearchNotSolved(JugLabError, RuntimeError):
    """Path requested from an engine that has not reached the goal."""
