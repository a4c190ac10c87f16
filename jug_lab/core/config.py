# jug_lab/core/config.py
# Strategy tokens and tunables (overridable via environment variables).
from __future__ import annotations
import os
from typing import Optional

BFS = "BFS"
DFS = "DFS"
INVALID_ALGORITHM = f"unknown search strategy; expected {BFS} or {DFS}"


def int_env(name: str) -> Optional[int]:
    """Integer environment variable; unset or blank means None."""
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


# ---- Tunables ----------------------------------------------------------------
DEFAULT_STRATEGY = os.getenv("JUG_STRATEGY", BFS)
MAX_EXPANSIONS = int_env("JUG_MAX_EXPANSIONS")  # None = unlimited
