# jug_lab/core/metrics.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
import time, tracemalloc

from .state import PuzzleState


@dataclass
class SearchResult:
    algo: str
    success: bool
    path: List[PuzzleState] = field(default_factory=list)
    actions: List[str] = field(default_factory=list)
    nodes_expanded: int = 0
    time_s: float = 0.0
    peak_kb: int = 0
    cutoff: bool = False
    error: Optional[str] = None

    @property
    def moves(self) -> Optional[int]:
        """Number of moves on the path; None when there is no path."""
        return len(self.path) - 1 if self.path else None

    def to_row(self) -> Dict[str, Any]:
        return {
            "algo": self.algo,
            "success": self.success,
            "moves": self.moves,
            "path": [list(s.amounts) for s in self.path],
            "actions": list(self.actions),
            "nodes_expanded": self.nodes_expanded,
            "time_s": self.time_s,
            "peak_kb": self.peak_kb,
            "cutoff": self.cutoff,
            "error": self.error,
        }


class MeasuredRun:
    """Wall-clock seconds and tracemalloc peak (KB) of one search run.

    Both readings work while the block is still open. An enclosing trace is
    joined rather than stopped, so runs can nest.
    """
    def __init__(self) -> None:
        self._start: Optional[float] = None
        self._stop: Optional[float] = None
        self._peak_bytes = 0
        self._started_trace = False

    def __enter__(self) -> "MeasuredRun":
        self._started_trace = not tracemalloc.is_tracing()
        if self._started_trace:
            tracemalloc.start()
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self._stop = time.perf_counter()
        self._sample()
        if self._started_trace:
            tracemalloc.stop()
        return False

    def _sample(self) -> None:
        if tracemalloc.is_tracing():
            self._peak_bytes = max(self._peak_bytes, tracemalloc.get_traced_memory()[1])

    @property
    def elapsed(self) -> float:
        if self._start is None:
            return 0.0
        end = self._stop if self._stop is not None else time.perf_counter()
        return end - self._start

    @property
    def peak_kb(self) -> int:
        if self._start is not None and self._stop is None:
            self._sample()
        return self._peak_bytes // 1024
