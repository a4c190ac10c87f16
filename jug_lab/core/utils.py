# jug_lab/core/utils.py
# Rebuilds the solution path from a goal state by following parent links.
from __future__ import annotations
from typing import List

from .state import PuzzleState


def reconstruct_path(state: PuzzleState) -> List[PuzzleState]:
    path = [state]
    cur = state
    while cur.parent is not None:
        cur = cur.parent
        path.append(cur)
    path.reverse()
    return path
