"""Bounded path enumeration over the tip graph.

Read-only helpers: nothing here touches the game, so strategies can plan
freely before issuing moves.
"""

from __future__ import annotations

from typing import Dict, List

from ..board import Board
from ..types import path_directions

__all__ = ["reach_from", "full_paths", "can_reach", "path_directions"]


def reach_from(board: Board, origin: int, max_steps: int) -> Dict[int, List[int]]:
    """Map every cell reachable in at most ``max_steps`` tips to a path.

    A path lists the cells walked through before arriving (origin first,
    destination excluded), so its length is the number of tips. Walks never
    step straight back to the cell they just left. A cell keeps the first
    path found to it, unless a later walk arrives using the whole budget; the
    first such full-budget walk then takes its place.
    """
    board.cell(origin)
    reach: Dict[int, List[int]] = {}

    def visit(cell_id: int, steps_taken: int, coming_from: List[int]) -> None:
        recorded = reach.get(cell_id)
        if recorded is None or (steps_taken == max_steps and len(recorded) < max_steps):
            reach[cell_id] = coming_from
        if steps_taken == max_steps:
            return
        for n in board.tip_neighbors(cell_id):
            if coming_from and coming_from[-1] == n:
                continue
            visit(n, steps_taken + 1, coming_from + [cell_id])

    if max_steps >= 0:
        visit(origin, 0, [])
    return reach


def full_paths(board: Board, origin: int, steps: int) -> Dict[int, List[int]]:
    """Destinations a piece with ``steps`` moves can end a turn on, with full paths.

    Paths include the destination, i.e. ``[origin, ..., destination]``.
    """
    return {
        dest: path + [dest]
        for dest, path in reach_from(board, origin, steps).items()
        if len(path) == steps
    }


def can_reach(board: Board, origin: int, target: int, steps: int) -> bool:
    reach = reach_from(board, origin, steps)
    return target in reach and len(reach[target]) == steps
