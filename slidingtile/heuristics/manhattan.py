from __future__ import annotations
from functools import lru_cache
from typing import Tuple

from slidingtile.domains.grid import GridState, Move


@lru_cache(maxsize=None)
def goal_positions(n: int) -> Tuple[Tuple[int, int], ...]:
    """goal_positions(n)[tile] -> (row, col); index 0 (the blank) is unused."""
    return ((n - 1, n - 1),) + tuple(divmod(t - 1, n) for t in range(1, n * n))


def manhattan(s: GridState) -> int:
    """Sum of Manhattan distances to goal positions (blank ignored)."""
    n = s.size
    goal = goal_positions(n)
    dist = 0
    for idx, tile in enumerate(s.cells):
        if tile == 0:
            continue
        r, c = divmod(idx, n)
        gr, gc = goal[tile]
        dist += abs(r - gr) + abs(c - gc)
    return dist


def manhattan_after(s: GridState, move: Move, h: int) -> int:
    """Heuristic of s.apply(move) given h = manhattan(s), in O(1).

    Only the tile at the blank's destination changes place: it moves into the
    blank's old cell.
    """
    r, c = s.blank
    r2, c2 = r + move.dr, c + move.dc
    tile = s.cells[r2 * s.size + c2]
    gr, gc = goal_positions(s.size)[tile]
    before = abs(r2 - gr) + abs(c2 - gc)
    after = abs(r - gr) + abs(c - gc)
    return h - before + after
