from __future__ import annotations
from typing import List, Optional
import random

from slidingtile.domains.grid import GridState, Move, MOVES


def count_inversions(s: GridState) -> int:
    """Pairs of non-blank tiles that appear in the wrong order row-major."""
    arr = [x for x in s.cells if x != 0]
    inv = 0
    for i in range(len(arr)):
        for j in range(i + 1, len(arr)):
            if arr[i] > arr[j]:
                inv += 1
    return inv


def make_unsolvable_variant(s: GridState) -> GridState:
    """Swap the first two non-blank tiles, which flips the inversion parity."""
    lst = list(s.cells)
    i = next(k for k, v in enumerate(lst) if v != 0)
    j = next(k for k, v in enumerate(lst[i + 1:], start=i + 1) if v != 0)
    lst[i], lst[j] = lst[j], lst[i]
    return GridState(s.size, tuple(lst), s.blank)


class NPuzzle:
    """Generic N×N sliding-tile puzzle (0 is the blank)."""
    def __init__(self, n: int):
        assert n >= 2
        self.N = n
        self.GOAL = GridState.goal(n)

    # ---------- solvability ----------
    def is_solvable(self, s: GridState) -> bool:
        """Solvability rules:
           - N odd: inversions must be even
           - N even: inversion parity must differ from the blank row's parity
             (row 0-based from the top; the goal has blank row N-1, which is odd)
        """
        inv = count_inversions(s)
        if self.N % 2 == 1:
            return (inv % 2) == 0
        blank_row = s.blank[0]
        return (inv % 2) != (blank_row % 2)

    # ---------- instance generation ----------
    def scramble(self, depth: int, seed: int) -> GridState:
        """Depth-limited random walk from GOAL with no immediate backtrack."""
        rng = random.Random(seed)
        s = self.GOAL
        last: Optional[Move] = None
        for _ in range(depth):
            cand: List[Move] = [m for m in MOVES if s.can_apply(m)]
            if last is not None and len(cand) > 1:
                cand = [m for m in cand if (m.dr, m.dc) != (-last.dr, -last.dc)]
            m = rng.choice(cand)
            s = s.apply(m)
            last = m
        return s
