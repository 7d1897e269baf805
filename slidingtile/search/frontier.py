from __future__ import annotations
from typing import List, Tuple
import heapq
import itertools

TIE_BREAKS = ("h", "g", "fifo", "lifo")

Priority = Tuple[int, int, int]


class Frontier:
    """Open set: a binary heap of arena indices ordered by f = g + h.

    Equal-f entries are ordered by the tie-break policy:
      h    -> smaller h first, then insertion order (default)
      g    -> larger g first, then insertion order
      fifo -> insertion order
      lifo -> reverse insertion order
    """
    def __init__(self, tie_break: str = "h"):
        if tie_break not in TIE_BREAKS:
            raise ValueError(f"unknown tie_break {tie_break!r}; expected one of {TIE_BREAKS}")
        self.tie_break = tie_break
        self._heap: List[Tuple[Priority, int]] = []
        self._counter = itertools.count()
        self.peak = 0

    def _priority(self, f: int, g: int, h: int, ctr: int) -> Priority:
        if self.tie_break == "h":    return (f, h, ctr)
        if self.tie_break == "g":    return (f, -g, ctr)
        if self.tie_break == "fifo": return (f, 0, ctr)
        return (f, 0, -ctr)

    def insert(self, index: int, g: int, h: int) -> None:
        pr = self._priority(g + h, g, h, next(self._counter))
        heapq.heappush(self._heap, (pr, index))
        if len(self._heap) > self.peak:
            self.peak = len(self._heap)

    def extract_min(self) -> int:
        """Pop the arena index with the smallest priority. IndexError if empty."""
        _, index = heapq.heappop(self._heap)
        return index

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)
