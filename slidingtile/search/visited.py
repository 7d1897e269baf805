from __future__ import annotations
from typing import Dict, Optional

from slidingtile.domains.grid import GridState


class VisitedSet:
    """Closed set keyed by grid contents -> arena index of the best node."""
    def __init__(self):
        self._index: Dict[GridState, int] = {}

    def contains(self, s: GridState) -> bool:
        return s in self._index

    def insert(self, s: GridState, index: int) -> None:
        self._index[s] = index

    def index_of(self, s: GridState) -> Optional[int]:
        return self._index.get(s)

    def __contains__(self, s: GridState) -> bool:
        return self.contains(s)

    def __len__(self) -> int:
        return len(self._index)
