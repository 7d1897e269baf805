from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterable, List, Sequence, Tuple

Coord = Tuple[int, int]


@dataclass(frozen=True)
class Move:
    label: str
    dr: int
    dc: int


UP = Move("UP", -1, 0)
RIGHT = Move("RIGHT", 0, 1)
DOWN = Move("DOWN", 1, 0)
LEFT = Move("LEFT", 0, -1)

# Expansion order
MOVES: Tuple[Move, ...] = (UP, RIGHT, DOWN, LEFT)
MOVES_BY_LABEL = {m.label: m for m in MOVES}
START = "START"


@dataclass(frozen=True, order=True)
class GridState:
    """N×N board stored row-major in a flat tuple (0 is the blank).

    Equality, hashing and ordering look at (size, cells) only; `blank` is a
    cache of the blank's (row, col).
    """
    size: int
    cells: Tuple[int, ...]
    blank: Coord = field(compare=False)

    # ---------- construction ----------
    @classmethod
    def from_flat(cls, n: int, values: Iterable[int]) -> "GridState":
        cells = tuple(values)
        z = cells.index(0)
        return cls(n, cells, divmod(z, n))

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "GridState":
        n = len(rows)
        return cls.from_flat(n, (v for row in rows for v in row))

    @classmethod
    def goal(cls, n: int) -> "GridState":
        return cls(n, tuple(list(range(1, n * n)) + [0]), (n - 1, n - 1))

    # ---------- views ----------
    def at(self, r: int, c: int) -> int:
        return self.cells[r * self.size + c]

    def rows(self) -> List[Tuple[int, ...]]:
        n = self.size
        return [self.cells[r * n:(r + 1) * n] for r in range(n)]

    def is_goal(self) -> bool:
        n2 = self.size * self.size
        return self.cells[-1] == 0 and all(self.cells[i] == i + 1 for i in range(n2 - 1))

    # ---------- transitions ----------
    def can_apply(self, move: Move) -> bool:
        r, c = self.blank
        r2, c2 = r + move.dr, c + move.dc
        return 0 <= r2 < self.size and 0 <= c2 < self.size

    def apply(self, move: Move) -> "GridState":
        """Slide the blank by `move`; returns a new state."""
        if not self.can_apply(move):
            raise ValueError(f"move {move.label} takes the blank off the board at {self.blank}")
        n = self.size
        r, c = self.blank
        r2, c2 = r + move.dr, c + move.dc
        z, j = r * n + c, r2 * n + c2
        lst = list(self.cells)
        lst[z], lst[j] = lst[j], lst[z]
        return GridState(n, tuple(lst), (r2, c2))

    def successors(self) -> List[Tuple[Move, "GridState"]]:
        return [(m, self.apply(m)) for m in MOVES if self.can_apply(m)]

    def __str__(self) -> str:
        w = len(str(self.size * self.size - 1))
        return "\n".join(" ".join(str(v).rjust(w) if v else " " * w for v in row) for row in self.rows())
