from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, List, Optional, Sequence

from slidingtile.domains.grid import Coord, GridState, MOVES_BY_LABEL, START
from slidingtile.errors import InvariantViolation

if TYPE_CHECKING:
    from slidingtile.search.a_star import SearchNode


@dataclass(frozen=True)
class Step:
    number: int
    label: str
    blank_before: Optional[Coord]
    blank_after: Coord
    grid: GridState


def reconstruct_path(arena: Sequence["SearchNode"], index: int) -> List[Step]:
    """Walk parent indices from arena[index] back to the root, then reverse.

    The root comes out as step 0 with label START.
    """
    chain: List["SearchNode"] = []
    i: Optional[int] = index
    while i is not None:
        if not 0 <= i < len(arena) or len(chain) > len(arena):
            raise InvariantViolation(f"broken ancestry at arena index {i}")
        node = arena[i]
        chain.append(node)
        i = node.parent
    chain.reverse()

    steps: List[Step] = []
    prev: Optional[Coord] = None
    for k, node in enumerate(chain):
        steps.append(Step(k, node.move, prev, node.state.blank, node.state))
        prev = node.state.blank
    return steps


def replay(start: GridState, labels: Iterable[str]) -> GridState:
    """Apply move labels to `start`; START entries are ignored."""
    s = start
    for label in labels:
        if label == START:
            continue
        s = s.apply(MOVES_BY_LABEL[label])
    return s
