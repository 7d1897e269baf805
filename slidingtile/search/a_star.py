from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional
from time import perf_counter
import logging

from slidingtile.domains.grid import GridState, MOVES, START
from slidingtile.domains.puzzlen import NPuzzle
from slidingtile.errors import InvariantViolation
from slidingtile.heuristics.manhattan import manhattan, manhattan_after
from slidingtile.search.frontier import Frontier
from slidingtile.search.path import Step, reconstruct_path
from slidingtile.search.visited import VisitedSet

logger = logging.getLogger(__name__)

PROGRESS_EVERY = 100_000


@dataclass(frozen=True)
class SearchNode:
    state: GridState
    depth: int
    heuristic: int
    move: str = START
    parent: Optional[int] = None  # arena index


@dataclass
class SearchResult:
    termination: str  # "ok" | "unsolvable"
    steps: Optional[List[Step]] = None
    g: Optional[int] = None
    expanded: int = 0
    generated: int = 0
    duplicates: int = 0
    peak_open: int = 0
    peak_closed: int = 0
    time: float = 0.0
    tie_break: str = "h"
    algorithm: str = field(default="A*")

    @property
    def solved(self) -> bool:
        return self.termination == "ok"

    @property
    def moves(self) -> List[str]:
        if self.steps is None:
            return []
        return [s.label for s in self.steps[1:]]

    def to_row(self) -> Dict[str, object]:
        return {
            "algorithm": self.algorithm,
            "expanded": self.expanded,
            "generated": self.generated,
            "duplicates": self.duplicates,
            "g": "" if self.g is None else self.g,
            "time_sec": f"{self.time:.6f}",
            "peak_open": self.peak_open,
            "peak_closed": self.peak_closed,
            "tie_break": self.tie_break,
            "termination": self.termination,
        }


def a_star(
    start: GridState,
    tie_break: str = "h",
    on_expand: Optional[Callable[[GridState], None]] = None,
) -> SearchResult:
    """
    A* over blank slides, ordered by depth + Manhattan distance.

    Unsolvable boards are rejected by the parity check before any search state
    is built. All generated nodes live in `arena`; the frontier and the visited
    set hold arena indices. Raises InvariantViolation if the frontier runs dry.
    """
    t0 = perf_counter()
    if not NPuzzle(start.size).is_solvable(start):
        logger.info("parity check failed; %dx%d board is unsolvable", start.size, start.size)
        return SearchResult(termination="unsolvable", tie_break=tie_break, time=perf_counter() - t0)

    frontier = Frontier(tie_break)
    visited = VisitedSet()
    arena: List[SearchNode] = []

    h0 = manhattan(start)
    arena.append(SearchNode(state=start, depth=0, heuristic=h0))
    visited.insert(start, 0)
    frontier.insert(0, 0, h0)

    expanded = 0
    generated = 0
    duplicates = 0

    while frontier:
        i = frontier.extract_min()
        node = arena[i]
        # A shorter path to this grid was found after this entry was pushed
        if visited.index_of(node.state) != i:
            continue

        if node.heuristic == 0:
            steps = reconstruct_path(arena, i)
            t1 = perf_counter()
            logger.info("solved in %d moves (%d expanded, %d generated, %.3fs)",
                        node.depth, expanded, generated, t1 - t0)
            return SearchResult(
                termination="ok",
                steps=steps,
                g=node.depth,
                expanded=expanded,
                generated=generated,
                duplicates=duplicates,
                peak_open=frontier.peak,
                peak_closed=len(visited),
                time=t1 - t0,
                tie_break=tie_break,
            )

        expanded += 1
        if on_expand is not None:
            on_expand(node.state)
        if expanded % PROGRESS_EVERY == 0:
            logger.debug("expanded=%d open=%d visited=%d f=%d",
                         expanded, len(frontier), len(visited), node.depth + node.heuristic)

        s = node.state
        for m in MOVES:
            if not s.can_apply(m):
                continue
            s2 = s.apply(m)
            generated += 1
            g2 = node.depth + 1
            seen = visited.index_of(s2)
            if seen is not None:
                duplicates += 1
                if arena[seen].depth <= g2:
                    continue
            h2 = manhattan_after(s, m, node.heuristic)
            arena.append(SearchNode(state=s2, depth=g2, heuristic=h2, move=m.label, parent=i))
            j = len(arena) - 1
            visited.insert(s2, j)
            frontier.insert(j, g2, h2)

    raise InvariantViolation(
        f"frontier exhausted after {expanded} expansions on a board that passed the parity check"
    )
