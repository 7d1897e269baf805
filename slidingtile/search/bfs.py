from collections import deque
from typing import Dict, Optional, Set

from slidingtile.domains.grid import GridState


def bfs(start: GridState) -> Optional[int]:
    """Optimal move count by breadth-first search, or None if the goal is unreachable."""
    goal = GridState.goal(start.size)
    q = deque([start])
    dist: Dict[GridState, int] = {start: 0}
    while q:
        s = q.popleft()
        if s == goal:
            return dist[s]
        for _, s2 in s.successors():
            if s2 in dist: continue
            dist[s2] = dist[s] + 1; q.append(s2)
    return None


def reachable_from_goal(n: int) -> Set[GridState]:
    """Every configuration in the goal's connected component."""
    goal = GridState.goal(n)
    seen: Set[GridState] = {goal}
    q = deque([goal])
    while q:
        s = q.popleft()
        for _, s2 in s.successors():
            if s2 in seen: continue
            seen.add(s2); q.append(s2)
    return seen
