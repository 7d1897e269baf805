import pytest

from slidingtile.domains.grid import GridState
from slidingtile.search.bfs import reachable_from_goal


def grid(*rows):
    return GridState.from_rows(rows)


@pytest.fixture(scope="session")
def reachable3():
    return reachable_from_goal(3)
