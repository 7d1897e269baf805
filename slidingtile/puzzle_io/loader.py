from __future__ import annotations
from pathlib import Path
from typing import List, Union
import logging

from slidingtile.domains.grid import GridState
from slidingtile.errors import InputError

logger = logging.getLogger(__name__)


def parse_grid(text: str) -> GridState:
    """Parse 'N' followed by N*N integers (any whitespace) into a GridState.

    Rejects anything that is not a permutation of 0..N*N-1.
    """
    tokens = text.split()
    if not tokens:
        raise InputError("empty input: expected board size followed by its cells")
    try:
        nums: List[int] = [int(t) for t in tokens]
    except ValueError as e:
        raise InputError(f"non-integer token in input: {e}") from e

    n, values = nums[0], nums[1:]
    if n < 2:
        raise InputError(f"board size must be at least 2, got {n}")
    if len(values) != n * n:
        raise InputError(f"expected {n * n} cells for a {n}x{n} board, got {len(values)}")

    seen = set()
    for k, v in enumerate(values):
        r, c = divmod(k, n)
        if not 0 <= v < n * n:
            raise InputError(f"value {v} at ({r}, {c}) is outside 0..{n * n - 1}")
        if v in seen:
            raise InputError(f"value {v} at ({r}, {c}) appears more than once")
        seen.add(v)
    return GridState.from_flat(n, values)


def load_grid(path: Union[str, Path]) -> GridState:
    path = Path(path)
    logger.debug("reading board from %s", path)
    try:
        text = path.read_text()
    except OSError as e:
        raise InputError(f"cannot read {path}: {e}") from e
    return parse_grid(text)
