class SlidingTileError(Exception):
    """Base class for errors raised by the solver."""


class InputError(SlidingTileError, ValueError):
    """The puzzle text is malformed or is not a permutation of 0..N*N-1."""


class InvariantViolation(SlidingTileError, RuntimeError):
    """Internal consistency failure (exhausted frontier, broken ancestry)."""
