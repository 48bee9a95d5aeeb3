"""Discrete move directions on the grid."""

from enum import Enum
from typing import Optional, Tuple


class Direction(Enum):
    """One of the four orthogonal moves.

    The y axis grows downward (screen coordinates), so UP decreases y.
    """
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def delta(self) -> Tuple[int, int]:
        """Unit step (dx, dy) for this direction."""
        return _DELTAS[self]

    def opposite(self) -> "Direction":
        """Return the direction that reverses this one."""
        return _OPPOSITES[self]

    @classmethod
    def from_delta(cls, dx: int, dy: int) -> Optional["Direction"]:
        """Return the direction whose unit step is (dx, dy), or None."""
        for direction, step in _DELTAS.items():
            if step == (dx, dy):
                return direction
        return None


_DELTAS = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}

_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

# Fixed child-generation order used by the searcher
NEIGHBOR_ORDER = (Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT)
