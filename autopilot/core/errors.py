"""Exception hierarchy for the navigation core."""

from typing import Optional

from autopilot.models.entities import Position


class NavigationError(Exception):
    """Base class for all autopilot errors."""


class PathNotFoundError(NavigationError):
    """Goal unreachable given the current obstacles.

    Recoverable: callers may fall back to the precomputed cycle.
    """

    def __init__(self, start: Position, goal: Position):
        self.start = start
        self.goal = goal
        super().__init__(f"No path from {start} to {goal}")


class DesynchronizationError(NavigationError):
    """Creature head cannot be located where the solver expects it.

    Fatal for the current episode; the caller must perform a full reset.
    """

    def __init__(self, head: Optional[Position], message: Optional[str] = None):
        self.head = head
        super().__init__(message or f"Head {head} is not on the cycle")


class MalformedGridError(NavigationError, ValueError):
    """Grid dimensions cannot support the requested construction."""


class MazeParseError(NavigationError, ValueError):
    """Maze fixture text could not be parsed."""
