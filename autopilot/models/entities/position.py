"""Position value object and grid geometry helpers."""

from dataclasses import dataclass
from typing import List, Optional

from .direction import Direction, NEIGHBOR_ORDER


@dataclass(frozen=True)
class Position:
    """Immutable 2D cell coordinate on the grid."""
    x: int
    y: int

    def manhattan_distance(self, other: "Position") -> int:
        """Manhattan distance, the search heuristic for 4-connected moves."""
        return abs(self.x - other.x) + abs(self.y - other.y)

    def squared_distance(self, other: "Position") -> float:
        """Squared Euclidean distance, used for proximity checks."""
        dx = other.x - self.x
        dy = other.y - self.y
        return float(dx * dx + dy * dy)

    def in_range(self, lower: "Position", upper: "Position") -> bool:
        """Check containment in [lower, upper) on both axes."""
        return lower.x <= self.x < upper.x and lower.y <= self.y < upper.y

    def step(self, direction: Direction) -> "Position":
        """Return the position one unit step away (may leave the grid)."""
        dx, dy = direction.delta
        return Position(self.x + dx, self.y + dy)

    def neighbors(self) -> List["Position"]:
        """Return the 4 orthogonal neighbours in fixed order, unfiltered."""
        return [self.step(d) for d in NEIGHBOR_ORDER]

    def to_direction(self, to: "Position") -> Optional[Direction]:
        """Direction of a single legal step from here to `to`, else None."""
        return Direction.from_delta(to.x - self.x, to.y - self.y)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        # Convert to native Python int to handle numpy int64
        return {"x": int(self.x), "y": int(self.y)}


def manhattan_distance(a: Position, b: Position) -> int:
    return a.manhattan_distance(b)


def squared_distance(a: Position, b: Position) -> float:
    return a.squared_distance(b)


def in_range(pos: Position, lower: Position, upper: Position) -> bool:
    return pos.in_range(lower, upper)


def to_direction(from_pos: Position, to_pos: Position) -> Optional[Direction]:
    """Return the direction of a one-cell move, or None for any other delta.

    A zero or multi-cell displacement is not a legal single step; callers
    treat None as that signal rather than an error.
    """
    return from_pos.to_direction(to_pos)
