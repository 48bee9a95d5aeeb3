"""Creature (snake) entity that moves one cell per tick."""

from collections import deque
from dataclasses import dataclass, field
from typing import Deque, List, Optional, Sequence

from .direction import Direction
from .position import Position


@dataclass
class Creature:
    """Grid-confined creature; `body[0]` is the head."""
    body: Deque[Position]
    direction: Optional[Direction] = None

    # Segments still to be added by upcoming moves
    pending_growth: int = 0

    @classmethod
    def along(cls, cells: Sequence[Position]) -> "Creature":
        """Build a creature lying on `cells`, head first."""
        body = deque(cells)
        direction = None
        if len(body) > 1:
            direction = body[1].to_direction(body[0])
        return cls(body=body, direction=direction)

    @property
    def head(self) -> Position:
        return self.body[0]

    @property
    def tail(self) -> Position:
        return self.body[-1]

    def __len__(self) -> int:
        return len(self.body)

    def positions(self) -> List[Position]:
        return list(self.body)

    def direction_is_legal(self, direction: Direction) -> bool:
        """A move may not reverse straight into the neck."""
        return self.direction is None or direction != self.direction.opposite()

    def set_direction(self, direction: Direction) -> bool:
        """Apply a new heading unless it is a reversal. Returns True if applied."""
        if self.direction_is_legal(direction):
            self.direction = direction
            return True
        return False

    def advance(self, grid_width: int, grid_height: int) -> Optional[Position]:
        """Move one cell along the current heading.

        A head leaving the grid re-enters on the opposite edge.

        Returns:
            The new head, or None if the creature has no heading yet
        """
        if self.direction is None:
            return None

        stepped = self.head.step(self.direction)
        new_head = Position(stepped.x % grid_width, stepped.y % grid_height)

        self.body.appendleft(new_head)
        if self.pending_growth > 0:
            self.pending_growth -= 1
        else:
            self.body.pop()
        return new_head

    def grow(self, segments: int = 1) -> None:
        self.pending_growth += segments

    def occupies(self, pos: Position) -> bool:
        return pos in self.body

    def ate_itself(self) -> bool:
        """Check if the head overlaps any other segment."""
        head = self.head
        return any(segment == head for segment in list(self.body)[1:])

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "body": [p.to_dict() for p in self.body],
            "direction": self.direction.value if self.direction else None,
            "length": len(self.body),
        }
