"""Target (apple) entity and spawn helper."""

from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from .position import Position

if TYPE_CHECKING:
    from .creature import Creature


@dataclass
class Target:
    """Cell the creature is steering toward."""
    position: Position
    eaten: bool = False

    def to_dict(self) -> dict:
        return {"position": self.position.to_dict(), "eaten": self.eaten}


def random_position(rng: np.random.Generator, grid_width: int, grid_height: int) -> Position:
    """Draw a uniformly random cell."""
    x = rng.integers(0, grid_width)
    y = rng.integers(0, grid_height)
    return Position(int(x), int(y))


def spawn_target(
    rng: np.random.Generator,
    grid_width: int,
    grid_height: int,
    creature: "Creature"
) -> Target:
    """Draw target cells until one does not collide with the creature.

    The caller must ensure at least one free cell exists.
    """
    while True:
        pos = random_position(rng, grid_width, grid_height)
        if not creature.occupies(pos):
            return Target(position=pos)
