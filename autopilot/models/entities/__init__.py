from .direction import Direction, NEIGHBOR_ORDER
from .position import (
    Position,
    manhattan_distance,
    squared_distance,
    in_range,
    to_direction,
)
from .node import Node
from .creature import Creature
from .target import Target, spawn_target, random_position

__all__ = [
    "Direction",
    "NEIGHBOR_ORDER",
    "Position",
    "manhattan_distance",
    "squared_distance",
    "in_range",
    "to_direction",
    "Node",
    "Creature",
    "Target",
    "spawn_target",
    "random_position",
]
