"""Search node record stored in the searcher's arena."""

from dataclasses import dataclass
from typing import Optional

from .position import Position


@dataclass
class Node:
    """One explored cell with cost accounting and a back-pointer.

    Nodes are identified by `id`, their index in the searcher's arena.
    `parent_id` refers to another arena index, or None for the root.
    """
    position: Position
    id: int
    parent_id: Optional[int] = None
    g_cost: int = 0
    h_cost: int = 0

    @property
    def f_cost(self) -> int:
        """Total estimated cost through this node."""
        return self.g_cost + self.h_cost

    @property
    def is_root(self) -> bool:
        return self.parent_id is None
