"""A* best-first search over the 4-connected grid.

The searcher keeps its scratch memory (node arena, open heap, closed set)
on the instance so it can be reused every tick without reallocating. All of
it is cleared at the start of each call; nothing carries over between
unrelated searches.

Open-set policy:
- Entries are ordered by f-cost, ties broken by node id, which is assigned
  in insertion order (earliest-inserted first).
- A candidate for a position that is already open with a lower-or-equal
  g-cost is dropped. A better candidate is pushed alongside the worse one;
  the better copy pops first and closes the position, so the stale copy is
  skipped when it is popped later.
"""

import heapq
import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Set

from autopilot.core.config import GridConfig
from autopilot.core.errors import PathNotFoundError
from autopilot.models.entities import Node, Position

logger = logging.getLogger(__name__)


@dataclass(order=True)
class OpenEntry:
    """Wrapper for nodes in the open heap."""
    f_cost: int
    node_id: int


class Searcher:
    """
    Reusable A* searcher bound to one grid.

    Not re-entrant: independent searches need independent instances.
    """

    def __init__(self, config: GridConfig, trace: bool = False):
        self.config = config
        self._trace_enabled = trace

        self._arena: List[Node] = []
        self._open: List[OpenEntry] = []
        self._open_best_g: Dict[Position, int] = {}
        self._closed: Set[Position] = set()
        self._obstacles: Set[Position] = set()
        self._next_id = 0

        self.expanded_count = 0
        self.skipped_count = 0
        self.expansion_trace: List[int] = []

    def reset(self) -> None:
        """Clear all per-call state."""
        self._arena.clear()
        self._open.clear()
        self._open_best_g.clear()
        self._closed.clear()
        self._obstacles.clear()
        self._next_id = 0
        self.expanded_count = 0
        self.skipped_count = 0
        self.expansion_trace.clear()

    @property
    def generated_count(self) -> int:
        """Number of nodes admitted to the open set during the last call."""
        return len(self._arena)

    def a_star(
        self,
        start: Position,
        goal: Position,
        obstacles: Iterable[Position]
    ) -> Optional[List[Position]]:
        """Search for a shortest path from start to goal.

        Args:
            start: In-bounds start cell (typically the creature's head)
            goal: In-bounds goal cell
            obstacles: Currently blocked cells (typically the creature's body)

        Returns:
            The path in goal-to-start order with both endpoints included,
            or None if the goal cannot be reached.
        """
        self.reset()
        self._obstacles.update(obstacles)

        lower = self.config.lower_bound
        upper = self.config.upper_bound

        root = self._new_node(start, None, 0, start.manhattan_distance(goal))
        self._push(root)

        while self._open:
            entry = heapq.heappop(self._open)
            current = self._arena[entry.node_id]

            if current.position in self._closed:
                # Stale worse duplicate of an already expanded position
                self.skipped_count += 1
                continue

            self._closed.add(current.position)
            self.expanded_count += 1
            if self._trace_enabled:
                self.expansion_trace.append(current.f_cost)

            if current.position == goal:
                path = self._backtrack(current)
                logger.debug(
                    "a_star: %s -> %s found, length=%d expanded=%d",
                    start, goal, len(path), self.expanded_count
                )
                return path

            child_g = current.g_cost + 1
            for child_pos in current.position.neighbors():
                if (
                    not child_pos.in_range(lower, upper)
                    or child_pos in self._obstacles
                    or child_pos in self._closed
                ):
                    continue

                best_g = self._open_best_g.get(child_pos)
                if best_g is not None and best_g <= child_g:
                    continue

                child = self._new_node(
                    child_pos, current.id, child_g, child_pos.manhattan_distance(goal)
                )
                self._push(child)

        logger.debug(
            "a_star: %s -> %s not found, expanded=%d", start, goal, self.expanded_count
        )
        return None

    def find_path(
        self,
        start: Position,
        goal: Position,
        obstacles: Iterable[Position]
    ) -> List[Position]:
        """Like a_star, but start-to-goal ordered and raising when unreachable.

        Raises:
            PathNotFoundError: If the goal cannot be reached
        """
        path = self.a_star(start, goal, obstacles)
        if path is None:
            raise PathNotFoundError(start, goal)
        path.reverse()
        return path

    def next_step(
        self,
        start: Position,
        goal: Position,
        obstacles: Iterable[Position]
    ) -> Optional[Position]:
        """First cell to move to on a shortest path, or None."""
        path = self.a_star(start, goal, obstacles)
        if path is None or len(path) < 2:
            return None
        return path[-2]

    def _new_node(
        self,
        position: Position,
        parent_id: Optional[int],
        g_cost: int,
        h_cost: int
    ) -> Node:
        node = Node(
            position=position,
            id=self._gen_id(),
            parent_id=parent_id,
            g_cost=g_cost,
            h_cost=h_cost,
        )
        self._arena.append(node)
        return node

    def _push(self, node: Node) -> None:
        self._open_best_g[node.position] = node.g_cost
        heapq.heappush(self._open, OpenEntry(f_cost=node.f_cost, node_id=node.id))

    def _gen_id(self) -> int:
        node_id = self._next_id
        self._next_id += 1
        return node_id

    def _backtrack(self, node: Node) -> List[Position]:
        """Follow parent ids back to the root, goal first."""
        path = [node.position]
        while node.parent_id is not None:
            node = self._arena[node.parent_id]
            path.append(node.position)
        return path
