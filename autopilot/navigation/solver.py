"""Hamiltonian-cycle driver that picks one move per tick.

The solver owns a precomputed covering cycle and a cursor into it. Between
ticks the cursor indexes either the head cell (after a move) or its cycle
predecessor (right after `init`). Each `make_move` realigns to the head,
chooses the next cell and leaves the cursor on the cell the head will move
to.

Available strategies:
- CYCLE: always follow the cycle; never self-collides
- SHORTCUT: follow an A* path to the target when its first step can skip
  ahead on the cycle without overtaking the tail, else follow the cycle
"""

import logging
from enum import Enum
from typing import Dict, List, Optional, Sequence

from autopilot.core.config import GridConfig
from autopilot.core.errors import DesynchronizationError
from autopilot.models.entities import Direction, Position
from autopilot.navigation.hamiltonian import zig_zag_cycle
from autopilot.navigation.search import Searcher

logger = logging.getLogger(__name__)

# Free cycle cells kept between a shortcut landing and the tail
SHORTCUT_MARGIN = 3


class SolverStrategy(str, Enum):
    """Enum for available move selection strategies."""
    CYCLE = "cycle"
    SHORTCUT = "shortcut"


class Solver:
    """
    Chooses a single legal Direction per tick.

    Constructed once per episode; `init` must be called on every creature
    reset to realign the cursor.
    """

    def __init__(
        self,
        config: GridConfig,
        strategy: SolverStrategy = SolverStrategy.CYCLE,
        searcher: Optional[Searcher] = None
    ):
        config.validate_for_cycle()
        self.config = config
        self.strategy = SolverStrategy(strategy)
        self.searcher = searcher or Searcher(config)
        self.cycle: List[Position] = []
        self._index: Dict[Position, int] = {}
        self.cursor = 0
        self.gen_zig_zag_path()

    def gen_zig_zag_path(self) -> None:
        """(Re)build the covering cycle and its position index."""
        self.cycle = zig_zag_cycle(self.config)
        self._index = {pos: i for i, pos in enumerate(self.cycle)}
        self.cursor = 0

    def get_cycle_index(self, pos: Position) -> Optional[int]:
        """Index of a cell on the cycle, or None if absent."""
        return self._index.get(pos)

    def init(self, current_positions: Sequence[Position]) -> None:
        """Align the cursor to the predecessor of the creature's head.

        Raises:
            DesynchronizationError: If the head is not on the cycle. The
                cursor is left untouched.
        """
        head = self._head(current_positions)
        index = self._index.get(head)
        if index is None:
            raise DesynchronizationError(head)

        self.cursor = (index - 1) % len(self.cycle)
        logger.debug("Solver initialized: head=%s cursor=%d", head, self.cursor)

    def make_move(
        self,
        current_positions: Sequence[Position],
        target: Optional[Position]
    ) -> Direction:
        """Return the next move for the creature.

        Args:
            current_positions: Creature body, head first
            target: Cell the creature is heading for, if any

        Returns:
            A Direction whose unit step leads to a cell not currently occupied

        Raises:
            DesynchronizationError: If the head is neither on the cursor cell
                nor its successor, or the next cycle cell lies under the
                body. The cursor is left untouched.
        """
        head = self._head(current_positions)
        head_index = self._resync(head)

        next_index = self._advance(head_index)
        if self.strategy == SolverStrategy.SHORTCUT and target is not None:
            next_index = self._shortcut_index(current_positions, target, head_index, next_index)

        next_cell = self.cycle[next_index]
        direction = head.to_direction(next_cell)
        if direction is None:
            raise DesynchronizationError(
                head, f"Cycle cell {next_cell} is not adjacent to head {head}"
            )
        if self._is_blocked(current_positions, next_cell):
            raise DesynchronizationError(
                head, f"Cycle cell {next_cell} is occupied by the body"
            )

        self.cursor = next_index
        return direction

    def _is_blocked(self, current_positions: Sequence[Position], cell: Position) -> bool:
        """Occupied cells the head may not enter: the neck and all but the tail."""
        return cell in current_positions[1:2] or cell in current_positions[:-1]

    def _head(self, current_positions: Sequence[Position]) -> Position:
        if not current_positions:
            raise DesynchronizationError(None, "Creature has no body to locate")
        return current_positions[0]

    def _advance(self, index: int) -> int:
        end = len(self.cycle) - 1
        return 0 if index == end else index + 1

    def _resync(self, head: Position) -> int:
        """Return the head's cycle index, catching up one step if needed."""
        if self.cycle[self.cursor] == head:
            return self.cursor

        successor = self._advance(self.cursor)
        if self.cycle[successor] == head:
            return successor

        raise DesynchronizationError(
            head, f"Head {head} is not at cursor {self.cursor} or its successor"
        )

    def _cycle_gap(self, from_index: int, to_index: int) -> int:
        """Forward distance along the cycle."""
        return (to_index - from_index) % len(self.cycle)

    def _shortcut_index(
        self,
        current_positions: Sequence[Position],
        target: Position,
        head_index: int,
        fallback_index: int
    ) -> int:
        """Cycle index of a safe search step, or the fallback cycle step."""
        size = len(self.cycle)
        if len(current_positions) * 2 >= size:
            return fallback_index

        step = self.searcher.next_step(current_positions[0], target, current_positions)
        if step is None:
            return fallback_index

        step_index = self._index[step]
        tail_index = self._index.get(current_positions[-1])
        if tail_index is None:
            raise DesynchronizationError(current_positions[-1], "Tail is not on the cycle")

        tail_gap = self._cycle_gap(head_index, tail_index) or size
        step_gap = self._cycle_gap(head_index, step_index)

        if 0 < step_gap < tail_gap - SHORTCUT_MARGIN:
            if step_index != fallback_index:
                logger.debug("Shortcut taken: %s skips %d cycle cells", step, step_gap - 1)
            return step_index
        return fallback_index
