"""Headless game session driving the autopilot one tick at a time."""

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Callable, List, Optional

import numpy as np

from autopilot.core.config import GridConfig
from autopilot.core.errors import DesynchronizationError, MalformedGridError
from autopilot.models.entities import Creature, Target, spawn_target
from autopilot.navigation.solver import Solver, SolverStrategy

logger = logging.getLogger(__name__)


class SessionStatus(Enum):
    """Possible session states."""
    IDLE = auto()
    RUNNING = auto()
    STOPPED = auto()
    COMPLETED = auto()


@dataclass
class SessionConfig:
    """Configuration for a game session."""
    grid: GridConfig = field(default_factory=GridConfig)

    # Creature configuration
    initial_length: int = 5

    # Pixel distance at which the head counts as touching the target;
    # None means half a cell
    proximity_threshold: Optional[float] = None

    # Move selection strategy
    strategy: SolverStrategy = SolverStrategy.CYCLE

    # Random seed for reproducible target spawns
    random_seed: Optional[int] = None

    @property
    def capture_radius(self) -> float:
        if self.proximity_threshold is None:
            return self.grid.cell_size / 2
        return self.proximity_threshold

    def validate(self) -> None:
        """Reject configurations the session cannot run."""
        self.grid.validate_for_cycle()
        if not 1 <= self.initial_length < self.grid.cell_count:
            raise MalformedGridError(
                f"initial_length must be in [1, {self.grid.cell_count}), got {self.initial_length}"
            )
        # Neighbouring cells are exactly cell_size apart
        if not 0 <= self.capture_radius < self.grid.cell_size:
            raise MalformedGridError(
                f"proximity_threshold must be in [0, {self.grid.cell_size}), got {self.capture_radius}"
            )


@dataclass
class SessionResult:
    """Results from a session run."""
    score: int
    best_score: int
    ticks: int
    resets: int
    desyncs: int
    status: SessionStatus


class GameSession:
    """
    Owns the creature, target and solver for one episode stream.

    Responsibilities:
    - Ask the solver for one move per tick and apply it
    - Detect self-collision and target capture
    - Reset the episode on collision or desynchronization
    - Notify observers after every tick
    """

    def __init__(self, config: SessionConfig):
        config.validate()
        self.config = config
        self.solver = Solver(config.grid, strategy=config.strategy)
        self._rng = np.random.default_rng(config.random_seed)
        self.status = SessionStatus.IDLE

        self.creature: Creature = self._spawn_creature()
        self.target: Target = self._spawn_target()

        self.score = 0
        self.best_score = 0
        self._tick = 0
        self._resets = 0
        self._desyncs = 0
        self._observers: List[Callable[["GameSession", Any], None]] = []

        self.solver.init(self.creature.positions())

    def _spawn_creature(self) -> Creature:
        """Lay the creature on the last cells of the cycle, head most advanced."""
        cycle = self.solver.cycle
        length = self.config.initial_length
        return Creature.along(list(reversed(cycle[-length:])))

    def _spawn_target(self) -> Target:
        grid = self.config.grid
        return spawn_target(self._rng, grid.grid_width, grid.grid_height, self.creature)

    def reset(self) -> None:
        """Start a new episode; the target is re-rolled if it collides."""
        self.creature = self._spawn_creature()
        if self.creature.occupies(self.target.position):
            self.target = self._spawn_target()
        self.score = 0
        self._resets += 1
        self.solver.init(self.creature.positions())
        if self.status == SessionStatus.COMPLETED:
            self.status = SessionStatus.IDLE
        logger.info("Episode reset (resets=%d)", self._resets)

    def _reached_target(self) -> bool:
        grid = self.config.grid
        head = grid.to_pixels(self.creature.head)
        target = grid.to_pixels(self.target.position)
        return head.squared_distance(target) <= self.config.capture_radius ** 2

    def step(self) -> bool:
        """
        Execute a single tick.
        Returns True if the tick was executed, False if the session is done.
        """
        if self.is_completed:
            return False

        body = self.creature.positions()
        try:
            direction = self.solver.make_move(body, self.target.position)
        except DesynchronizationError as e:
            logger.warning("Solver desynchronized at tick %d: %s", self._tick, e)
            self._desyncs += 1
            self.reset()
            self._tick += 1
            self._notify_observers("desync")
            return True

        self.creature.set_direction(direction)
        grid = self.config.grid
        self.creature.advance(grid.grid_width, grid.grid_height)
        self._tick += 1

        outcome = "move"
        if self.creature.ate_itself():
            logger.info("Creature collided with itself at tick %d", self._tick)
            self.reset()
            outcome = "collision"
        elif self._reached_target():
            self.score += 1
            self.best_score = max(self.best_score, self.score)
            self.target.eaten = True
            self.creature.grow()
            logger.info("Target captured at %s (score=%d)", self.target.position, self.score)
            outcome = "capture"

            # Growth lands on the next move, so the board is full one cell early
            if len(self.creature) + self.creature.pending_growth >= grid.cell_count:
                self.status = SessionStatus.COMPLETED
                logger.info("Board filled after %d ticks", self._tick)
            else:
                self.target = self._spawn_target()

        self._notify_observers(outcome)
        return True

    def run(self, max_ticks: int) -> SessionResult:
        """Run synchronously until completion or `max_ticks` ticks."""
        self.status = SessionStatus.RUNNING

        for _ in range(max_ticks):
            if not self.step():
                break

        if self.status == SessionStatus.RUNNING:
            self.status = SessionStatus.STOPPED
        return self._build_result()

    def stop(self) -> None:
        self.status = SessionStatus.STOPPED

    def _build_result(self) -> SessionResult:
        return SessionResult(
            score=self.score,
            best_score=self.best_score,
            ticks=self._tick,
            resets=self._resets,
            desyncs=self._desyncs,
            status=self.status,
        )

    def add_observer(self, observer: Callable[["GameSession", Any], None]) -> None:
        """Register an observer called after every tick."""
        self._observers.append(observer)

    def remove_observer(self, observer: Callable[["GameSession", Any], None]) -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    def _notify_observers(self, outcome: str) -> None:
        for observer in self._observers:
            try:
                observer(self, outcome)
            except Exception:
                logger.exception("Observer error")

    def to_dict(self) -> dict:
        """Get current state as dictionary."""
        return {
            "tick": self._tick,
            "status": self.status.name,
            "score": self.score,
            "best_score": self.best_score,
            "resets": self._resets,
            "desyncs": self._desyncs,
            "strategy": self.solver.strategy.value,
            "grid": self.config.grid.to_dict(),
            "creature": self.creature.to_dict(),
            "target": self.target.to_dict(),
            "cursor": self.solver.cursor,
        }

    @property
    def tick(self) -> int:
        return self._tick

    @property
    def resets(self) -> int:
        return self._resets

    @property
    def desyncs(self) -> int:
        return self._desyncs

    @property
    def is_completed(self) -> bool:
        """Check if session is done."""
        return self.status in (SessionStatus.COMPLETED, SessionStatus.STOPPED)
