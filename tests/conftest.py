"""Pytest fixtures for navigation tests."""

import pytest
from typing import List

from autopilot.core.config import GridConfig
from autopilot.core.game_session import GameSession, SessionConfig
from autopilot.core import session_manager
from autopilot.models.entities import Position
from autopilot.navigation import Searcher, Solver, SolverStrategy, parse_maze


@pytest.fixture
def open_grid() -> GridConfig:
    """20x20 grid used for the open-field scenarios."""
    return GridConfig(grid_width=20, grid_height=20, cell_size=30)


@pytest.fixture
def small_grid() -> GridConfig:
    """4x4 grid small enough to reason about cycle indices by hand."""
    return GridConfig(grid_width=4, grid_height=4, cell_size=30)


@pytest.fixture
def searcher(open_grid) -> Searcher:
    """Searcher on the open grid that records popped f-costs."""
    return Searcher(open_grid, trace=True)


@pytest.fixture
def cycle_solver(small_grid) -> Solver:
    return Solver(small_grid, strategy=SolverStrategy.CYCLE)


@pytest.fixture
def shortcut_solver(small_grid) -> Solver:
    return Solver(small_grid, strategy=SolverStrategy.SHORTCUT)


@pytest.fixture
def corridor_maze_lines() -> List[str]:
    """Maze with a single winding route from S to E."""
    return [
        "##########",
        "#S   #   #",
        "# ## # # #",
        "#  #   #E#",
        "##########",
    ]


@pytest.fixture
def corridor_maze(corridor_maze_lines):
    return parse_maze(corridor_maze_lines)


@pytest.fixture
def small_session_config() -> SessionConfig:
    """Configuration that fills a 4x4 board quickly."""
    return SessionConfig(
        grid=GridConfig(grid_width=4, grid_height=4, cell_size=30),
        initial_length=2,
        strategy=SolverStrategy.CYCLE,
        random_seed=7
    )


@pytest.fixture
def medium_session_config() -> SessionConfig:
    return SessionConfig(
        grid=GridConfig(grid_width=10, grid_height=10, cell_size=30),
        initial_length=5,
        strategy=SolverStrategy.CYCLE,
        random_seed=42
    )


@pytest.fixture
def small_session(small_session_config) -> GameSession:
    return GameSession(small_session_config)


@pytest.fixture
def fresh_manager():
    """Session manager with the singleton cleared before and after the test."""
    session_manager.SessionManager._instance = None
    session_manager._manager_instance = None
    yield session_manager.get_session_manager()
    session_manager.SessionManager._instance = None
    session_manager._manager_instance = None


def ring_around(center: Position) -> List[Position]:
    """The 8 cells surrounding `center`."""
    return [
        Position(center.x + dx, center.y + dy)
        for dx in (-1, 0, 1)
        for dy in (-1, 0, 1)
        if (dx, dy) != (0, 0)
    ]
