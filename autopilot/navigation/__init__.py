"""Navigation module exports."""

from .search import Searcher, OpenEntry
from .hamiltonian import zig_zag_cycle, is_hamiltonian_cycle
from .solver import Solver, SolverStrategy, SHORTCUT_MARGIN
from .maze import Maze, parse_maze

__all__ = [
    # Search
    "Searcher",
    "OpenEntry",
    # Cycle
    "zig_zag_cycle",
    "is_hamiltonian_cycle",
    "Solver",
    "SolverStrategy",
    "SHORTCUT_MARGIN",
    # Test fixtures
    "Maze",
    "parse_maze",
]
