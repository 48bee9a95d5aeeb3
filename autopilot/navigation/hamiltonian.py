"""Covering cycle construction for rectangular grids.

A rectangular grid graph has a Hamiltonian cycle exactly when both sides
are at least 2 and at least one side is even. The boustrophedon sweep
below builds one:

    width even: sweep columns over rows 0..H-2 (even columns upward,
                odd columns downward), then return along row H-1
                from right to left.
    width odd, height even: the same sweep with the axes swapped.
"""

from typing import List

from autopilot.core.config import GridConfig
from autopilot.models.entities import Position


def zig_zag_cycle(config: GridConfig) -> List[Position]:
    """Build the covering cycle for a grid.

    Raises:
        MalformedGridError: If the grid admits no Hamiltonian cycle
    """
    config.validate_for_cycle()
    width, height = config.grid_width, config.grid_height

    if width % 2 == 0:
        return _column_sweep(width, height)

    # Transpose the column sweep of the swapped grid
    return [Position(p.y, p.x) for p in _column_sweep(height, width)]


def _column_sweep(width: int, height: int) -> List[Position]:
    cycle: List[Position] = []
    last_row = height - 1

    for x in range(width):
        if x % 2 == 0:
            rows = range(last_row - 1, -1, -1)
        else:
            rows = range(0, last_row)
        for y in rows:
            cycle.append(Position(x, y))

    for x in range(width - 1, -1, -1):
        cycle.append(Position(x, last_row))

    return cycle


def is_hamiltonian_cycle(cycle: List[Position], config: GridConfig) -> bool:
    """Check that a tour covers every cell once and closes with unit steps."""
    if len(cycle) != config.cell_count or len(set(cycle)) != len(cycle):
        return False
    if not all(config.contains(p) for p in cycle):
        return False
    return all(
        cycle[i].manhattan_distance(cycle[(i + 1) % len(cycle)]) == 1
        for i in range(len(cycle))
    )
