"""ASCII maze fixtures for exercising the searcher.

Legend: '#' obstacle, 'S' start, 'E' end, ' ' free. Row index is y and
column index is x; coordinates are multiplied by `cell_size`.
"""

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Set, Tuple

from autopilot.core.config import GridConfig
from autopilot.core.errors import MazeParseError
from autopilot.models.entities import Position


@dataclass
class Maze:
    """Start/end/obstacle layout parsed from text."""
    start: Position
    end: Position
    obstacles: Set[Position] = field(default_factory=set)
    width: int = 0
    height: int = 0
    cell_size: int = 1

    def grid_config(self) -> GridConfig:
        """Grid just large enough to hold the layout, in cell units."""
        return GridConfig(
            grid_width=self.width, grid_height=self.height, cell_size=self.cell_size
        )

    def to_cell(self, pos: Position) -> Position:
        """Undo the `cell_size` scaling."""
        return Position(pos.x // self.cell_size, pos.y // self.cell_size)

    def cell_layout(self) -> Tuple[Position, Position, Set[Position]]:
        """Start, end and obstacles in cell units, ready for the searcher."""
        return (
            self.to_cell(self.start),
            self.to_cell(self.end),
            {self.to_cell(pos) for pos in self.obstacles},
        )


def parse_maze(lines: Iterable[str], cell_size: int = 1) -> Maze:
    """Parse maze rows into a Maze.

    Raises:
        MazeParseError: On unknown characters, a missing/repeated S or E, or
            a non-positive cell_size
    """
    if cell_size < 1:
        raise MazeParseError(f"cell_size must be positive, got {cell_size}")

    start: Optional[Position] = None
    end: Optional[Position] = None
    obstacles: Set[Position] = set()
    rows: List[str] = list(lines)

    for y, line in enumerate(rows):
        for x, char in enumerate(line):
            pos = Position(x * cell_size, y * cell_size)
            if char == "#":
                obstacles.add(pos)
            elif char == "S":
                if start is not None:
                    raise MazeParseError(f"Second start marker at row {y}, column {x}")
                start = pos
            elif char == "E":
                if end is not None:
                    raise MazeParseError(f"Second end marker at row {y}, column {x}")
                end = pos
            elif char != " ":
                raise MazeParseError(f"Unexpected character {char!r} at row {y}, column {x}")

    if start is None or end is None:
        raise MazeParseError("Maze needs exactly one 'S' and one 'E'")

    return Maze(
        start=start,
        end=end,
        obstacles=obstacles,
        width=max((len(line) for line in rows), default=0),
        height=len(rows),
        cell_size=cell_size,
    )
