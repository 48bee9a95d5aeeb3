"""Grid configuration shared by the searcher, solver and session."""

from dataclasses import dataclass

from autopilot.models.entities import Position
from autopilot.core.errors import MalformedGridError


@dataclass(frozen=True)
class GridConfig:
    """Grid geometry supplied at construction time.

    Positions are in cell units; `cell_size` only matters when converting
    to pixel space (proximity checks, rendering collaborators).
    """
    grid_width: int = 20
    grid_height: int = 20
    cell_size: int = 30

    def __post_init__(self):
        if self.grid_width < 1 or self.grid_height < 1:
            raise MalformedGridError(
                f"Grid must be at least 1x1, got {self.grid_width}x{self.grid_height}"
            )
        if self.cell_size < 1:
            raise MalformedGridError(f"cell_size must be positive, got {self.cell_size}")

    @property
    def lower_bound(self) -> Position:
        return Position(0, 0)

    @property
    def upper_bound(self) -> Position:
        """Exclusive upper corner."""
        return Position(self.grid_width, self.grid_height)

    @property
    def cell_count(self) -> int:
        return self.grid_width * self.grid_height

    def contains(self, pos: Position) -> bool:
        return pos.in_range(self.lower_bound, self.upper_bound)

    def wrap(self, pos: Position) -> Position:
        """Teleport a position that left the grid to the opposite edge."""
        return Position(pos.x % self.grid_width, pos.y % self.grid_height)

    def to_pixels(self, pos: Position) -> Position:
        return Position(pos.x * self.cell_size, pos.y * self.cell_size)

    @property
    def supports_cycle(self) -> bool:
        """A grid graph has a Hamiltonian cycle iff one side is even and both exceed 1."""
        if self.grid_width < 2 or self.grid_height < 2:
            return False
        return self.grid_width % 2 == 0 or self.grid_height % 2 == 0

    def validate_for_cycle(self) -> None:
        """Reject dimensions for which no covering cycle can be built."""
        if not self.supports_cycle:
            raise MalformedGridError(
                f"No Hamiltonian cycle exists on a {self.grid_width}x{self.grid_height} grid; "
                "both sides must be at least 2 and one of them even"
            )

    def to_dict(self) -> dict:
        return {
            "grid_width": self.grid_width,
            "grid_height": self.grid_height,
            "cell_size": self.cell_size,
        }
