"""Tests for grid position and direction primitives."""

import pytest

from autopilot.models.entities import (
    Direction,
    Position,
    in_range,
    manhattan_distance,
    squared_distance,
    to_direction,
)


class TestDistances:
    """Distance helpers."""

    def test_manhattan_distance(self):
        assert manhattan_distance(Position(0, 0), Position(3, 4)) == 7
        assert manhattan_distance(Position(5, 2), Position(1, 6)) == 8

    def test_manhattan_distance_symmetric(self):
        a, b = Position(2, 9), Position(7, 1)
        assert manhattan_distance(a, b) == manhattan_distance(b, a)

    def test_squared_distance(self):
        assert squared_distance(Position(0, 0), Position(3, 4)) == 25.0
        assert isinstance(squared_distance(Position(1, 1), Position(1, 1)), float)

    def test_same_position_is_zero(self):
        p = Position(4, 4)
        assert manhattan_distance(p, p) == 0
        assert squared_distance(p, p) == 0.0


class TestInRange:
    """Half-open range containment."""

    def test_lower_inclusive(self):
        assert in_range(Position(0, 0), Position(0, 0), Position(5, 5))

    def test_upper_exclusive(self):
        assert not in_range(Position(5, 0), Position(0, 0), Position(5, 5))
        assert not in_range(Position(0, 5), Position(0, 0), Position(5, 5))
        assert in_range(Position(4, 4), Position(0, 0), Position(5, 5))

    def test_negative_rejected(self):
        assert not in_range(Position(-1, 2), Position(0, 0), Position(5, 5))


class TestDirection:
    """Direction mapping and single-step translation."""

    @pytest.mark.parametrize("direction", list(Direction))
    def test_opposite_is_involution(self, direction):
        assert direction.opposite().opposite() == direction
        assert direction.opposite() != direction

    @pytest.mark.parametrize("direction", list(Direction))
    def test_step_round_trip(self, direction):
        """to_direction recovers every unit step."""
        p = Position(7, 3)
        assert to_direction(p, p.step(direction)) == direction

    def test_up_decreases_y(self):
        assert Position(2, 2).step(Direction.UP) == Position(2, 1)
        assert Position(2, 2).step(Direction.RIGHT) == Position(3, 2)

    def test_zero_delta_is_none(self):
        assert to_direction(Position(1, 1), Position(1, 1)) is None

    def test_multi_cell_delta_is_none(self):
        assert to_direction(Position(1, 1), Position(3, 1)) is None
        assert to_direction(Position(1, 1), Position(2, 2)) is None

    def test_neighbors_fixed_order(self):
        assert Position(1, 1).neighbors() == [
            Position(1, 0), Position(1, 2), Position(0, 1), Position(2, 1)
        ]

    def test_position_hashable_by_value(self):
        assert {Position(1, 2), Position(1, 2)} == {Position(1, 2)}
        assert Position(1, 2).to_dict() == {"x": 1, "y": 2}
