"""Integration tests for the headless game session."""

import pytest

from autopilot.core.config import GridConfig
from autopilot.core.errors import MalformedGridError
from autopilot.core.game_session import GameSession, SessionConfig, SessionStatus
from autopilot.models.entities import Creature, Position, Target
from autopilot.navigation import SolverStrategy


class TestSessionSetup:
    """Initial state."""

    def test_creature_spawns_on_cycle_tail(self, small_session):
        cycle = small_session.solver.cycle
        assert small_session.creature.positions() == [cycle[-1], cycle[-2]]
        assert small_session.tick == 0
        assert small_session.status == SessionStatus.IDLE

    def test_target_not_on_body(self, small_session):
        assert not small_session.creature.occupies(small_session.target.position)

    def test_odd_grid_rejected(self):
        with pytest.raises(MalformedGridError):
            GameSession(SessionConfig(grid=GridConfig(grid_width=5, grid_height=5)))

    def test_initial_length_must_fit(self):
        with pytest.raises(MalformedGridError):
            GameSession(SessionConfig(grid=GridConfig(grid_width=4, grid_height=4), initial_length=16))


class TestSessionRun:
    """Running sessions to completion."""

    @pytest.mark.scenario
    def test_cycle_fills_small_board(self, small_session):
        """
        Scenario: 4x4 board, creature of length 2 following the cycle.
        Every target is eaten and the board fills without a collision.
        """
        outcomes = []
        small_session.add_observer(lambda session, outcome: outcomes.append(outcome))

        result = small_session.run(max_ticks=10000)

        assert result.status == SessionStatus.COMPLETED
        assert result.score == 14
        assert result.resets == 0
        assert result.desyncs == 0
        assert "collision" not in outcomes
        assert outcomes.count("capture") == 14
        assert small_session.step() is False

    @pytest.mark.scenario
    def test_cycle_medium_board_no_collisions(self, medium_session_config):
        session = GameSession(medium_session_config)
        result = session.run(max_ticks=3000)

        assert result.resets == 0
        assert result.desyncs == 0
        assert result.best_score >= 10

    @pytest.mark.scenario
    @pytest.mark.slow
    def test_shortcut_session_stays_synchronized(self, medium_session_config):
        medium_session_config.strategy = SolverStrategy.SHORTCUT
        session = GameSession(medium_session_config)

        out_of_bounds = []

        def check_in_bounds(s, outcome):
            out_of_bounds.extend(p for p in s.creature.positions() if not s.config.grid.contains(p))

        session.add_observer(check_in_bounds)
        result = session.run(max_ticks=3000)

        assert out_of_bounds == []
        assert result.desyncs == 0
        assert result.best_score > 0

    def test_run_stops_at_tick_limit(self, medium_session_config):
        session = GameSession(medium_session_config)
        result = session.run(max_ticks=25)
        assert result.ticks == 25
        assert result.status == SessionStatus.STOPPED


class TestSessionRecovery:
    """Resets on collision and desynchronization."""

    def test_collision_resets_episode(self, small_session):
        """The next cycle cell is the tail, which stays put while growth is pending."""
        small_session.creature = Creature.along([
            Position(1, 1), Position(2, 1), Position(2, 2), Position(1, 2)
        ])
        small_session.creature.grow()
        small_session.solver.init(small_session.creature.positions())

        small_session.step()

        assert small_session.resets == 1
        assert small_session.desyncs == 0
        assert small_session.score == 0
        assert len(small_session.creature) == 2

    def test_move_into_body_resets_as_desync(self, small_session):
        small_session.creature = Creature.along([
            Position(1, 1), Position(2, 1), Position(2, 2), Position(1, 2), Position(1, 3)
        ])
        small_session.solver.init(small_session.creature.positions())

        small_session.step()

        assert small_session.desyncs == 1
        assert small_session.resets == 1
        assert len(small_session.creature) == 2

    def test_desync_triggers_full_reset(self, small_session):
        small_session.creature = Creature.along([Position(2, 2)])

        assert small_session.step() is True

        assert small_session.desyncs == 1
        assert small_session.resets == 1
        cycle = small_session.solver.cycle
        assert small_session.creature.head == cycle[-1]
        small_session.step()
        assert small_session.desyncs == 1


class TestSessionDeterminism:
    """Seeded sessions replay identically."""

    @pytest.mark.deterministic
    def test_same_seed_same_trajectory(self, medium_session_config):
        snapshots = []
        for _ in range(2):
            session = GameSession(medium_session_config)
            for _ in range(200):
                session.step()
            snapshots.append(session.to_dict())
        assert snapshots[0] == snapshots[1]

    def test_snapshot_fields(self, small_session):
        small_session.step()
        data = small_session.to_dict()
        assert data["tick"] == 1
        assert data["strategy"] == "cycle"
        assert data["grid"] == {"grid_width": 4, "grid_height": 4, "cell_size": 30}
        assert data["cursor"] == 0
        assert data["creature"]["length"] >= 2


class TestTargetCapture:
    """Capture distance on small cells."""

    @pytest.fixture
    def unit_cell_session(self):
        return GameSession(SessionConfig(
            grid=GridConfig(grid_width=4, grid_height=4, cell_size=1),
            initial_length=2,
            random_seed=7
        ))

    @pytest.mark.parametrize("target", [Position(1, 1), Position(0, 0), Position(1, 2)])
    def test_nearby_target_not_eaten(self, unit_cell_session, target):
        """The head moves from (0,3) to (0,2); adjacent, diagonal and two-away targets stay put."""
        unit_cell_session.target = Target(target)

        unit_cell_session.step()

        assert unit_cell_session.creature.head == Position(0, 2)
        assert unit_cell_session.score == 0
        assert unit_cell_session.creature.pending_growth == 0

    def test_target_on_head_cell_eaten(self, unit_cell_session):
        unit_cell_session.target = Target(Position(0, 2))

        unit_cell_session.step()

        assert unit_cell_session.score == 1
        assert unit_cell_session.creature.pending_growth == 1
