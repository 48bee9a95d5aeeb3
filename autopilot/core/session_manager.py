"""Singleton manager for the game session used by the API."""

import logging
import uuid
from datetime import datetime, timezone
from typing import Optional

from autopilot.core.config import GridConfig
from autopilot.core.game_session import GameSession, SessionConfig, SessionStatus
from autopilot.navigation.solver import SolverStrategy

logger = logging.getLogger(__name__)


class SessionManager:
    """
    Singleton manager for session state and lifecycle.

    Handles:
    - Configuration storage
    - Session creation and reset
    - Tick stepping and state access for API endpoints
    """

    _instance: Optional["SessionManager"] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if self._initialized:
            return

        self._initialized = True
        self._config: Optional[SessionConfig] = None
        self._session: Optional[GameSession] = None
        self._session_id: Optional[str] = None
        self._start_time: Optional[datetime] = None

    @property
    def status(self) -> SessionStatus:
        if self._session:
            return self._session.status
        return SessionStatus.IDLE

    @property
    def config(self) -> Optional[SessionConfig]:
        return self._config

    @property
    def session_id(self) -> Optional[str]:
        return self._session_id

    def set_config(self, config: SessionConfig) -> None:
        """Store configuration and build a fresh session from it."""
        session = GameSession(config)
        self._config = config
        self._session = session
        self._session_id = str(uuid.uuid4())
        self._start_time = datetime.now(timezone.utc)
        logger.info(
            "Session %s configured: %dx%d strategy=%s",
            self._session_id, config.grid.grid_width, config.grid.grid_height,
            config.strategy.value
        )

    def set_config_from_dict(self, config_dict: dict) -> None:
        """Set configuration from a dictionary."""
        strategy_str = config_dict.get("strategy", "cycle")
        try:
            strategy = SolverStrategy(strategy_str)
        except ValueError:
            strategy = SolverStrategy.CYCLE

        grid = config_dict.get("grid", {})
        config = SessionConfig(
            grid=GridConfig(
                grid_width=grid.get("width", 20),
                grid_height=grid.get("height", 20),
                cell_size=grid.get("cell_size", 30),
            ),
            initial_length=config_dict.get("initial_length", 5),
            proximity_threshold=config_dict.get("proximity_threshold"),
            strategy=strategy,
            random_seed=config_dict.get("random_seed"),
        )
        self.set_config(config)

    def _require_session(self) -> GameSession:
        if self._session is None:
            raise RuntimeError("No configuration set")
        return self._session

    def step(self, ticks: int = 1) -> int:
        """Advance the session. Returns the number of ticks executed."""
        session = self._require_session()
        executed = 0
        for _ in range(ticks):
            if not session.step():
                break
            executed += 1
        return executed

    def reset(self) -> None:
        """Rebuild the session from the stored configuration."""
        if self._config is None:
            raise RuntimeError("No configuration set")
        self.set_config(self._config)

    def get_snapshot(self) -> Optional[dict]:
        """Get current session state snapshot."""
        if self._session:
            return self._session.to_dict()
        return None

    def get_status_info(self) -> dict:
        """Get detailed status information."""
        return {
            "status": self.status.name,
            "session_id": self._session_id,
            "tick": self._session.tick if self._session else 0,
            "score": self._session.score if self._session else 0,
            "start_time": self._start_time.isoformat() if self._start_time else None,
        }


# Dependency for FastAPI
_manager_instance: Optional[SessionManager] = None


def get_session_manager() -> SessionManager:
    """Get the singleton session manager instance."""
    global _manager_instance
    if _manager_instance is None:
        _manager_instance = SessionManager()
    return _manager_instance
