"""Pydantic schemas for session API."""

from pydantic import BaseModel, Field
from typing import Optional, List, Dict, Any
from enum import Enum


class SolverStrategyType(str, Enum):
    """Available move selection strategies."""
    CYCLE = "cycle"
    SHORTCUT = "shortcut"


class GridConfigSchema(BaseModel):
    """Configuration for the grid."""
    width: int = Field(default=20, ge=2, le=200, description="Grid width in cells")
    height: int = Field(default=20, ge=2, le=200, description="Grid height in cells")
    cell_size: int = Field(default=30, ge=1, le=100, description="Pixels per cell")


class SessionConfigRequest(BaseModel):
    """Complete session configuration request."""
    grid: GridConfigSchema = Field(default_factory=GridConfigSchema)
    initial_length: int = Field(default=5, ge=1, description="Starting creature length")
    proximity_threshold: Optional[float] = Field(
        default=None,
        ge=0,
        description=(
            "Pixel distance at which the head touches the target. "
            "Defaults to half a cell and must stay below cell_size"
        )
    )
    strategy: SolverStrategyType = Field(
        default=SolverStrategyType.CYCLE,
        description="Move selection strategy (cycle or shortcut)"
    )
    random_seed: Optional[int] = Field(default=None, description="Random seed for reproducibility")

    model_config = {
        "json_schema_extra": {
            "example": {
                "grid": {"width": 20, "height": 20, "cell_size": 30},
                "initial_length": 5,
                "proximity_threshold": 15.0,
                "strategy": "shortcut",
                "random_seed": 42
            }
        }
    }


class SessionStatusResponse(BaseModel):
    """Response for session status endpoint."""
    status: str
    session_id: Optional[str]
    tick: int
    score: int
    start_time: Optional[str]


class SessionControlResponse(BaseModel):
    """Response for session control actions."""
    message: str
    status: str


class StepRequest(BaseModel):
    """Request to advance the session."""
    ticks: int = Field(default=1, ge=1, le=10000, description="Ticks to execute")


class SessionSnapshot(BaseModel):
    """Complete snapshot of session state."""
    tick: int
    status: str
    score: int
    best_score: int
    resets: int
    desyncs: int
    strategy: str
    grid: Dict[str, int]
    creature: Dict[str, Any]
    target: Dict[str, Any]
    cursor: int
