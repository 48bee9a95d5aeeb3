"""Pydantic schemas for stateless navigation queries."""

from pydantic import BaseModel, Field
from typing import List, Optional

from autopilot.models.schemas.session import GridConfigSchema, SolverStrategyType


class PositionSchema(BaseModel):
    """2D position on the grid."""
    x: int = Field(ge=0, description="X coordinate")
    y: int = Field(ge=0, description="Y coordinate")


class MoveRequest(BaseModel):
    """Request a single move for a supplied body and target."""
    grid: GridConfigSchema = Field(default_factory=GridConfigSchema)
    body: List[PositionSchema] = Field(min_length=1, description="Creature body, head first")
    target: Optional[PositionSchema] = None
    strategy: SolverStrategyType = SolverStrategyType.CYCLE


class MoveResponse(BaseModel):
    """Chosen move."""
    direction: str
    next_position: PositionSchema


class PathRequest(BaseModel):
    """Single A* query."""
    grid: GridConfigSchema = Field(default_factory=GridConfigSchema)
    start: PositionSchema
    goal: PositionSchema
    obstacles: List[PositionSchema] = Field(default_factory=list)


class PathResponse(BaseModel):
    """Path in start-to-goal order."""
    path: List[PositionSchema]
    length: int
    expanded: int
