"""Stateless navigation API endpoints."""

from fastapi import APIRouter, HTTPException

from autopilot.core.config import GridConfig
from autopilot.core.errors import (
    DesynchronizationError,
    MalformedGridError,
    PathNotFoundError,
)
from autopilot.models.entities import Position
from autopilot.models.schemas.navigation import (
    MoveRequest,
    MoveResponse,
    PathRequest,
    PathResponse,
    PositionSchema,
)
from autopilot.models.schemas.session import GridConfigSchema
from autopilot.navigation import Searcher, Solver, SolverStrategy

router = APIRouter(prefix="/navigation", tags=["Navigation"])


def _grid_config(schema: GridConfigSchema) -> GridConfig:
    return GridConfig(
        grid_width=schema.width,
        grid_height=schema.height,
        cell_size=schema.cell_size,
    )


def _position(schema: PositionSchema) -> Position:
    return Position(schema.x, schema.y)


@router.post("/move", response_model=MoveResponse)
async def request_move(request: MoveRequest):
    """Choose one move for the supplied body using a fresh solver."""
    try:
        grid = _grid_config(request.grid)
        solver = Solver(grid, strategy=SolverStrategy(request.strategy.value))
    except MalformedGridError as e:
        raise HTTPException(status_code=400, detail=str(e))

    body = [_position(p) for p in request.body]
    target = _position(request.target) if request.target else None
    try:
        solver.init(body)
        direction = solver.make_move(body, target)
    except DesynchronizationError as e:
        raise HTTPException(status_code=409, detail=str(e))

    next_position = body[0].step(direction)
    return MoveResponse(
        direction=direction.value,
        next_position=PositionSchema(**next_position.to_dict())
    )


@router.post("/path", response_model=PathResponse)
async def request_path(request: PathRequest):
    """Run a single A* query."""
    try:
        grid = _grid_config(request.grid)
    except MalformedGridError as e:
        raise HTTPException(status_code=400, detail=str(e))

    start = _position(request.start)
    goal = _position(request.goal)
    if not (grid.contains(start) and grid.contains(goal)):
        raise HTTPException(status_code=400, detail="Start and goal must lie on the grid")

    searcher = Searcher(grid)
    try:
        path = searcher.find_path(start, goal, [_position(p) for p in request.obstacles])
    except PathNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return PathResponse(
        path=[PositionSchema(**p.to_dict()) for p in path],
        length=len(path),
        expanded=searcher.expanded_count,
    )
