"""Session control API endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from autopilot.core.errors import MalformedGridError
from autopilot.core.session_manager import SessionManager, get_session_manager
from autopilot.models.schemas.session import (
    SessionConfigRequest,
    SessionControlResponse,
    SessionSnapshot,
    SessionStatusResponse,
    StepRequest,
)

router = APIRouter(prefix="/session", tags=["Session Control"])


@router.put("/config", response_model=SessionControlResponse)
async def set_configuration(
    request: SessionConfigRequest,
    manager: SessionManager = Depends(get_session_manager)
):
    """Configure the grid and start a fresh session."""
    try:
        manager.set_config_from_dict(request.model_dump(mode="json"))
    except MalformedGridError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return SessionControlResponse(message="Session configured", status=manager.status.name)


@router.get("/status", response_model=SessionStatusResponse)
async def get_session_status(
    manager: SessionManager = Depends(get_session_manager)
):
    """Get current session status."""
    return SessionStatusResponse(**manager.get_status_info())


@router.get("/snapshot", response_model=SessionSnapshot)
async def get_session_snapshot(
    manager: SessionManager = Depends(get_session_manager)
):
    """Get current session state snapshot."""
    snapshot = manager.get_snapshot()
    if not snapshot:
        raise HTTPException(status_code=404, detail="No session configured")
    return SessionSnapshot(**snapshot)


@router.post("/step", response_model=SessionControlResponse)
async def step_session(
    request: StepRequest,
    manager: SessionManager = Depends(get_session_manager)
):
    """Execute one or more ticks."""
    try:
        executed = manager.step(request.ticks)
    except RuntimeError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return SessionControlResponse(
        message=f"{executed} tick(s) executed",
        status=manager.status.name
    )


@router.post("/reset", response_model=SessionControlResponse, status_code=status.HTTP_202_ACCEPTED)
async def reset_session(
    manager: SessionManager = Depends(get_session_manager)
):
    """Reset the session to its initial state."""
    try:
        manager.reset()
    except RuntimeError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return SessionControlResponse(message="Session reset", status=manager.status.name)
