"""API router aggregator."""

from fastapi import APIRouter

from autopilot.api.v1 import session, navigation

api_router = APIRouter()

api_router.include_router(session.router)
api_router.include_router(navigation.router)
