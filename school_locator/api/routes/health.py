"""
Liveness endpoints
==================

GET /       -- plain-text banner
GET /health -- JSON status

Neither touches the database.
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from school_locator.api.schemas import HealthResponse

router = APIRouter(tags=["health"])

BANNER = "School Management API is running!"


@router.get("/", response_class=PlainTextResponse, summary="Liveness banner")
async def root() -> str:
    return BANNER


@router.get("/health", response_model=HealthResponse, summary="Health check")
async def health():
    return HealthResponse()
