"""FastAPI dependency injection helpers."""

from fastapi import Request

from school_locator.infrastructure.repositories import SchoolRepository


def get_school_repository(request: Request) -> SchoolRepository:
    """Build a repository over the session factory the lifespan created."""
    return SchoolRepository(request.app.state.session_factory)
