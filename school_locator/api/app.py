"""
FastAPI application factory.

* Registers the school and liveness routes.
* Builds the connection pool on startup and verifies it; a pool that cannot
  connect aborts startup instead of serving in a degraded state.
* Logs every inbound request and turns any uncaught exception into a
  generic 500 whose detail only reaches the log.
* Swagger / OpenAPI UI available at ``/docs``.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from school_locator.api.routes import health, schools
from school_locator.config import Settings, settings as default_settings
from school_locator.domain.entities import InvalidInput, StorageError
from school_locator.infrastructure.database import (
    build_engine,
    build_session_factory,
    verify_connection,
)

logger = logging.getLogger(__name__)

LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"

GENERIC_ERROR = "Something went wrong on the server!"
MALFORMED_BODY_ERROR = "Malformed JSON request body."


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open and verify the DB pool on startup; dispose of it on shutdown."""
    engine = build_engine(app.state.settings)
    try:
        await verify_connection(engine)
    except StorageError:
        logger.critical(
            "FATAL ERROR: Failed to connect to the database or start the server.",
            exc_info=True,
        )
        await engine.dispose()
        raise

    app.state.session_factory = build_session_factory(engine)
    yield
    await engine.dispose()


# ── Error handlers ────────────────────────────────────────────────────


async def _invalid_input_handler(request: Request, exc: InvalidInput) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": str(exc)})


async def _storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
    return JSONResponse(status_code=500, content={"error": f"Database error: {exc}"})


async def _malformed_body_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": MALFORMED_BODY_ERROR})


async def _log_and_guard(request: Request, call_next):
    """Audit-log the request, then shield the caller from unhandled errors."""
    target = request.url.path
    if request.url.query:
        target = f"{target}?{request.url.query}"
    logger.info("%s %s", request.method, target)

    try:
        return await call_next(request)
    except Exception:
        logger.exception("An unexpected error occurred")
        return JSONResponse(status_code=500, content={"error": GENERIC_ERROR})


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings
    logging.basicConfig(level=settings.log_level.upper(), format=LOG_FORMAT)

    app = FastAPI(
        title="School Management API",
        description=(
            "Registers schools with their coordinates and lists them "
            "sorted by great-circle distance from a given point."
        ),
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings

    # Error handling
    app.add_exception_handler(InvalidInput, _invalid_input_handler)
    app.add_exception_handler(StorageError, _storage_error_handler)
    app.add_exception_handler(RequestValidationError, _malformed_body_handler)
    app.middleware("http")(_log_and_guard)

    # Routers
    app.include_router(health.router)
    app.include_router(schools.router)

    return app
