"""
Async SQLAlchemy engine and session factory.

Uses ``asyncpg`` as the default PostgreSQL driver for non-blocking I/O.
The pool has a fixed capacity (no overflow); callers beyond capacity queue
for a free connection, indefinitely unless ``db_pool_timeout`` is set.

Nothing here is a module-level singleton: the app lifespan builds the engine
and hands the session factory to the repositories.
"""

from __future__ import annotations

import logging

import asyncpg
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from school_locator.config import Settings
from school_locator.domain.entities import StorageError

logger = logging.getLogger(__name__)

# Errors that mean "the database is unreachable or said no".  asyncpg raises
# some of its own (e.g. InvalidPasswordError at connect) without SQLAlchemy
# wrapping them.
DRIVER_ERRORS = (
    SQLAlchemyError,
    OSError,
    asyncpg.PostgresError,
    asyncpg.InterfaceError,
)


class Base(DeclarativeBase):
    """Shared declarative base for all ORM models."""


def build_engine(settings: Settings) -> AsyncEngine:
    return create_async_engine(
        settings.database_url,
        echo=False,
        pool_size=settings.db_pool_size,
        max_overflow=0,
        pool_timeout=settings.db_pool_timeout,
    )


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def verify_connection(engine: AsyncEngine) -> None:
    """Check out one connection, run ``SELECT 1`` and give it back."""
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except DRIVER_ERRORS as exc:
        raise StorageError("Could not connect to the database.") from exc
    logger.info("Successfully connected to the database pool.")


async def create_tables(engine: AsyncEngine) -> None:
    """Create any missing tables.  Existing tables are left untouched."""
    from . import models  # noqa: F401  (registers the mappers on Base)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
