"""
Shared test fixtures.

Uses a file-backed SQLite database (via aiosqlite) so tests run without
Docker / PostgreSQL.  A file rather than ``:memory:`` keeps SQLAlchemy on a
real queue pool, which lets tests check that connections are returned.
"""

from pathlib import Path
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from school_locator.api.app import create_app
from school_locator.api.dependencies import get_school_repository
from school_locator.config import Settings
from school_locator.infrastructure.database import (
    build_session_factory,
    create_tables,
)
from school_locator.infrastructure.repositories import SchoolRepository


def sqlite_url(path: Path) -> str:
    return f"sqlite+aiosqlite:///{path}"


# ── Fixtures ──────────────────────────────────────────────────────────


@pytest_asyncio.fixture
async def engine(tmp_path: Path) -> AsyncGenerator[AsyncEngine, None]:
    """Engine over a fresh database that already has the schools table."""
    eng = create_async_engine(sqlite_url(tmp_path / "schools.db"), echo=False)
    await create_tables(eng)
    yield eng
    await eng.dispose()


@pytest_asyncio.fixture
async def bare_engine(tmp_path: Path) -> AsyncGenerator[AsyncEngine, None]:
    """Engine over an empty database: every query fails with 'no such table'."""
    eng = create_async_engine(sqlite_url(tmp_path / "empty.db"), echo=False)
    yield eng
    await eng.dispose()


@pytest.fixture
def repository(engine: AsyncEngine) -> SchoolRepository:
    return SchoolRepository(build_session_factory(engine))


@pytest.fixture
def broken_repository(bare_engine: AsyncEngine) -> SchoolRepository:
    return SchoolRepository(build_session_factory(bare_engine))


@pytest.fixture
def app():
    return create_app(Settings())


@pytest_asyncio.fixture
async def client(app, repository) -> AsyncGenerator[AsyncClient, None]:
    """AsyncClient whose routes talk to the SQLite-backed repository."""
    app.dependency_overrides[get_school_repository] = lambda: repository

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
