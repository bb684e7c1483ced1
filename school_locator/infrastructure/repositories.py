"""
Repository Pattern -- abstracts DB access so domain logic stays DB-agnostic.

Every call opens its own session, which checks out exactly one pooled
connection and returns it when the ``async with`` block exits, on the
success and the failure path alike.  Driver errors are logged here and
re-raised as ``StorageError`` carrying a caller-safe message.
"""

from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from .database import DRIVER_ERRORS
from .models import SchoolModel
from school_locator.domain.entities import NewSchool, School, StorageError

logger = logging.getLogger(__name__)


def _to_entity(row: SchoolModel) -> School:
    return School(
        id=row.id,
        name=row.name,
        address=row.address,
        latitude=row.latitude,
        longitude=row.longitude,
    )


class SchoolRepository:
    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self.session_factory = session_factory

    async def insert(self, school: NewSchool) -> int:
        """Persist one school and return its generated id."""
        try:
            async with self.session_factory() as session:
                row = SchoolModel(
                    name=school.name,
                    address=school.address,
                    latitude=school.latitude,
                    longitude=school.longitude,
                )
                session.add(row)
                await session.commit()
                school_id = row.id
        except DRIVER_ERRORS as exc:
            logger.exception("Error adding school")
            raise StorageError("Failed to add school.") from exc

        logger.info("School added with ID: %s", school_id)
        return school_id

    async def list_all(self) -> list[School]:
        """Return every school in storage order (no ORDER BY)."""
        try:
            async with self.session_factory() as session:
                result = await session.execute(select(SchoolModel))
                rows = list(result.scalars().all())
        except DRIVER_ERRORS as exc:
            logger.exception("Error listing schools")
            raise StorageError("Failed to retrieve schools.") from exc

        return [_to_entity(r) for r in rows]
