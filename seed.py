"""
Seed script -- creates the schools table and populates it with sample data.

Run with the same DB_* environment as the API:
    python seed.py

Creates (only when the table is empty):
  - 8 sample schools spread around Philadelphia
"""

import asyncio
import sys

from sqlalchemy import func, select

from school_locator.config import settings
from school_locator.domain.entities import NewSchool, StorageError
from school_locator.infrastructure.database import (
    build_engine,
    build_session_factory,
    create_tables,
)
from school_locator.infrastructure.models import SchoolModel
from school_locator.infrastructure.repositories import SchoolRepository


SCHOOLS = [
    NewSchool("Central High School", "1700 W Olney Ave, Philadelphia, PA", 40.0384, -75.1473),
    NewSchool("Masterman School", "1699 Spring Garden St, Philadelphia, PA", 39.9627, -75.1673),
    NewSchool("Science Leadership Academy", "550 N 22nd St, Philadelphia, PA", 39.9658, -75.1751),
    NewSchool("Northeast High School", "1601 Cottman Ave, Philadelphia, PA", 40.0553, -75.0716),
    NewSchool("Lincoln High School", "3201 Ryan Ave, Philadelphia, PA", 40.0356, -75.0441),
    NewSchool("Girls' High School", "1400 W Olney Ave, Philadelphia, PA", 40.0388, -75.1420),
    NewSchool("Cherry Hill High School East", "1750 Kresson Rd, Cherry Hill, NJ", 39.8977, -74.9707),
    NewSchool("Lower Merion High School", "315 E Montgomery Ave, Ardmore, PA", 40.0070, -75.2874),
]


async def seed() -> None:
    engine = build_engine(settings)
    try:
        await create_tables(engine)
        session_factory = build_session_factory(engine)

        async with session_factory() as session:
            count = await session.scalar(select(func.count()).select_from(SchoolModel))
        if count:
            print("Database already seeded. Skipping.")
            return

        repo = SchoolRepository(session_factory)
        for school in SCHOOLS:
            await repo.insert(school)
        print(f"  Created {len(SCHOOLS)} schools")
    finally:
        await engine.dispose()


if __name__ == "__main__":
    try:
        asyncio.run(seed())
    except StorageError as exc:
        print(f"Seeding failed: {exc}", file=sys.stderr)
        sys.exit(1)
