"""
School endpoints
================

POST /addSchool   -- register a school (returns 201 Created)
GET  /listSchools -- every school, nearest to ``lat``/``lon`` first

Validation always completes before the repository is touched.  Domain
errors (``InvalidInput``, ``StorageError``) are turned into responses by the
handlers registered in ``school_locator.api.app``.
"""

from __future__ import annotations

from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, Query

from school_locator.api.dependencies import get_school_repository
from school_locator.api.schemas import (
    ErrorResponse,
    SchoolCreatedResponse,
    SchoolWithDistanceResponse,
)
from school_locator.domain.ranking import rank_by_distance
from school_locator.api.validation import (
    parse_reference_point,
    validate_new_school,
)
from school_locator.infrastructure.repositories import SchoolRepository

router = APIRouter(tags=["schools"])

_ERRORS = {400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}


@router.post(
    "/addSchool",
    status_code=201,
    response_model=SchoolCreatedResponse,
    summary="Register a school",
    responses=_ERRORS,
)
async def add_school(
    payload: Any = Body(default=None),
    repo: SchoolRepository = Depends(get_school_repository),
):
    school = validate_new_school(payload)
    school_id = await repo.insert(school)
    return SchoolCreatedResponse(schoolId=school_id)


@router.get(
    "/listSchools",
    response_model=list[SchoolWithDistanceResponse],
    summary="List schools sorted by distance from a point",
    responses=_ERRORS,
)
async def list_schools(
    lat: Optional[str] = Query(default=None, description="User latitude"),
    lon: Optional[str] = Query(default=None, description="User longitude"),
    repo: SchoolRepository = Depends(get_school_repository),
):
    origin = parse_reference_point(lat, lon)
    schools = await repo.list_all()
    return [a.to_dict() for a in rank_by_distance(schools, origin)]
