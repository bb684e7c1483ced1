"""
Request validation for the school endpoints.

The pydantic models in ``school_locator.api.schemas`` do the checking; this
module turns their ``ValidationError`` into ``InvalidInput`` carrying the
message for the first failing field.  Errors are never aggregated, and
nothing here touches storage, so a rejected request leaves no partial write.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from pydantic import ValidationError

from school_locator.api.schemas import ReferencePointQuery, SchoolCreateRequest
from school_locator.domain.entities import InvalidInput, Location, NewSchool

NAME_ERROR = "Invalid or missing school name."
ADDRESS_ERROR = "Invalid or missing school address."
LATITUDE_ERROR = "Invalid or missing latitude. Must be a number between -90 and 90."
LONGITUDE_ERROR = (
    "Invalid or missing longitude. Must be a number between -180 and 180."
)
QUERY_LAT_ERROR = (
    "Invalid or missing query parameter: user latitude (lat). "
    "Must be a number between -90 and 90."
)
QUERY_LON_ERROR = (
    "Invalid or missing query parameter: user longitude (lon). "
    "Must be a number between -180 and 180."
)

_SCHOOL_MESSAGES = {
    "name": NAME_ERROR,
    "address": ADDRESS_ERROR,
    "latitude": LATITUDE_ERROR,
    "longitude": LONGITUDE_ERROR,
}
_QUERY_MESSAGES = {"lat": QUERY_LAT_ERROR, "lon": QUERY_LON_ERROR}


def _first_error(exc: ValidationError, messages: Mapping[str, str], default: str) -> InvalidInput:
    """pydantic reports errors in field declaration order; keep only the first."""
    loc = exc.errors()[0]["loc"]
    return InvalidInput(messages.get(loc[0], default) if loc else default)


def validate_new_school(payload: Any) -> NewSchool:
    """Validate an ``/addSchool`` body and return it trimmed and typed.

    A body that is not a JSON object fails at the model level, which is
    reported as the name error.
    """
    try:
        body = SchoolCreateRequest.model_validate(payload)
    except ValidationError as exc:
        raise _first_error(exc, _SCHOOL_MESSAGES, NAME_ERROR) from None

    return NewSchool(
        name=body.name,
        address=body.address,
        latitude=body.latitude,
        longitude=body.longitude,
    )


def parse_reference_point(lat: Optional[str], lon: Optional[str]) -> Location:
    """Parse the ``lat`` / ``lon`` query strings of ``/listSchools``."""
    try:
        query = ReferencePointQuery.model_validate({"lat": lat, "lon": lon})
    except ValidationError as exc:
        raise _first_error(exc, _QUERY_MESSAGES, QUERY_LAT_ERROR) from None
    return Location(query.lat, query.lon)
