"""Pydantic request / response schemas for the REST API."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator


# ── Requests ──────────────────────────────────────────────────────────


class SchoolCreateRequest(BaseModel):
    """Body of ``POST /addSchool``.

    Strict: no coercion, so ``"40"`` or ``true`` is not a latitude.  Fields
    are declared in the order they are checked.
    """

    name: str = Field(..., min_length=1)
    address: str = Field(..., min_length=1)
    latitude: float = Field(..., ge=-90, le=90, allow_inf_nan=False)
    longitude: float = Field(..., ge=-180, le=180, allow_inf_nan=False)

    model_config = {"strict": True, "str_strip_whitespace": True}

    @field_validator("latitude", "longitude", mode="before")
    @classmethod
    def _int_fits_float(cls, value: Any) -> Any:
        # JSON integers are unbounded; past float range they are out of bounds anyway
        if isinstance(value, int) and not isinstance(value, bool):
            try:
                return float(value)
            except OverflowError:
                raise ValueError("number too large") from None
        return value


class ReferencePointQuery(BaseModel):
    """``lat`` / ``lon`` query of ``GET /listSchools``, parsed from text."""

    lat: float = Field(..., ge=-90, le=90, allow_inf_nan=False)
    lon: float = Field(..., ge=-180, le=180, allow_inf_nan=False)

    @field_validator("lat", "lon", mode="before")
    @classmethod
    def _plain_decimal(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = value.strip()
            if "_" in value:
                raise ValueError("digit separators are not allowed")
        return value


# ── Responses ─────────────────────────────────────────────────────────


class SchoolCreatedResponse(BaseModel):
    message: str = "School added successfully!"
    schoolId: int


class SchoolWithDistanceResponse(BaseModel):
    id: int
    name: str
    address: str
    latitude: float
    longitude: float
    distance_km: float


class HealthResponse(BaseModel):
    status: str = "ok"


class ErrorResponse(BaseModel):
    error: str
