"""
Domain entities and errors.

* ``NewSchool``       -- validated, normalised insert payload (no id yet)
* ``School``          -- a persisted row
* ``AnnotatedSchool`` -- a ``School`` plus its distance from a query point;
  built per list request and never stored.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass


class InvalidInput(ValueError):
    """Caller-supplied data failed a shape or range check."""


class StorageError(RuntimeError):
    """The backing store was unreachable or rejected the operation.

    The message is safe to show to callers; the underlying cause is chained
    via ``__cause__`` and only ever logged.
    """


# ── Value Objects ─────────────────────────────────────────────────────


@dataclass(frozen=True)
class Location:
    latitude: float
    longitude: float


@dataclass(frozen=True)
class NewSchool:
    name: str
    address: str
    latitude: float
    longitude: float


# ── Entities ──────────────────────────────────────────────────────────


@dataclass(frozen=True)
class School:
    id: int
    name: str
    address: str
    latitude: float
    longitude: float

    @property
    def location(self) -> Location:
        return Location(self.latitude, self.longitude)


@dataclass(frozen=True)
class AnnotatedSchool:
    school: School
    distance_km: float

    def to_dict(self) -> dict:
        return {**asdict(self.school), "distance_km": self.distance_km}
