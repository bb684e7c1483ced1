"""Annotate schools with their distance from a query point and sort them."""

from __future__ import annotations

from typing import Iterable

from .distance import haversine_km
from .entities import AnnotatedSchool, Location, School

DISTANCE_DECIMALS = 2


def annotate(school: School, origin: Location) -> AnnotatedSchool:
    distance = haversine_km(
        origin.latitude, origin.longitude, school.latitude, school.longitude
    )
    return AnnotatedSchool(school=school, distance_km=round(distance, DISTANCE_DECIMALS))


def rank_by_distance(
    schools: Iterable[School], origin: Location
) -> list[AnnotatedSchool]:
    """Return every school annotated with ``distance_km``, nearest first.

    ``sorted`` is stable, so schools at equal rounded distances keep the
    order storage returned them in.
    """
    annotated = [annotate(s, origin) for s in schools]
    return sorted(annotated, key=lambda a: a.distance_km)
