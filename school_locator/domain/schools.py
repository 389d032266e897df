"""
School registration and proximity listing.

Listing algorithm
-----------------
1. Validate the query coordinates (format, then geographic range).
2. Fetch every stored school.
3. Annotate each one with its haversine distance from the query point.
4. Stable-sort ascending by distance, so equally distant schools keep the
   store's fetch order.

Complexity: O(N log N) for N stored schools; there is no spatial index and
no limit, every row is ranked on every request.
"""

from __future__ import annotations

import logging
import re

from .distance import haversine_km
from .entities import Location, RankedSchool, School
from .exceptions import InvalidLocation, OutOfRange
from .store import SchoolStore

logger = logging.getLogger(__name__)

# Optional minus sign, digits, optional fractional part. No exponent, no "+".
COORDINATE_PATTERN = re.compile(r"-?[0-9]+(\.[0-9]+)?")


def parse_location(latitude: str | None, longitude: str | None) -> Location:
    """Turn raw query-string coordinates into a validated :class:`Location`."""
    for raw in (latitude, longitude):
        if raw is None or not COORDINATE_PATTERN.fullmatch(raw):
            raise InvalidLocation()

    location = Location(float(latitude), float(longitude))
    if not location.in_range():
        raise OutOfRange()
    return location


def rank_by_distance(
    schools: list[School], origin: Location
) -> list[RankedSchool]:
    ranked = [
        RankedSchool(
            id=s.id,
            name=s.name,
            address=s.address,
            latitude=s.latitude,
            longitude=s.longitude,
            distance=haversine_km(
                origin.latitude, origin.longitude, s.latitude, s.longitude
            ),
        )
        for s in schools
    ]
    ranked.sort(key=lambda r: r.distance)
    return ranked


async def register_school(store: SchoolStore, school: School) -> int:
    """Range-check *school* and persist it. Returns the new id."""
    if not school.location.in_range():
        raise OutOfRange()

    school_id = await store.insert_school(school)
    logger.info("Registered school %d (%s)", school_id, school.name)
    return school_id


async def list_schools(
    store: SchoolStore, latitude: str | None, longitude: str | None
) -> list[RankedSchool]:
    origin = parse_location(latitude, longitude)
    schools = await store.fetch_all_schools()
    return rank_by_distance(schools, origin)
