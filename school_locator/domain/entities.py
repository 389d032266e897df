"""
Domain entities.

``School`` mirrors a row of the ``schools`` table; ``RankedSchool`` is the
same record annotated with its distance from a query point and only ever
lives for the duration of one listing request.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Optional

# ── Value Object ──────────────────────────────────────────────────────


@dataclass(frozen=True)
class Location:
    latitude: float
    longitude: float

    def in_range(self) -> bool:
        return -90 <= self.latitude <= 90 and -180 <= self.longitude <= 180


# ── Entities ──────────────────────────────────────────────────────────


@dataclass
class School:
    name: str
    address: str
    latitude: float
    longitude: float
    id: Optional[int] = None

    @property
    def location(self) -> Location:
        return Location(self.latitude, self.longitude)


@dataclass
class RankedSchool(School):
    distance: float = 0.0

    def to_dict(self) -> dict:
        return asdict(self)
