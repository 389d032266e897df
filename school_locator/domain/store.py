"""Storage accessor interface used by the school operations."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .entities import School


class SchoolStore(ABC):
    """
    Persistence port for schools.

    Implementations raise :class:`~school_locator.domain.exceptions.StorageFailure`
    for any error coming from the underlying store.
    """

    @abstractmethod
    async def insert_school(self, school: School) -> int:
        """Persist *school* and return its newly assigned id."""

    @abstractmethod
    async def fetch_all_schools(self) -> list[School]:
        """Return every stored school in a stable order."""
