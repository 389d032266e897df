"""
Repository Pattern -- SQL implementation of the ``SchoolStore`` port.

The repository owns the session factory and opens one short-lived
``AsyncSession`` per call. Driver errors never leak past this module: they
are rolled back and re-raised as ``StorageFailure`` with the driver's own
message.
"""

from __future__ import annotations

import logging

from sqlalchemy import select, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from .models import SchoolModel
from school_locator.domain.entities import School
from school_locator.domain.exceptions import StorageFailure
from school_locator.domain.store import SchoolStore

logger = logging.getLogger(__name__)


def _describe(exc: SQLAlchemyError) -> str:
    orig = getattr(exc, "orig", None)
    return str(orig) if orig is not None else str(exc)


class SchoolRepository(SchoolStore):
    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self.session_factory = session_factory

    async def insert_school(self, school: School) -> int:
        async with self.session_factory() as session:
            row = SchoolModel(
                name=school.name,
                address=school.address,
                latitude=school.latitude,
                longitude=school.longitude,
            )
            try:
                session.add(row)
                await session.commit()
            except SQLAlchemyError as exc:
                await session.rollback()
                logger.error("Insert into schools failed: %s", _describe(exc))
                raise StorageFailure(_describe(exc)) from exc
            return row.id

    async def fetch_all_schools(self) -> list[School]:
        async with self.session_factory() as session:
            try:
                result = await session.execute(
                    select(SchoolModel).order_by(SchoolModel.id)
                )
                rows = result.scalars().all()
            except SQLAlchemyError as exc:
                logger.error("Select from schools failed: %s", _describe(exc))
                raise StorageFailure(_describe(exc)) from exc

        return [
            School(
                id=r.id,
                name=r.name,
                address=r.address,
                latitude=r.latitude,
                longitude=r.longitude,
            )
            for r in rows
        ]

    async def ping(self) -> None:
        """Round-trip ``SELECT 1``; raises ``StorageFailure`` if unreachable."""
        async with self.session_factory() as session:
            try:
                await session.execute(text("SELECT 1"))
            except SQLAlchemyError as exc:
                raise StorageFailure(_describe(exc)) from exc
