"""
Async SQLAlchemy engine and session factory.

Uses ``aiomysql`` as the MySQL driver for non-blocking I/O. The engine is
built once per process by the application lifespan and shared by every
request through the school repository.
"""

from sqlalchemy.engine import URL
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase


def build_engine(url: str | URL, **kwargs) -> AsyncEngine:
    kwargs.setdefault("echo", False)
    kwargs.setdefault("pool_pre_ping", True)
    return create_async_engine(url, **kwargs)


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


class Base(DeclarativeBase):
    """Shared declarative base for all ORM models."""
