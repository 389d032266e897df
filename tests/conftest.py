"""
Shared test fixtures.

Uses an in-memory SQLite database (via aiosqlite) so tests run without a
MySQL server.  A fresh engine is built per test so every test starts from
an empty ``schools`` table.
"""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool

from school_locator.api.middleware import limiter
from school_locator.infrastructure.database import (
    Base,
    build_engine,
    build_session_factory,
)
from school_locator.infrastructure.repositories import SchoolRepository


# ── Test DB (SQLite in-memory) ────────────────────────────────────────

TEST_DB_URL = "sqlite+aiosqlite:///:memory:"


# ── Fixtures ──────────────────────────────────────────────────────────


@pytest.fixture(autouse=True)
def reset_rate_limits():
    """Every test starts with a fresh per-client request budget."""
    limiter.reset()
    yield
    limiter.reset()


@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create tables, yield the engine, then drop everything."""
    test_engine = build_engine(TEST_DB_URL, poolclass=StaticPool)
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield test_engine

    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await test_engine.dispose()


@pytest_asyncio.fixture
async def session_factory(engine) -> async_sessionmaker[AsyncSession]:
    return build_session_factory(engine)


@pytest_asyncio.fixture
async def repository(session_factory) -> SchoolRepository:
    return SchoolRepository(session_factory)


@pytest_asyncio.fixture
async def client(repository) -> AsyncGenerator[AsyncClient, None]:
    """AsyncClient backed by SQLite through the real repository."""
    from school_locator.api.app import create_app

    app = create_app(store=repository)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
