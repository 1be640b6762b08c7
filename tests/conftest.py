"""Pytest fixtures shared across unit and API tests."""

from __future__ import annotations

import os

# Settings are read at import time by the api modules
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ["RATE_LIMIT_ENABLED"] = "false"

from typing import Any, AsyncIterator, Awaitable, Callable

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event, func, select
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from swap_split.database.connection import get_session, init_db, make_session_factory


@pytest_asyncio.fixture
async def engine() -> AsyncIterator[AsyncEngine]:
    """Isolated in-memory SQLite database per test, foreign keys enforced."""
    engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)

    @event.listens_for(engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection: Any, connection_record: Any) -> None:
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    await init_db(engine)
    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker:
    return make_session_factory(engine)


@pytest_asyncio.fixture
async def session(session_factory: async_sessionmaker) -> AsyncIterator[AsyncSession]:
    async with session_factory() as session:
        yield session


@pytest.fixture
def count_rows(session_factory: async_sessionmaker) -> Callable[[Any], Awaitable[int]]:
    """Count rows of a mapped table through a fresh session."""

    async def _count(model: Any) -> int:
        async with session_factory() as fresh:
            result = await fresh.execute(select(func.count()).select_from(model))
            return int(result.scalar_one())

    return _count


@pytest_asyncio.fixture
async def client(session_factory: async_sessionmaker) -> AsyncIterator[AsyncClient]:
    """HTTP client against the app with get_session bound to the test database."""
    from swap_split.api.main import app

    async def _override_session() -> AsyncIterator[AsyncSession]:
        async with session_factory() as request_session:
            yield request_session

    app.dependency_overrides[get_session] = _override_session
    try:
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as http:
            yield http
    finally:
        app.dependency_overrides.clear()
