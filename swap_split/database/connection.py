"""
Database Connection
مدیریت اتصال به دیتابیس
"""

import logging
from functools import lru_cache
from typing import AsyncIterator, Optional

from sqlalchemy.ext.asyncio import (
    AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine,
)

from swap_split.core.config import async_database_url, get_settings
from swap_split.database.models import Base

logger = logging.getLogger(__name__)


@lru_cache()
def get_engine() -> AsyncEngine:
    """ساخت Engine (یک بار برای هر پروسه)"""
    settings = get_settings()
    return create_async_engine(
        async_database_url(settings.database_url),
        echo=settings.debug,  # لاگ SQL فقط در حالت DEBUG
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_pre_ping=True,
    )


def make_session_factory(engine: AsyncEngine) -> async_sessionmaker:
    """Session Factory"""
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@lru_cache()
def get_session_factory() -> async_sessionmaker:
    return make_session_factory(get_engine())


async def init_db(engine: Optional[AsyncEngine] = None):
    """ساخت جداول در دیتابیس"""
    engine = engine or get_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables created")


async def get_session() -> AsyncIterator[AsyncSession]:
    """گرفتن یک Session جدید"""
    async with get_session_factory()() as session:
        yield session
