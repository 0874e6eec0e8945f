"""Integration-test fixtures.

The SQL repositories run against an in-process SQLite database (aiosqlite),
one fresh schema per test. StaticPool keeps the single :memory: connection
alive for the whole test.
"""

from collections.abc import AsyncIterator

import pytest_asyncio
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from src.gs_common.database import create_schema


@pytest_asyncio.fixture
async def sql_engine() -> AsyncIterator[AsyncEngine]:
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await create_schema(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session(sql_engine: AsyncEngine) -> AsyncIterator[AsyncSession]:
    factory = async_sessionmaker(sql_engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as db:
        yield db
