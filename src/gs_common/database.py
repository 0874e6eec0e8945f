from typing import TypeAlias

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from config.settings import settings
from src.gs_common.memory_db import MemorySession

# Repositories accept either backend's session; both expose commit()/rollback().
DbSession: TypeAlias = AsyncSession | MemorySession


class Base(DeclarativeBase):
    """Shared declarative base for all ORM models across modules."""

    pass


_engine: AsyncEngine | None = None
_session_factory: async_sessionmaker[AsyncSession] | None = None


def get_engine() -> AsyncEngine:
    """Create the async engine on first use so the memory backend never needs a driver."""
    global _engine  # noqa: PLW0603
    if _engine is None:
        url = settings.DATABASE_URL
        if url.startswith("sqlite"):
            _engine = create_async_engine(url, echo=settings.DEBUG)
        else:
            _engine = create_async_engine(
                url,
                echo=settings.DEBUG,
                pool_size=20,
                max_overflow=10,
            )
    return _engine


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    global _session_factory  # noqa: PLW0603
    if _session_factory is None:
        _session_factory = async_sessionmaker(
            get_engine(),
            class_=AsyncSession,
            expire_on_commit=False,
        )
    return _session_factory


async def create_schema(engine: AsyncEngine | None = None) -> None:
    """Create every table known to Base.metadata (idempotent)."""
    # Imported for their side effect of registering tables on Base.metadata
    import src.gs_catalog.infrastructure.db_models  # noqa: F401
    import src.gs_inventory.infrastructure.db_models  # noqa: F401
    import src.gs_order.infrastructure.db_models  # noqa: F401
    import src.gs_payment.infrastructure.db_models  # noqa: F401
    import src.gs_user.infrastructure.db_models  # noqa: F401

    target = engine or get_engine()
    async with target.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def dispose_engine() -> None:
    global _engine, _session_factory  # noqa: PLW0603
    if _engine is not None:
        await _engine.dispose()
    _engine = None
    _session_factory = None
