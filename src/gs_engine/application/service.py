# src/gs_engine/application/service.py
"""Process-wide engine and session wiring for the configured storage backend."""

from config.settings import Settings, settings
from src.gs_common.database import DbSession, get_session_factory
from src.gs_common.enums import NegativeStockPolicy
from src.gs_common.memory_db import MemoryDatabase
from src.gs_engine.engine.engine import ConsistencyEngine
from src.gs_engine.engine.repositories import memory_repositories, sql_repositories

_engine: ConsistencyEngine | None = None
_memory_db: MemoryDatabase | None = None


def build_engine(cfg: Settings) -> ConsistencyEngine:
    repos = memory_repositories() if cfg.STORAGE_BACKEND == "memory" else sql_repositories()
    return ConsistencyEngine(
        repos,
        negative_stock_policy=NegativeStockPolicy(cfg.NEGATIVE_STOCK_POLICY),
        guard_terminal_orders=cfg.GUARD_TERMINAL_ORDERS,
    )


def get_consistency_engine() -> ConsistencyEngine:
    global _engine  # noqa: PLW0603
    if _engine is None:
        _engine = build_engine(settings)
    return _engine


def get_memory_database() -> MemoryDatabase:
    global _memory_db  # noqa: PLW0603
    if _memory_db is None:
        _memory_db = MemoryDatabase()
    return _memory_db


def open_session() -> DbSession:
    """New session for one request; use as `async with open_session() as db:`."""
    if settings.STORAGE_BACKEND == "memory":
        return get_memory_database().session()
    return get_session_factory()()


def reset() -> None:
    """Drop the cached engine and in-memory data (tests, reconfiguration)."""
    global _engine, _memory_db  # noqa: PLW0603
    _engine = None
    _memory_db = None
