"""Shared test fixtures: engines run against the in-memory backend."""

import pytest

from src.gs_common.enums import NegativeStockPolicy
from src.gs_common.memory_db import MemoryDatabase, MemorySession
from src.gs_engine.engine.engine import ConsistencyEngine
from src.gs_engine.engine.repositories import memory_repositories
from src.gs_report.application.service import ReportService


@pytest.fixture
def database() -> MemoryDatabase:
    return MemoryDatabase()


@pytest.fixture
def db(database: MemoryDatabase) -> MemorySession:
    return database.session()


@pytest.fixture
def engine() -> ConsistencyEngine:
    """Reference behavior: stock may go negative, payments always overwrite status."""
    return ConsistencyEngine(memory_repositories())


@pytest.fixture
def strict_engine() -> ConsistencyEngine:
    """Production-leaning behavior: floor stock at zero, guard terminal orders."""
    return ConsistencyEngine(
        memory_repositories(),
        negative_stock_policy=NegativeStockPolicy.REJECT,
        guard_terminal_orders=True,
    )


@pytest.fixture
def reports(engine: ConsistencyEngine) -> ReportService:
    return ReportService(engine.repos)
