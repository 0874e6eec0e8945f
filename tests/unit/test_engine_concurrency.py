"""Concurrent order lines and payments must serialize per game / per order."""

import asyncio

import pytest

from src.gs_common.enums import NegativeStockPolicy, OrderStatus
from src.gs_common.errors import InsufficientStockError
from src.gs_common.memory_db import MemoryDatabase, MemorySession
from src.gs_engine.engine.engine import ConsistencyEngine
from src.gs_engine.engine.repositories import memory_repositories
from src.gs_inventory.domain.models import StockLevel
from src.gs_inventory.infrastructure.memory import MemoryStockRepository
from src.gs_order.domain.repository import OrderRepositoryProtocol


class YieldingStockRepository(MemoryStockRepository):
    """Suspends between read and write, so an unguarded debit would lose updates."""

    async def debit(
        self, game_id: str, amount: int, allow_negative: bool, db: MemorySession
    ) -> StockLevel | None:
        current = db.tables.stock_levels.get(game_id)
        await asyncio.sleep(0)
        if current is None or (not allow_negative and current.quantity < amount):
            return None
        updated = StockLevel(game_id=game_id, quantity=current.quantity - amount)
        db.put(db.tables.stock_levels, game_id, updated)
        return updated


def _engine(policy: NegativeStockPolicy) -> ConsistencyEngine:
    repos = memory_repositories()
    repos.stock = YieldingStockRepository()
    return ConsistencyEngine(repos, negative_stock_policy=policy)


async def _setup(
    engine: ConsistencyEngine, database: MemoryDatabase, stock: int, orders: int
) -> tuple[str, list[str]]:
    db = database.session()
    user = await engine.register_user(db, "steve", "steve@example.com")
    game = await engine.create_game(db, "Minecraft", None, 1999, "Sandbox", "PC")
    await engine.initialize_stock(db, game.id, stock)
    order_ids = [(await engine.create_order(db, user.id)).id for _ in range(orders)]
    return game.id, order_ids


async def _count_lines(repo: OrderRepositoryProtocol, db: MemorySession, ids: list[str]) -> int:
    return sum([len(await repo.list_lines(order_id, db)) for order_id in ids])


class TestConcurrentOrderLines:
    async def test_reject_policy_no_lost_updates(self) -> None:
        engine = _engine(NegativeStockPolicy.REJECT)
        database = MemoryDatabase()
        game_id, order_ids = await _setup(engine, database, stock=5, orders=4)

        results = await asyncio.gather(
            *(
                engine.add_order_line(database.session(), order_id, game_id, 2, 1999)
                for order_id in order_ids
            ),
            return_exceptions=True,
        )

        succeeded = [r for r in results if not isinstance(r, BaseException)]
        failed = [r for r in results if isinstance(r, BaseException)]
        assert len(succeeded) == 2
        assert all(isinstance(err, InsufficientStockError) for err in failed)
        db = database.session()
        assert (await engine.get_stock(db, game_id)).quantity == 5 - 2 * len(succeeded)
        assert await _count_lines(engine.repos.orders, db, order_ids) == len(succeeded)

    async def test_allow_policy_every_debit_counted(self) -> None:
        engine = _engine(NegativeStockPolicy.ALLOW)
        database = MemoryDatabase()
        game_id, order_ids = await _setup(engine, database, stock=5, orders=6)

        await asyncio.gather(
            *(
                engine.add_order_line(database.session(), order_id, game_id, 3, 1999)
                for order_id in order_ids
            )
        )

        db = database.session()
        assert (await engine.get_stock(db, game_id)).quantity == 5 - 3 * 6
        assert await _count_lines(engine.repos.orders, db, order_ids) == 6


class TestConcurrentPayments:
    async def test_one_status_per_payment(self) -> None:
        engine = ConsistencyEngine(memory_repositories())
        database = MemoryDatabase()
        _, order_ids = await _setup(engine, database, stock=1, orders=1)
        order_id = order_ids[0]

        await asyncio.gather(
            engine.record_payment(database.session(), order_id, "Success", "PayPal", 100),
            engine.record_payment(database.session(), order_id, "Pending", "PayPal", 100),
        )

        db = database.session()
        payments = await engine.repos.payments.list_by_order(order_id, db)
        assert len(payments) == 2
        # the last payment to commit decides the status
        expected = OrderStatus.SHIPPED if payments[-1].status == "Success" else OrderStatus.CANCELLED
        assert (await engine.get_order(db, order_id)).status is expected


class BlockingStockRepository(MemoryStockRepository):
    """Parks every debit until released, so a caller can be cancelled mid-unit."""

    def __init__(self) -> None:
        self.entered = asyncio.Event()
        self.release = asyncio.Event()

    async def debit(
        self, game_id: str, amount: int, allow_negative: bool, db: MemorySession
    ) -> StockLevel | None:
        self.entered.set()
        await self.release.wait()
        return await super().debit(game_id, amount, allow_negative, db)


class TestCancellation:
    async def test_cancelled_line_is_rolled_back(self) -> None:
        repos = memory_repositories()
        stock = BlockingStockRepository()
        repos.stock = stock
        engine = ConsistencyEngine(repos)
        database = MemoryDatabase()
        game_id, [order_id] = await _setup(engine, database, stock=10, orders=1)
        db = database.session()

        task = asyncio.create_task(engine.add_order_line(db, order_id, game_id, 3, 1999))
        await stock.entered.wait()
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

        assert not db.has_pending_changes
        assert database.tables.order_lines == {}
        # a later unit on the same session must not commit the abandoned line
        user_id = (await engine.get_order(db, order_id)).user_id
        await engine.create_order(db, user_id)
        assert await engine.repos.orders.list_lines(order_id, db) == []
        assert (await engine.get_stock(db, game_id)).quantity == 10

    async def test_lock_released_after_cancellation(self) -> None:
        repos = memory_repositories()
        stock = BlockingStockRepository()
        repos.stock = stock
        engine = ConsistencyEngine(repos)
        database = MemoryDatabase()
        game_id, order_ids = await _setup(engine, database, stock=10, orders=2)

        task = asyncio.create_task(
            engine.add_order_line(database.session(), order_ids[0], game_id, 3, 1999)
        )
        await stock.entered.wait()
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

        stock.release.set()
        await engine.add_order_line(database.session(), order_ids[1], game_id, 2, 1999)
        assert (await engine.get_stock(database.session(), game_id)).quantity == 8
