"""ConsistencyEngine: the only writer of stock levels and order status.

Each mutating operation is one atomic unit on the caller's session:
validate, write, apply the triggered consequence, commit. Any exception
rolls the session back and propagates, so a rejected call changes nothing.

Triggered consequences:
  add_order_line -> InventoryLedger.debit, after the line insert
  record_payment -> PaymentRecorded -> order status transition
"""
import asyncio
import logging
from collections import defaultdict
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from src.gs_catalog.domain.models import Game
from src.gs_common.database import DbSession
from src.gs_common.datetime_utils import utc_now
from src.gs_common.enums import NegativeStockPolicy, PaymentMethod, PaymentStatus
from src.gs_common.errors import (
    GameNotFoundError,
    OrderNotFoundError,
    UsernameExistsError,
    UserNotFoundError,
)
from src.gs_common.id_generator import generate_id
from src.gs_engine.engine.repositories import Repositories
from src.gs_inventory.domain.ledger import InventoryLedger
from src.gs_inventory.domain.models import StockLevel
from src.gs_order.domain.models import Order, OrderLine
from src.gs_order.domain.state_machine import check_accepts_payment, status_after_payment
from src.gs_payment.domain.events import PaymentRecorded
from src.gs_payment.domain.models import Payment
from src.gs_rules.payment import (
    check_payment_status,
    parse_payment_method,
    parse_payment_status,
)
from src.gs_rules.price import check_amount, check_price
from src.gs_rules.quantity import check_line_quantity, check_stock_quantity
from src.gs_user.domain.models import User

logger = logging.getLogger(__name__)


@asynccontextmanager
async def atomic_unit(db: DbSession) -> AsyncIterator[None]:
    """Commit on success; roll back and re-raise on any exception, cancellation included."""
    try:
        yield
        await db.commit()
    except BaseException:
        await db.rollback()
        raise


class ConsistencyEngine:
    def __init__(
        self,
        repos: Repositories,
        negative_stock_policy: NegativeStockPolicy = NegativeStockPolicy.ALLOW,
        guard_terminal_orders: bool = False,
    ) -> None:
        self.repos = repos
        self.ledger = InventoryLedger(repos.stock, negative_stock_policy)
        self.guard_terminal_orders = guard_terminal_orders
        self._game_locks: dict[str, asyncio.Lock] = defaultdict(asyncio.Lock)
        self._order_locks: dict[str, asyncio.Lock] = defaultdict(asyncio.Lock)

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    async def get_user(self, db: DbSession, user_id: str) -> User:
        user = await self.repos.users.get_by_id(user_id, db)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    async def get_game(self, db: DbSession, game_id: str) -> Game:
        game = await self.repos.games.get_by_id(game_id, db)
        if game is None:
            raise GameNotFoundError(game_id)
        return game

    async def get_order(self, db: DbSession, order_id: str) -> Order:
        order = await self.repos.orders.get_by_id(order_id, db)
        if order is None:
            raise OrderNotFoundError(order_id)
        return order

    async def get_stock(self, db: DbSession, game_id: str) -> StockLevel:
        return await self.ledger.get(game_id, db)

    # ------------------------------------------------------------------
    # Users and catalog
    # ------------------------------------------------------------------

    async def register_user(self, db: DbSession, username: str, email: str) -> User:
        async with atomic_unit(db):
            if await self.repos.users.get_by_username(username, db) is not None:
                raise UsernameExistsError(username)
            user = User(
                id=generate_id("usr_"), username=username, email=email, created_at=utc_now()
            )
            await self.repos.users.save(user, db)
        logger.info("Registered user %s (%s)", user.id, username)
        return user

    async def create_game(
        self,
        db: DbSession,
        title: str,
        description: str | None,
        price_cents: int,
        genre: str,
        platform: str,
        image_path: str | None = None,
    ) -> Game:
        check_price(price_cents)
        game = Game(
            id=generate_id("game_"),
            title=title,
            description=description,
            price_cents=price_cents,
            genre=genre,
            platform=platform,
            image_path=image_path,
            created_at=utc_now(),
        )
        async with atomic_unit(db):
            await self.repos.games.save(game, db)
        logger.info("Created game %s %r at %d cents", game.id, title, price_cents)
        return game

    # ------------------------------------------------------------------
    # Inventory
    # ------------------------------------------------------------------

    async def initialize_stock(self, db: DbSession, game_id: str, quantity: int) -> StockLevel:
        check_stock_quantity(quantity)
        async with self._game_locks[game_id]:
            async with atomic_unit(db):
                await self.get_game(db, game_id)
                level = await self.ledger.initialize(game_id, quantity, db)
        logger.info("Initialized stock for game %s: %d", game_id, quantity)
        return level

    # ------------------------------------------------------------------
    # Orders
    # ------------------------------------------------------------------

    async def create_order(
        self, db: DbSession, user_id: str, total_amount_cents: int = 0
    ) -> Order:
        check_amount(total_amount_cents)
        async with atomic_unit(db):
            await self.get_user(db, user_id)
            now = utc_now()
            order = Order(
                id=generate_id("ord_"),
                user_id=user_id,
                total_amount_cents=total_amount_cents,
                created_at=now,
                updated_at=now,
            )
            await self.repos.orders.save(order, db)
        logger.info("Created order %s for user %s", order.id, user_id)
        return order

    async def add_order_line(
        self,
        db: DbSession,
        order_id: str,
        game_id: str,
        quantity: int,
        unit_price_cents: int,
    ) -> OrderLine:
        """Insert the line and debit its game's stock as one atomic unit.

        The debit runs only after the insert succeeded; if the debit fails the
        insert is rolled back with it.
        """
        check_line_quantity(quantity)
        check_price(unit_price_cents)
        line = OrderLine(
            order_id=order_id,
            game_id=game_id,
            quantity=quantity,
            unit_price_cents=unit_price_cents,
        )
        async with self._game_locks[game_id]:
            async with atomic_unit(db):
                await self.get_order(db, order_id)
                await self.get_game(db, game_id)
                await self.repos.orders.add_line(line, db)
                level = await self.ledger.debit(game_id, quantity, db)
        logger.info(
            "Order %s: added %d x game %s, stock now %d",
            order_id,
            quantity,
            game_id,
            level.quantity,
        )
        return line

    # ------------------------------------------------------------------
    # Payments
    # ------------------------------------------------------------------

    async def record_payment(
        self,
        db: DbSession,
        order_id: str,
        status: PaymentStatus | str,
        method: PaymentMethod | str,
        amount_cents: int,
    ) -> Payment:
        payment_status = parse_payment_status(status)
        if payment_status is PaymentStatus.FAILED:
            logger.warning("Rejected failed payment for order %s", order_id)
        check_payment_status(order_id, payment_status)
        payment_method = parse_payment_method(method)
        check_amount(amount_cents)

        async with self._order_locks[order_id]:
            async with atomic_unit(db):
                order = await self.get_order(db, order_id)
                check_accepts_payment(order.id, order.status, self.guard_terminal_orders)
                payment = Payment(
                    id=generate_id("pay_"),
                    order_id=order_id,
                    status=payment_status,
                    method=payment_method,
                    amount_cents=amount_cents,
                    created_at=utc_now(),
                )
                await self.repos.payments.save(payment, db)
                await self._on_payment_recorded(PaymentRecorded.from_payment(payment), order, db)
        return payment

    async def _on_payment_recorded(
        self, event: PaymentRecorded, order: Order, db: DbSession
    ) -> None:
        previous = order.status
        order.status = status_after_payment(event.status)
        order.updated_at = utc_now()
        await self.repos.orders.update_status(order, db)
        logger.info(
            "Order %s: %s -> %s (payment %s %s)",
            order.id,
            previous.value,
            order.status.value,
            event.payment_id,
            event.status.value,
        )
