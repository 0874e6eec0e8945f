"""ReportService: read-only projections over users, games, stock, orders and payments.

Runs outside any atomic unit; each query sees whatever is committed (SQL) or
current (memory) at the time it runs.
"""

from src.gs_common.cents import cents_to_display
from src.gs_common.database import DbSession
from src.gs_common.datetime_utils import utc_date, utc_now
from src.gs_common.errors import GameNotFoundError, OrderNotFoundError
from src.gs_engine.engine.repositories import Repositories
from src.gs_order.domain.models import Order
from src.gs_report.application.schemas import (
    GameSalesReport,
    InventoryStatusItem,
    OrderSummary,
)


class ReportService:
    def __init__(self, repos: Repositories) -> None:
        self._repos = repos

    async def order_summary(self, db: DbSession, order_id: str) -> OrderSummary:
        order = await self._repos.orders.get_by_id(order_id, db)
        if order is None:
            raise OrderNotFoundError(order_id)
        return await self._summarize(db, order)

    async def list_order_summaries(self, db: DbSession) -> list[OrderSummary]:
        orders = await self._repos.orders.list_all(db)
        return [await self._summarize(db, order) for order in orders]

    async def _summarize(self, db: DbSession, order: Order) -> OrderSummary:
        user = await self._repos.users.get_by_id(order.user_id, db)
        payment = await self._repos.payments.get_latest_for_order(order.id, db)
        return OrderSummary(
            order_id=order.id,
            # Orders always reference a user; fall back to the id if it was removed out-of-band
            buyer=user.username if user else order.user_id,
            order_date=utc_date(order.created_at or utc_now()),
            total_amount_cents=order.total_amount_cents,
            total_amount_display=cents_to_display(order.total_amount_cents),
            order_status=order.status.value,
            payment_status=payment.status.value if payment else None,
            payment_method=payment.method.value if payment else None,
        )

    async def inventory_status(self, db: DbSession) -> list[InventoryStatusItem]:
        """One row per game; a game without a stock row reports 0."""
        games = await self._repos.games.list_all(db)
        levels = {level.game_id: level.quantity for level in await self._repos.stock.list_all(db)}
        return [
            InventoryStatusItem(
                game_id=game.id,
                title=game.title,
                stock_quantity=levels.get(game.id, 0),
                price_cents=game.price_cents,
                price_display=cents_to_display(game.price_cents),
            )
            for game in games
        ]

    async def game_sales(self, db: DbSession, title: str) -> GameSalesReport:
        """Totals over every order line of every game with this title."""
        games = await self._repos.games.list_by_title(title, db)
        if not games:
            raise GameNotFoundError(title)
        lines = await self._repos.orders.list_lines_for_games([g.id for g in games], db)
        quantity = sum(line.quantity for line in lines)
        revenue = sum(line.subtotal_cents for line in lines)
        return GameSalesReport.from_cents(title, quantity, revenue)
