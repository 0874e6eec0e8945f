# src/gs_order/infrastructure/persistence.py
"""OrderRepository — raw SQL persistence implementation."""

from typing import Any

from sqlalchemy import bindparam, text
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.gs_common.enums import OrderStatus
from src.gs_common.errors import DuplicateLineError
from src.gs_order.domain.models import Order, OrderLine

# ---------------------------------------------------------------------------
# SQL statements
# ---------------------------------------------------------------------------

_INSERT_ORDER_SQL = text("""
    INSERT INTO orders (id, user_id, total_amount_cents, status, created_at, updated_at)
    VALUES (:id, :user_id, :total_amount_cents, :status, :created_at, :updated_at)
""")

_UPDATE_ORDER_STATUS_SQL = text("""
    UPDATE orders
    SET status = :status, updated_at = :updated_at
    WHERE id = :id
""")

_SELECT_ORDER_COLUMNS = "id, user_id, total_amount_cents, status, created_at, updated_at"

_GET_ORDER_BY_ID_SQL = text(f"""
    SELECT {_SELECT_ORDER_COLUMNS} FROM orders WHERE id = :id
""")

_LIST_ORDERS_SQL = text(f"""
    SELECT {_SELECT_ORDER_COLUMNS} FROM orders ORDER BY created_at, id
""")

_INSERT_LINE_SQL = text("""
    INSERT INTO order_lines (order_id, game_id, quantity, unit_price_cents)
    VALUES (:order_id, :game_id, :quantity, :unit_price_cents)
""")

_SELECT_LINE_COLUMNS = "order_id, game_id, quantity, unit_price_cents"

_LIST_LINES_SQL = text(f"""
    SELECT {_SELECT_LINE_COLUMNS} FROM order_lines
    WHERE order_id = :order_id ORDER BY game_id
""")

_LIST_LINES_FOR_GAMES_SQL = text(f"""
    SELECT {_SELECT_LINE_COLUMNS} FROM order_lines
    WHERE game_id IN :game_ids ORDER BY order_id, game_id
""").bindparams(bindparam("game_ids", expanding=True))


# ---------------------------------------------------------------------------
# Row mappers
# ---------------------------------------------------------------------------


def _row_to_order(row: Any) -> Order:
    return Order(
        id=row.id,
        user_id=row.user_id,
        total_amount_cents=row.total_amount_cents,
        status=OrderStatus(row.status),
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def _row_to_line(row: Any) -> OrderLine:
    return OrderLine(
        order_id=row.order_id,
        game_id=row.game_id,
        quantity=row.quantity,
        unit_price_cents=row.unit_price_cents,
    )


# ---------------------------------------------------------------------------
# Repository
# ---------------------------------------------------------------------------


class OrderRepository:
    """Concrete implementation of OrderRepositoryProtocol using raw SQL."""

    async def save(self, order: Order, db: AsyncSession) -> None:
        await db.execute(
            _INSERT_ORDER_SQL,
            {
                "id": order.id,
                "user_id": order.user_id,
                "total_amount_cents": order.total_amount_cents,
                "status": order.status.value,
                "created_at": order.created_at,
                "updated_at": order.updated_at,
            },
        )

    async def get_by_id(self, order_id: str, db: AsyncSession) -> Order | None:
        row = (await db.execute(_GET_ORDER_BY_ID_SQL, {"id": order_id})).fetchone()
        return _row_to_order(row) if row else None

    async def update_status(self, order: Order, db: AsyncSession) -> None:
        await db.execute(
            _UPDATE_ORDER_STATUS_SQL,
            {"id": order.id, "status": order.status.value, "updated_at": order.updated_at},
        )

    async def list_all(self, db: AsyncSession) -> list[Order]:
        rows = (await db.execute(_LIST_ORDERS_SQL)).fetchall()
        return [_row_to_order(row) for row in rows]

    async def add_line(self, line: OrderLine, db: AsyncSession) -> None:
        try:
            await db.execute(
                _INSERT_LINE_SQL,
                {
                    "order_id": line.order_id,
                    "game_id": line.game_id,
                    "quantity": line.quantity,
                    "unit_price_cents": line.unit_price_cents,
                },
            )
        except IntegrityError as exc:
            raise DuplicateLineError(line.order_id, line.game_id) from exc

    async def list_lines(self, order_id: str, db: AsyncSession) -> list[OrderLine]:
        rows = (await db.execute(_LIST_LINES_SQL, {"order_id": order_id})).fetchall()
        return [_row_to_line(row) for row in rows]

    async def list_lines_for_games(
        self, game_ids: list[str], db: AsyncSession
    ) -> list[OrderLine]:
        if not game_ids:
            return []
        rows = (
            await db.execute(_LIST_LINES_FOR_GAMES_SQL, {"game_ids": list(game_ids)})
        ).fetchall()
        return [_row_to_line(row) for row in rows]
