"""In-memory OrderRepository over MemoryDatabase."""

from dataclasses import replace

from src.gs_common.errors import DuplicateLineError
from src.gs_common.memory_db import MemorySession
from src.gs_order.domain.models import Order, OrderLine


class MemoryOrderRepository:
    async def save(self, order: Order, db: MemorySession) -> None:
        db.put(db.tables.orders, order.id, replace(order))

    async def get_by_id(self, order_id: str, db: MemorySession) -> Order | None:
        order = db.tables.orders.get(order_id)
        return replace(order) if order else None

    async def update_status(self, order: Order, db: MemorySession) -> None:
        current = db.tables.orders[order.id]
        db.put(
            db.tables.orders,
            order.id,
            replace(current, status=order.status, updated_at=order.updated_at),
        )

    async def list_all(self, db: MemorySession) -> list[Order]:
        return [replace(o) for o in db.tables.orders.values()]

    async def add_line(self, line: OrderLine, db: MemorySession) -> None:
        key = (line.order_id, line.game_id)
        if key in db.tables.order_lines:
            raise DuplicateLineError(line.order_id, line.game_id)
        db.put(db.tables.order_lines, key, line)

    async def list_lines(self, order_id: str, db: MemorySession) -> list[OrderLine]:
        return sorted(
            (line for key, line in db.tables.order_lines.items() if key[0] == order_id),
            key=lambda line: line.game_id,
        )

    async def list_lines_for_games(
        self, game_ids: list[str], db: MemorySession
    ) -> list[OrderLine]:
        wanted = set(game_ids)
        return [line for line in db.tables.order_lines.values() if line.game_id in wanted]
