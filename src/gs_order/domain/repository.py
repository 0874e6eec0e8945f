# src/gs_order/domain/repository.py
"""OrderRepository Protocol — orders and their lines live behind one repository."""

from typing import Protocol

from src.gs_common.database import DbSession
from src.gs_order.domain.models import Order, OrderLine


class OrderRepositoryProtocol(Protocol):
    async def save(self, order: Order, db: DbSession) -> None: ...

    async def get_by_id(self, order_id: str, db: DbSession) -> Order | None: ...

    async def update_status(self, order: Order, db: DbSession) -> None: ...

    async def list_all(self, db: DbSession) -> list[Order]: ...

    async def add_line(self, line: OrderLine, db: DbSession) -> None:
        """Insert a line; raises DuplicateLineError if (order_id, game_id) exists."""
        ...

    async def list_lines(self, order_id: str, db: DbSession) -> list[OrderLine]: ...

    async def list_lines_for_games(
        self, game_ids: list[str], db: DbSession
    ) -> list[OrderLine]: ...
