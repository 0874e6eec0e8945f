"""In-memory StockRepository over MemoryDatabase."""

from dataclasses import replace

from src.gs_common.datetime_utils import utc_now
from src.gs_common.memory_db import MemorySession
from src.gs_inventory.domain.models import StockLevel


class MemoryStockRepository:
    async def save(self, level: StockLevel, db: MemorySession) -> None:
        db.put(db.tables.stock_levels, level.game_id, replace(level))

    async def get(self, game_id: str, db: MemorySession) -> StockLevel | None:
        level = db.tables.stock_levels.get(game_id)
        return replace(level) if level else None

    async def debit(
        self, game_id: str, amount: int, allow_negative: bool, db: MemorySession
    ) -> StockLevel | None:
        current = db.tables.stock_levels.get(game_id)
        if current is None:
            return None
        if not allow_negative and current.quantity < amount:
            return None
        updated = StockLevel(
            game_id=game_id, quantity=current.quantity - amount, updated_at=utc_now()
        )
        db.put(db.tables.stock_levels, game_id, updated)
        return replace(updated)

    async def list_all(self, db: MemorySession) -> list[StockLevel]:
        return [replace(level) for _, level in sorted(db.tables.stock_levels.items())]
