"""StockRepository Protocol — interface contract for persistence layer."""

from typing import Protocol

from src.gs_common.database import DbSession
from src.gs_inventory.domain.models import StockLevel


class StockRepositoryProtocol(Protocol):
    async def save(self, level: StockLevel, db: DbSession) -> None: ...

    async def get(self, game_id: str, db: DbSession) -> StockLevel | None: ...

    async def debit(
        self, game_id: str, amount: int, allow_negative: bool, db: DbSession
    ) -> StockLevel | None:
        """Atomically subtract amount. None when the row is missing or, with
        allow_negative=False, when quantity < amount (nothing changes then)."""
        ...

    async def list_all(self, db: DbSession) -> list[StockLevel]: ...
