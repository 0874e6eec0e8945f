"""InventoryLedger: per-game stock counts with a configurable negative-stock policy.

debit() is the only mutator and is called by the ConsistencyEngine inside the
same atomic unit as the order line that caused it. Mutual exclusion per
game_id is the engine's job; atomicity of the single update is the repository's.
"""

import logging

from src.gs_common.database import DbSession
from src.gs_common.datetime_utils import utc_now
from src.gs_common.enums import NegativeStockPolicy
from src.gs_common.errors import (
    InsufficientStockError,
    StockLevelExistsError,
    StockLevelNotFoundError,
)
from src.gs_inventory.domain.models import StockLevel
from src.gs_inventory.domain.repository import StockRepositoryProtocol
from src.gs_rules.quantity import check_line_quantity, check_stock_quantity

logger = logging.getLogger(__name__)


class InventoryLedger:
    def __init__(
        self,
        repo: StockRepositoryProtocol,
        policy: NegativeStockPolicy = NegativeStockPolicy.ALLOW,
    ) -> None:
        self._repo = repo
        self.policy = policy

    async def initialize(self, game_id: str, quantity: int, db: DbSession) -> StockLevel:
        check_stock_quantity(quantity)
        if await self._repo.get(game_id, db) is not None:
            raise StockLevelExistsError(game_id)
        level = StockLevel(game_id=game_id, quantity=quantity, updated_at=utc_now())
        await self._repo.save(level, db)
        return level

    async def get(self, game_id: str, db: DbSession) -> StockLevel:
        level = await self._repo.get(game_id, db)
        if level is None:
            raise StockLevelNotFoundError(game_id)
        return level

    async def debit(self, game_id: str, amount: int, db: DbSession) -> StockLevel:
        check_line_quantity(amount)
        allow_negative = self.policy is NegativeStockPolicy.ALLOW
        level = await self._repo.debit(game_id, amount, allow_negative, db)
        if level is None:
            current = await self.get(game_id, db)
            raise InsufficientStockError(game_id, amount, current.quantity)
        if level.quantity < 0:
            logger.warning("Stock for game %s went negative: %d", game_id, level.quantity)
        return level
