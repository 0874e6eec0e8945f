"""StockRepository — raw SQL persistence implementation.

debit() is a single UPDATE ... RETURNING, so concurrent debits on one row
serialize in the database. A result of 0 rows means the row is missing or,
under the REJECT policy, that stock would have gone negative.
"""

from typing import Any

from sqlalchemy import text
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.gs_common.errors import StockLevelExistsError
from src.gs_inventory.domain.models import StockLevel

_INSERT_STOCK_SQL = text("""
    INSERT INTO stock_levels (game_id, quantity, updated_at)
    VALUES (:game_id, :quantity, :updated_at)
""")

_GET_STOCK_SQL = text("""
    SELECT game_id, quantity, updated_at FROM stock_levels WHERE game_id = :game_id
""")

_DEBIT_SQL = text("""
    UPDATE stock_levels
    SET quantity = quantity - :amount,
        updated_at = CURRENT_TIMESTAMP
    WHERE game_id = :game_id
    RETURNING game_id, quantity, updated_at
""")

_DEBIT_FLOOR_ZERO_SQL = text("""
    UPDATE stock_levels
    SET quantity = quantity - :amount,
        updated_at = CURRENT_TIMESTAMP
    WHERE game_id = :game_id AND quantity >= :amount
    RETURNING game_id, quantity, updated_at
""")

_LIST_STOCK_SQL = text("""
    SELECT game_id, quantity, updated_at FROM stock_levels ORDER BY game_id
""")


def _row_to_stock(row: Any) -> StockLevel:
    return StockLevel(
        game_id=row.game_id,
        quantity=row.quantity,
        updated_at=row.updated_at,
    )


class StockRepository:
    """Concrete implementation of StockRepositoryProtocol using raw SQL."""

    async def save(self, level: StockLevel, db: AsyncSession) -> None:
        try:
            await db.execute(
                _INSERT_STOCK_SQL,
                {
                    "game_id": level.game_id,
                    "quantity": level.quantity,
                    "updated_at": level.updated_at,
                },
            )
        except IntegrityError as exc:
            raise StockLevelExistsError(level.game_id) from exc

    async def get(self, game_id: str, db: AsyncSession) -> StockLevel | None:
        row = (await db.execute(_GET_STOCK_SQL, {"game_id": game_id})).fetchone()
        return _row_to_stock(row) if row else None

    async def debit(
        self, game_id: str, amount: int, allow_negative: bool, db: AsyncSession
    ) -> StockLevel | None:
        sql = _DEBIT_SQL if allow_negative else _DEBIT_FLOOR_ZERO_SQL
        row = (await db.execute(sql, {"game_id": game_id, "amount": amount})).fetchone()
        return _row_to_stock(row) if row else None

    async def list_all(self, db: AsyncSession) -> list[StockLevel]:
        rows = (await db.execute(_LIST_STOCK_SQL)).fetchall()
        return [_row_to_stock(row) for row in rows]
