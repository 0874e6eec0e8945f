"""PaymentRepository — raw SQL persistence implementation."""

from typing import Any

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from src.gs_common.enums import PaymentMethod, PaymentStatus
from src.gs_payment.domain.models import Payment

_INSERT_PAYMENT_SQL = text("""
    INSERT INTO payments (id, order_id, status, method, amount_cents, created_at)
    VALUES (:id, :order_id, :status, :method, :amount_cents, :created_at)
""")

_SELECT_COLUMNS = "id, order_id, status, method, amount_cents, created_at"

_LIST_BY_ORDER_SQL = text(f"""
    SELECT {_SELECT_COLUMNS} FROM payments
    WHERE order_id = :order_id
    ORDER BY created_at, id
""")

_GET_LATEST_SQL = text(f"""
    SELECT {_SELECT_COLUMNS} FROM payments
    WHERE order_id = :order_id
    ORDER BY created_at DESC, id DESC
    LIMIT 1
""")


def _row_to_payment(row: Any) -> Payment:
    return Payment(
        id=row.id,
        order_id=row.order_id,
        status=PaymentStatus(row.status),
        method=PaymentMethod(row.method),
        amount_cents=row.amount_cents,
        created_at=row.created_at,
    )


class PaymentRepository:
    """Concrete implementation of PaymentRepositoryProtocol using raw SQL."""

    async def save(self, payment: Payment, db: AsyncSession) -> None:
        await db.execute(
            _INSERT_PAYMENT_SQL,
            {
                "id": payment.id,
                "order_id": payment.order_id,
                "status": payment.status.value,
                "method": payment.method.value,
                "amount_cents": payment.amount_cents,
                "created_at": payment.created_at,
            },
        )

    async def list_by_order(self, order_id: str, db: AsyncSession) -> list[Payment]:
        rows = (await db.execute(_LIST_BY_ORDER_SQL, {"order_id": order_id})).fetchall()
        return [_row_to_payment(row) for row in rows]

    async def get_latest_for_order(
        self, order_id: str, db: AsyncSession
    ) -> Payment | None:
        row = (await db.execute(_GET_LATEST_SQL, {"order_id": order_id})).fetchone()
        return _row_to_payment(row) if row else None
