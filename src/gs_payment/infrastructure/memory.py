"""In-memory PaymentRepository over MemoryDatabase. Dict order is insertion order."""

from dataclasses import replace

from src.gs_common.memory_db import MemorySession
from src.gs_payment.domain.models import Payment


class MemoryPaymentRepository:
    async def save(self, payment: Payment, db: MemorySession) -> None:
        db.put(db.tables.payments, payment.id, replace(payment))

    async def list_by_order(self, order_id: str, db: MemorySession) -> list[Payment]:
        return [replace(p) for p in db.tables.payments.values() if p.order_id == order_id]

    async def get_latest_for_order(
        self, order_id: str, db: MemorySession
    ) -> Payment | None:
        payments = await self.list_by_order(order_id, db)
        return payments[-1] if payments else None
