"""PaymentRepository Protocol — interface contract for persistence layer."""

from typing import Protocol

from src.gs_common.database import DbSession
from src.gs_payment.domain.models import Payment


class PaymentRepositoryProtocol(Protocol):
    async def save(self, payment: Payment, db: DbSession) -> None: ...

    async def list_by_order(self, order_id: str, db: DbSession) -> list[Payment]:
        """Oldest first."""
        ...

    async def get_latest_for_order(self, order_id: str, db: DbSession) -> Payment | None: ...
