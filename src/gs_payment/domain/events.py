"""Domain events for gs_payment.

PaymentRecorded is emitted once a payment row is written and is consumed by
the ConsistencyEngine inside the same atomic unit, so the order status can
never lag behind the payment that drives it.
"""

from dataclasses import dataclass
from datetime import datetime

from src.gs_common.enums import PaymentStatus
from src.gs_payment.domain.models import Payment


@dataclass(frozen=True)
class PaymentRecorded:
    payment_id: str
    order_id: str
    status: PaymentStatus
    occurred_at: datetime | None = None

    @classmethod
    def from_payment(cls, payment: Payment) -> "PaymentRecorded":
        return cls(
            payment_id=payment.id,
            order_id=payment.order_id,
            status=payment.status,
            occurred_at=payment.created_at,
        )
