"""Payment domain model — pure dataclass, no SQLAlchemy dependency."""

from dataclasses import dataclass
from datetime import datetime

from src.gs_common.enums import PaymentMethod, PaymentStatus


@dataclass
class Payment:
    id: str
    order_id: str
    status: PaymentStatus  # never FAILED once persisted
    method: PaymentMethod
    amount_cents: int
    created_at: datetime | None = None
