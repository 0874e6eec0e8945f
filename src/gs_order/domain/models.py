"""Order domain models — pure dataclasses, no SQLAlchemy dependency."""

from dataclasses import dataclass
from datetime import datetime

from src.gs_common.cents import line_total
from src.gs_common.enums import OrderStatus


@dataclass
class Order:
    id: str
    user_id: str
    total_amount_cents: int = 0
    status: OrderStatus = OrderStatus.PENDING
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class OrderLine:
    """One game within an order. (order_id, game_id) is unique; lines are never edited."""
    order_id: str
    game_id: str
    quantity: int
    unit_price_cents: int  # price snapshot at the time of ordering

    @property
    def subtotal_cents(self) -> int:
        return line_total(self.quantity, self.unit_price_cents)
