"""Pydantic read models: derived projections, never written back."""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel

from src.gs_common.cents import cents_to_decimal, cents_to_display


class OrderSummary(BaseModel):
    order_id: str
    buyer: str
    order_date: date
    total_amount_cents: int
    total_amount_display: str
    order_status: str
    payment_status: str | None = None  # latest recorded payment, if any
    payment_method: str | None = None


class InventoryStatusItem(BaseModel):
    game_id: str
    title: str
    stock_quantity: int
    price_cents: int
    price_display: str


class GameSalesReport(BaseModel):
    title: str
    total_quantity_sold: int
    total_revenue_cents: int
    total_revenue: Decimal
    total_revenue_display: str

    @classmethod
    def from_cents(cls, title: str, quantity: int, revenue_cents: int) -> "GameSalesReport":
        return cls(
            title=title,
            total_quantity_sold=quantity,
            total_revenue_cents=revenue_cents,
            total_revenue=cents_to_decimal(revenue_cents),
            total_revenue_display=cents_to_display(revenue_cents),
        )
