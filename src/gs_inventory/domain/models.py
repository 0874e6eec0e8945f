"""Inventory domain model — pure dataclass, no SQLAlchemy dependency."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class StockLevel:
    game_id: str
    quantity: int  # may be negative only under NegativeStockPolicy.ALLOW
    updated_at: datetime | None = None
