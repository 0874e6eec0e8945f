"""SQLAlchemy ORM model for the stock_levels table (DDL reference only; queries use raw SQL).

No CHECK on quantity: NegativeStockPolicy.ALLOW lets it drop below zero.
"""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column

from src.gs_common.database import Base


class StockLevelORM(Base):
    __tablename__ = "stock_levels"

    game_id: Mapped[str] = mapped_column(
        String(32), ForeignKey("games.id"), primary_key=True
    )
    quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
