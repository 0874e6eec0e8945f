# src/gs_order/infrastructure/db_models.py
"""SQLAlchemy ORM models for orders and order_lines (DDL reference only; queries use raw SQL)."""

from datetime import datetime

from sqlalchemy import (
    BigInteger,
    CheckConstraint,
    DateTime,
    ForeignKey,
    Integer,
    String,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column

from src.gs_common.database import Base


class OrderORM(Base):
    __tablename__ = "orders"
    __table_args__ = (
        CheckConstraint("total_amount_cents >= 0", name="ck_orders_total_non_negative"),
        CheckConstraint(
            "status IN ('Pending', 'Shipped', 'Delivered', 'Cancelled')",
            name="ck_orders_status",
        ),
    )

    id: Mapped[str] = mapped_column(String(32), primary_key=True)
    user_id: Mapped[str] = mapped_column(String(32), ForeignKey("users.id"), nullable=False)
    total_amount_cents: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="Pending")
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )


class OrderLineORM(Base):
    __tablename__ = "order_lines"
    __table_args__ = (
        CheckConstraint("quantity > 0", name="ck_order_lines_quantity_positive"),
        CheckConstraint("unit_price_cents >= 0", name="ck_order_lines_price_non_negative"),
    )

    # Composite primary key doubles as the UNIQUE(order_id, game_id) constraint
    order_id: Mapped[str] = mapped_column(
        String(32), ForeignKey("orders.id"), primary_key=True
    )
    game_id: Mapped[str] = mapped_column(
        String(32), ForeignKey("games.id"), primary_key=True
    )
    quantity: Mapped[int] = mapped_column(Integer, nullable=False)
    unit_price_cents: Mapped[int] = mapped_column(BigInteger, nullable=False)
