"""SQLAlchemy ORM model for the payments table (DDL reference only; queries use raw SQL).

'Failed' is deliberately absent from the status CHECK: failed payments are
rejected before they reach the table.
"""

from datetime import datetime

from sqlalchemy import BigInteger, CheckConstraint, DateTime, ForeignKey, String, func
from sqlalchemy.orm import Mapped, mapped_column

from src.gs_common.database import Base


class PaymentORM(Base):
    __tablename__ = "payments"
    __table_args__ = (
        CheckConstraint("status IN ('Success', 'Pending')", name="ck_payments_status"),
        CheckConstraint(
            "method IN ('Credit Card', 'Debit Card', 'PayPal', 'Bank Transfer')",
            name="ck_payments_method",
        ),
    )

    id: Mapped[str] = mapped_column(String(32), primary_key=True)
    order_id: Mapped[str] = mapped_column(
        String(32), ForeignKey("orders.id"), nullable=False, index=True
    )
    status: Mapped[str] = mapped_column(String(20), nullable=False)
    method: Mapped[str] = mapped_column(String(20), nullable=False)
    amount_cents: Mapped[int] = mapped_column(BigInteger, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
