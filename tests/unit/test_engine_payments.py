"""ConsistencyEngine: payment recording and the status it propagates to the order."""

import pytest

from src.gs_common.enums import OrderStatus, PaymentMethod, PaymentStatus, ValidationReason
from src.gs_common.errors import (
    NegativeAmountError,
    OrderNotFoundError,
    OrderTerminalError,
    PaymentFailedError,
    UnknownPaymentMethodError,
    UnknownPaymentStatusError,
)
from src.gs_common.memory_db import MemorySession
from src.gs_engine.engine.engine import ConsistencyEngine
from src.gs_order.domain.models import Order


async def _order(engine: ConsistencyEngine, db: MemorySession) -> Order:
    user = await engine.register_user(db, "steve", "steve@example.com")
    return await engine.create_order(db, user.id, total_amount_cents=1999)


async def _force_status(
    engine: ConsistencyEngine, db: MemorySession, order: Order, status: OrderStatus
) -> None:
    """Stand-in for the external collaborator that marks orders Delivered."""
    order.status = status
    await engine.repos.orders.update_status(order, db)
    await db.commit()


class TestRecordPayment:
    async def test_success_ships_order(self, engine: ConsistencyEngine, db: MemorySession) -> None:
        order = await _order(engine, db)
        payment = await engine.record_payment(
            db, order.id, PaymentStatus.SUCCESS, PaymentMethod.CREDIT_CARD, 1999
        )
        assert payment.id.startswith("pay_")
        assert (await engine.get_order(db, order.id)).status is OrderStatus.SHIPPED
        assert await engine.repos.payments.list_by_order(order.id, db) == [payment]

    async def test_pending_cancels_order(
        self, engine: ConsistencyEngine, db: MemorySession
    ) -> None:
        order = await _order(engine, db)
        await engine.record_payment(db, order.id, PaymentStatus.PENDING, PaymentMethod.PAYPAL, 1999)
        assert (await engine.get_order(db, order.id)).status is OrderStatus.CANCELLED

    async def test_accepts_plain_strings(
        self, engine: ConsistencyEngine, db: MemorySession
    ) -> None:
        order = await _order(engine, db)
        payment = await engine.record_payment(db, order.id, "Success", "Bank Transfer", 1999)
        assert payment.status is PaymentStatus.SUCCESS
        assert payment.method is PaymentMethod.BANK_TRANSFER

    async def test_failed_rejected_nothing_written(
        self, engine: ConsistencyEngine, db: MemorySession
    ) -> None:
        order = await _order(engine, db)
        with pytest.raises(PaymentFailedError) as exc_info:
            await engine.record_payment(
                db, order.id, PaymentStatus.FAILED, PaymentMethod.DEBIT_CARD, 1999
            )
        assert exc_info.value.reason is ValidationReason.PAYMENT_FAILED
        assert db.tables.payments == {}
        assert (await engine.get_order(db, order.id)).status is OrderStatus.PENDING

    async def test_failed_rejected_even_after_success(
        self, engine: ConsistencyEngine, db: MemorySession
    ) -> None:
        order = await _order(engine, db)
        await engine.record_payment(db, order.id, "Success", "PayPal", 1999)
        with pytest.raises(PaymentFailedError):
            await engine.record_payment(db, order.id, "Failed", "PayPal", 1999)
        assert (await engine.get_order(db, order.id)).status is OrderStatus.SHIPPED
        assert len(db.tables.payments) == 1

    async def test_unknown_order(self, engine: ConsistencyEngine, db: MemorySession) -> None:
        with pytest.raises(OrderNotFoundError):
            await engine.record_payment(db, "ord_missing", "Success", "PayPal", 100)
        assert db.tables.payments == {}

    async def test_unknown_status(self, engine: ConsistencyEngine, db: MemorySession) -> None:
        order = await _order(engine, db)
        with pytest.raises(UnknownPaymentStatusError):
            await engine.record_payment(db, order.id, "Refunded", "PayPal", 100)

    async def test_unknown_method(self, engine: ConsistencyEngine, db: MemorySession) -> None:
        order = await _order(engine, db)
        with pytest.raises(UnknownPaymentMethodError):
            await engine.record_payment(db, order.id, "Success", "Cash", 100)
        assert (await engine.get_order(db, order.id)).status is OrderStatus.PENDING

    async def test_negative_amount(self, engine: ConsistencyEngine, db: MemorySession) -> None:
        order = await _order(engine, db)
        with pytest.raises(NegativeAmountError):
            await engine.record_payment(db, order.id, "Success", "PayPal", -1)
        assert db.tables.payments == {}

    async def test_logs_transition(
        self, engine: ConsistencyEngine, db: MemorySession, caplog: pytest.LogCaptureFixture
    ) -> None:
        order = await _order(engine, db)
        with caplog.at_level("INFO"):
            await engine.record_payment(db, order.id, "Success", "PayPal", 1999)
        assert "Pending -> Shipped" in caplog.text


class TestRepeatedPayments:
    async def test_second_payment_overwrites(
        self, engine: ConsistencyEngine, db: MemorySession
    ) -> None:
        order = await _order(engine, db)
        await engine.record_payment(db, order.id, "Success", "PayPal", 1999)
        await engine.record_payment(db, order.id, "Pending", "PayPal", 1999)
        assert (await engine.get_order(db, order.id)).status is OrderStatus.CANCELLED
        assert len(await engine.repos.payments.list_by_order(order.id, db)) == 2

    async def test_delivered_order_regresses_without_guard(
        self, engine: ConsistencyEngine, db: MemorySession
    ) -> None:
        order = await _order(engine, db)
        await _force_status(engine, db, order, OrderStatus.DELIVERED)
        await engine.record_payment(db, order.id, "Success", "PayPal", 1999)
        assert (await engine.get_order(db, order.id)).status is OrderStatus.SHIPPED

    async def test_guard_rejects_delivered(
        self, strict_engine: ConsistencyEngine, db: MemorySession
    ) -> None:
        order = await _order(strict_engine, db)
        await _force_status(strict_engine, db, order, OrderStatus.DELIVERED)
        with pytest.raises(OrderTerminalError):
            await strict_engine.record_payment(db, order.id, "Success", "PayPal", 1999)
        assert db.tables.payments == {}
        assert (await strict_engine.get_order(db, order.id)).status is OrderStatus.DELIVERED

    async def test_guard_rejects_after_cancellation(
        self, strict_engine: ConsistencyEngine, db: MemorySession
    ) -> None:
        order = await _order(strict_engine, db)
        await strict_engine.record_payment(db, order.id, "Pending", "PayPal", 1999)
        with pytest.raises(OrderTerminalError):
            await strict_engine.record_payment(db, order.id, "Success", "PayPal", 1999)
        assert (await strict_engine.get_order(db, order.id)).status is OrderStatus.CANCELLED

    async def test_guard_allows_shipped_to_move(
        self, strict_engine: ConsistencyEngine, db: MemorySession
    ) -> None:
        order = await _order(strict_engine, db)
        await strict_engine.record_payment(db, order.id, "Success", "PayPal", 1999)
        await strict_engine.record_payment(db, order.id, "Pending", "PayPal", 1999)
        assert (await strict_engine.get_order(db, order.id)).status is OrderStatus.CANCELLED
