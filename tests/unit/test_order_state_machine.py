"""Tests for payment-driven order status transitions."""

import pytest

from src.gs_common.enums import OrderStatus, PaymentStatus
from src.gs_common.errors import OrderTerminalError
from src.gs_order.domain.state_machine import (
    TERMINAL_STATUSES,
    check_accepts_payment,
    is_terminal,
    status_after_payment,
)


class TestStatusAfterPayment:
    def test_success_ships(self) -> None:
        assert status_after_payment(PaymentStatus.SUCCESS) is OrderStatus.SHIPPED

    def test_pending_cancels(self) -> None:
        assert status_after_payment(PaymentStatus.PENDING) is OrderStatus.CANCELLED


class TestTerminal:
    def test_terminal_set(self) -> None:
        assert TERMINAL_STATUSES == {OrderStatus.DELIVERED, OrderStatus.CANCELLED}

    def test_pending_and_shipped_not_terminal(self) -> None:
        assert not is_terminal(OrderStatus.PENDING)
        assert not is_terminal(OrderStatus.SHIPPED)


class TestCheckAcceptsPayment:
    def test_guard_off_accepts_terminal(self) -> None:
        check_accepts_payment("ord_1", OrderStatus.DELIVERED, guard_terminal=False)

    def test_guard_on_accepts_pending(self) -> None:
        check_accepts_payment("ord_1", OrderStatus.PENDING, guard_terminal=True)

    @pytest.mark.parametrize("status", [OrderStatus.DELIVERED, OrderStatus.CANCELLED])
    def test_guard_on_rejects_terminal(self, status: OrderStatus) -> None:
        with pytest.raises(OrderTerminalError):
            check_accepts_payment("ord_1", status, guard_terminal=True)
