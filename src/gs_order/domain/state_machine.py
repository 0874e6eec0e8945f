"""Order status transitions driven by payment outcome.

    Pending --Success--> Shipped
    Pending --other----> Cancelled

Delivered is set by collaborators outside this engine. Transitions overwrite
whatever status the order has unless the terminal guard is switched on.
"""

from src.gs_common.enums import OrderStatus, PaymentStatus
from src.gs_common.errors import OrderTerminalError

TERMINAL_STATUSES: frozenset[OrderStatus] = frozenset(
    {OrderStatus.DELIVERED, OrderStatus.CANCELLED}
)


def is_terminal(status: OrderStatus) -> bool:
    return status in TERMINAL_STATUSES


def status_after_payment(payment_status: PaymentStatus) -> OrderStatus:
    """Success ships the order; any other recorded outcome (i.e. Pending) cancels it."""
    if payment_status is PaymentStatus.SUCCESS:
        return OrderStatus.SHIPPED
    return OrderStatus.CANCELLED


def check_accepts_payment(order_id: str, status: OrderStatus, guard_terminal: bool) -> None:
    """Raise OrderTerminalError when the guard is on and the order is terminal."""
    if guard_terminal and is_terminal(status):
        raise OrderTerminalError(order_id, status.value)
