"""Payment input checks.

Failed is part of the PaymentStatus domain but is never a storable state:
it is turned into PaymentFailedError here, before anything is written.
"""

from src.gs_common.enums import PaymentMethod, PaymentStatus
from src.gs_common.errors import (
    PaymentFailedError,
    UnknownPaymentMethodError,
    UnknownPaymentStatusError,
)


def parse_payment_status(value: PaymentStatus | str) -> PaymentStatus:
    try:
        return PaymentStatus(value)
    except ValueError:
        raise UnknownPaymentStatusError(str(value)) from None


def parse_payment_method(value: PaymentMethod | str) -> PaymentMethod:
    try:
        return PaymentMethod(value)
    except ValueError:
        raise UnknownPaymentMethodError(str(value)) from None


def check_payment_status(order_id: str, status: PaymentStatus) -> None:
    """Raise PaymentFailedError for FAILED; SUCCESS and PENDING pass."""
    if status is PaymentStatus.FAILED:
        raise PaymentFailedError(order_id)
