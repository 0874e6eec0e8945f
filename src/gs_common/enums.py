"""Global enums: values must match the persisted strings exactly."""

from enum import Enum


class OrderStatus(str, Enum):
    PENDING = "Pending"
    SHIPPED = "Shipped"
    DELIVERED = "Delivered"
    CANCELLED = "Cancelled"


class PaymentStatus(str, Enum):
    """Payment outcome as reported by the caller. FAILED is never stored."""
    SUCCESS = "Success"
    FAILED = "Failed"
    PENDING = "Pending"


class PaymentMethod(str, Enum):
    CREDIT_CARD = "Credit Card"
    DEBIT_CARD = "Debit Card"
    PAYPAL = "PayPal"
    BANK_TRANSFER = "Bank Transfer"


class NegativeStockPolicy(str, Enum):
    ALLOW = "ALLOW"
    REJECT = "REJECT"


class ValidationReason(str, Enum):
    NEGATIVE_PRICE = "NegativePrice"
    PAYMENT_FAILED = "PaymentFailed"
    NON_POSITIVE_QUANTITY = "NonPositiveQuantity"
    NEGATIVE_QUANTITY = "NegativeQuantity"
    NEGATIVE_AMOUNT = "NegativeAmount"
    UNKNOWN_PAYMENT_STATUS = "UnknownPaymentStatus"
    UNKNOWN_PAYMENT_METHOD = "UnknownPaymentMethod"
