"""Unified error codes and custom exceptions.

Error code ranges:
  1xxx: User
  2xxx: Catalog
  3xxx: Inventory
  4xxx: Order
  6xxx: Validation (rejected before anything is persisted)

http_status is a hint for whatever layer sits in front of the engine.
"""

from src.gs_common.enums import ValidationReason


class AppError(Exception):
    """Base application error."""

    def __init__(
        self,
        code: int,
        message: str,
        http_status: int = 500,
    ) -> None:
        self.code = code
        self.message = message
        self.http_status = http_status
        super().__init__(message)


class NotFoundError(AppError):
    """A referenced user, game, order or stock level does not exist."""

    def __init__(self, code: int, entity: str, key: str) -> None:
        self.entity = entity
        self.key = key
        super().__init__(code, f"{entity} not found: {key}", 404)


class ValidationError(AppError):
    """Invalid input, rejected before any row is written."""

    def __init__(self, code: int, reason: ValidationReason, message: str) -> None:
        self.reason = reason
        super().__init__(code, message, 422)


# --- 1xxx: User ---

class UsernameExistsError(AppError):
    def __init__(self, username: str) -> None:
        super().__init__(1001, f"Username already exists: {username}", 409)


class UserNotFoundError(NotFoundError):
    def __init__(self, user_id: str) -> None:
        super().__init__(1002, "User", user_id)


# --- 2xxx: Catalog ---

class GameNotFoundError(NotFoundError):
    def __init__(self, key: str) -> None:
        super().__init__(2001, "Game", key)


# --- 3xxx: Inventory ---

class InsufficientStockError(AppError):
    def __init__(self, game_id: str, requested: int, available: int) -> None:
        self.game_id = game_id
        self.requested = requested
        self.available = available
        super().__init__(
            3001,
            f"Insufficient stock for game {game_id}: requested {requested}, available {available}",
            409,
        )


class StockLevelNotFoundError(NotFoundError):
    def __init__(self, game_id: str) -> None:
        super().__init__(3002, "Stock level", game_id)


class StockLevelExistsError(AppError):
    def __init__(self, game_id: str) -> None:
        super().__init__(3003, f"Stock level already initialized for game {game_id}", 409)


# --- 4xxx: Order ---

class OrderNotFoundError(NotFoundError):
    def __init__(self, order_id: str) -> None:
        super().__init__(4001, "Order", order_id)


class DuplicateLineError(AppError):
    def __init__(self, order_id: str, game_id: str) -> None:
        self.order_id = order_id
        self.game_id = game_id
        super().__init__(4002, f"Order {order_id} already has a line for game {game_id}", 409)


class OrderTerminalError(AppError):
    def __init__(self, order_id: str, status: str) -> None:
        super().__init__(4003, f"Order {order_id} in status {status} accepts no payments", 422)


# --- 6xxx: Validation ---

class NegativePriceError(ValidationError):
    def __init__(self, price_cents: int) -> None:
        super().__init__(
            6001, ValidationReason.NEGATIVE_PRICE, f"Price must not be negative, got {price_cents}"
        )


class PaymentFailedError(ValidationError):
    def __init__(self, order_id: str) -> None:
        super().__init__(
            6002, ValidationReason.PAYMENT_FAILED, f"Payment failed for order {order_id}"
        )


class NonPositiveQuantityError(ValidationError):
    def __init__(self, quantity: int) -> None:
        super().__init__(
            6003,
            ValidationReason.NON_POSITIVE_QUANTITY,
            f"Quantity must be greater than 0, got {quantity}",
        )


class NegativeQuantityError(ValidationError):
    def __init__(self, quantity: int) -> None:
        super().__init__(
            6004,
            ValidationReason.NEGATIVE_QUANTITY,
            f"Stock quantity must not be negative, got {quantity}",
        )


class NegativeAmountError(ValidationError):
    def __init__(self, amount_cents: int) -> None:
        super().__init__(
            6005, ValidationReason.NEGATIVE_AMOUNT, f"Amount must not be negative, got {amount_cents}"
        )


class UnknownPaymentStatusError(ValidationError):
    def __init__(self, value: str) -> None:
        super().__init__(
            6006, ValidationReason.UNKNOWN_PAYMENT_STATUS, f"Unknown payment status: {value}"
        )


class UnknownPaymentMethodError(ValidationError):
    def __init__(self, value: str) -> None:
        super().__init__(
            6007, ValidationReason.UNKNOWN_PAYMENT_METHOD, f"Unknown payment method: {value}"
        )
