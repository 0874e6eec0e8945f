from src.gs_common.errors import NegativeAmountError, NegativePriceError


def check_price(price_cents: int) -> None:
    """Raise NegativePriceError if price is below zero. Zero (free) is allowed."""
    if price_cents < 0:
        raise NegativePriceError(price_cents)


def check_amount(amount_cents: int) -> None:
    """Raise NegativeAmountError for order totals and payment amounts below zero."""
    if amount_cents < 0:
        raise NegativeAmountError(amount_cents)
