from src.gs_common.errors import NegativeQuantityError, NonPositiveQuantityError


def check_line_quantity(quantity: int) -> None:
    """Raise NonPositiveQuantityError unless an order line asks for at least one unit."""
    if quantity <= 0:
        raise NonPositiveQuantityError(quantity)


def check_stock_quantity(quantity: int) -> None:
    """Raise NegativeQuantityError for an initial stock count below zero."""
    if quantity < 0:
        raise NegativeQuantityError(quantity)
