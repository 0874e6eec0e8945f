"""Integer arithmetic utilities for cents-based money.

All prices, totals and payment amounts are int (cents). No float.
Decimal appears only at the reporting edge.
"""

from decimal import Decimal


def cents_to_display(cents: int) -> str:
    """Convert cents to display string: 1999 -> '$19.99', -1200 -> '-$12.00'."""
    if cents < 0:
        abs_cents = -cents
        return f"-${abs_cents // 100:,}.{abs_cents % 100:02d}"
    return f"${cents // 100:,}.{cents % 100:02d}"


def cents_to_decimal(cents: int) -> Decimal:
    """Exact decimal value of a cents amount: 9995 -> Decimal('99.95')."""
    return Decimal(cents).scaleb(-2)


def line_total(quantity: int, unit_price_cents: int) -> int:
    return quantity * unit_price_cents
