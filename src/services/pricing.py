"""Order pricing calculations."""

from collections.abc import Iterable, Mapping
from typing import Any

from src.services.catalog_service import unit_price

# A recurring order is billed for four weekly deliveries up front
RECURRING_MULTIPLIER = 4


def line_subtotal(item: Mapping[str, Any]) -> float:
    """Price of a single line item: unit price times quantity."""
    return unit_price(item["size"]) * item["quantity"]


def compute_total(
    items: Iterable[Mapping[str, Any]],
    is_recurring: bool,
    donation_amount: float,
) -> float:
    """Compute the total price of a cart or order.

    Args:
        items: Line items with ``size`` and ``quantity``.
        is_recurring: Whether the product total is multiplied for a recurring order.
        donation_amount: Free-form donation added on top of the products.

    Returns:
        float: Product total (times RECURRING_MULTIPLIER when recurring) plus
            the donation. Not rounded.
    """
    base = sum(line_subtotal(item) for item in items)
    product_total = base * RECURRING_MULTIPLIER if is_recurring else base
    return product_total + donation_amount
