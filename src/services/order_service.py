"""Order business logic service."""

import logging
import random
import string
import time
from datetime import datetime, timezone
from typing import Any

from src.core.store import KeyValueStore, get_store
from src.models.catalog import GROUP_NAMES, GroupName, OrderSize
from src.models.order import DeliveryOption, Order
from src.services.cart_service import CartService, generate_cart_id, is_amount, is_valid_line_item
from src.services.pricing import RECURRING_MULTIPLIER, compute_total

logger = logging.getLogger(__name__)

ORDERS_KEY = "orders"

# Fields fixed at creation; updates never overwrite them
IMMUTABLE_FIELDS = frozenset({"id", "order_date", "total_price"})

_ID_ALPHABET = string.ascii_lowercase + string.digits


def generate_order_id() -> str:
    """Generate an order ID like ``order-1718040000000-k3x9a``."""
    millis = time.time_ns() // 1_000_000
    suffix = "".join(random.choices(_ID_ALPHABET, k=5))
    return f"order-{millis}-{suffix}"


_TEXT_FIELDS = (
    "id",
    "customer_name",
    "customer_contact",
    "order_date",
    "order_number",
    "zelle_confirmation_number",
)


def is_valid_order(order: Any) -> bool:
    """Check that a stored order record has every field with the right type."""
    if not isinstance(order, dict):
        return False
    if not all(isinstance(order.get(field), str) for field in _TEXT_FIELDS):
        return False
    try:
        datetime.fromisoformat(order["order_date"])
        GroupName(order.get("assigned_group"))
    except ValueError:
        return False
    if not isinstance(order.get("is_fulfilled"), bool) or not isinstance(order.get("is_recurring"), bool):
        return False
    if not is_amount(order.get("donation_amount")) or not is_amount(order.get("total_price")):
        return False
    if order.get("delivery_option") not in ("Pickup", "Delivery"):
        return False
    address = order.get("delivery_address")
    if address is not None and not isinstance(address, str):
        return False
    items = order.get("items")
    return isinstance(items, list) and all(is_valid_line_item(item) for item in items)


class OrderService:
    """Service for submitted orders and their fulfillment state."""

    def __init__(
        self,
        store: KeyValueStore | None = None,
        cart_service: CartService | None = None,
    ) -> None:
        """Initialize order service.

        Args:
            store: Optional key-value store for testing.
            cart_service: Optional cart service; defaults to one on the same store.
        """
        self.store = store if store is not None else get_store()
        self.cart_service = cart_service or CartService(store=self.store)

    def _load_orders(self) -> list[Order]:
        orders = self.store.get(ORDERS_KEY, [])
        if not isinstance(orders, list):
            logger.error("Malformed orders record in store, using an empty order list")
            return []
        valid = [order for order in orders if is_valid_order(order)]
        if len(valid) != len(orders):
            logger.error("Dropping %d malformed order record(s) from store", len(orders) - len(valid))
        return valid

    def _save_orders(self, orders: list[Order]) -> None:
        self.store.set(ORDERS_KEY, orders)

    def create_order(
        self,
        customer_name: str,
        customer_contact: str,
        delivery_option: DeliveryOption,
        delivery_address: str | None,
        zelle_confirmation_number: str,
        is_recurring: bool,
    ) -> Order:
        """Submit the current cart as a new order and clear the cart.

        The order number is the cart id, or a freshly generated one when the
        cart never got an id. The fulfillment group is drawn at random and is
        unrelated to the upcoming schedule.

        Args:
            customer_name: Customer full name.
            customer_contact: Phone or email.
            delivery_option: "Pickup" or "Delivery".
            delivery_address: Address for deliveries.
            zelle_confirmation_number: Payment reference entered by the customer.
            is_recurring: Whether the order repeats weekly for four weeks.

        Returns:
            Order: The created order.
        """
        cart = self.cart_service.get_cart()
        order_number = cart["cart_id"] or generate_cart_id()
        items = [dict(item) for item in cart["items"]]
        donation_amount = cart["donation_amount"]

        order: Order = {
            "id": generate_order_id(),
            "customer_name": customer_name,
            "customer_contact": customer_contact,
            "items": items,
            "donation_amount": donation_amount,
            "assigned_group": random.choice(GROUP_NAMES),
            "order_date": datetime.now(timezone.utc).isoformat(),
            "is_fulfilled": False,
            "total_price": compute_total(items, is_recurring, donation_amount),
            "delivery_option": delivery_option,
            "delivery_address": delivery_address,
            "order_number": order_number,
            "zelle_confirmation_number": zelle_confirmation_number,
            "is_recurring": is_recurring,
        }

        orders = self._load_orders()
        orders.append(order)
        self._save_orders(orders)
        self.cart_service.clear()

        logger.info(
            "Order %s (%s) created for %s, total %.2f",
            order["id"],
            order_number,
            order["assigned_group"],
            order["total_price"],
        )
        return order

    def get_order(self, order_id: str) -> Order | None:
        """Get an order by ID, or None if not found."""
        return next((order for order in self._load_orders() if order["id"] == order_id), None)

    def list_orders(self, is_fulfilled: bool | None = None) -> list[Order]:
        """List orders in submission order.

        Args:
            is_fulfilled: When set, only orders with this fulfillment state.

        Returns:
            list[Order]: Matching orders.
        """
        orders = self._load_orders()
        if is_fulfilled is None:
            return orders
        return [order for order in orders if bool(order.get("is_fulfilled")) == is_fulfilled]

    def update_order(self, order_id: str, fields: dict[str, Any]) -> Order | None:
        """Merge fields into an order and recompute its total.

        Unknown order IDs are ignored. ``id``, ``order_date`` and
        ``total_price`` cannot be set through this method.

        Args:
            order_id: The order's ID.
            fields: Partial order fields to overwrite.

        Returns:
            Order | None: The updated order, or None if not found.
        """
        orders = self._load_orders()
        for index, order in enumerate(orders):
            if order["id"] != order_id:
                continue
            changes = {key: value for key, value in fields.items() if key not in IMMUTABLE_FIELDS}
            merged = {**order, **changes}
            merged["total_price"] = compute_total(
                merged["items"],
                merged["is_recurring"],
                merged["donation_amount"],
            )
            orders[index] = merged
            self._save_orders(orders)
            logger.info("Order %s updated (%s)", order_id, ", ".join(sorted(changes)) or "no changes")
            return merged

        logger.warning("Update ignored, order not found: %s", order_id)
        return None

    def toggle_fulfilled(self, order_id: str) -> Order | None:
        """Flip an order's fulfillment state.

        Returns:
            Order | None: The updated order, or None if not found.
        """
        orders = self._load_orders()
        for order in orders:
            if order["id"] == order_id:
                order["is_fulfilled"] = not order["is_fulfilled"]
                self._save_orders(orders)
                logger.info(
                    "Order %s marked as %s",
                    order_id,
                    "fulfilled" if order["is_fulfilled"] else "pending",
                )
                return order

        logger.warning("Fulfillment toggle ignored, order not found: %s", order_id)
        return None

    def production_summary(self) -> dict[str, dict[OrderSize, int]]:
        """Units to prepare per product and size across unfulfilled orders.

        Recurring orders count RECURRING_MULTIPLIER times their quantities.

        Returns:
            dict: product_name -> {OrderSize: units}, every size present.
        """
        summary: dict[str, dict[OrderSize, int]] = {}
        for order in self.list_orders(is_fulfilled=False):
            multiplier = RECURRING_MULTIPLIER if order["is_recurring"] else 1
            for item in order["items"]:
                sizes = summary.setdefault(item["product_name"], {size: 0 for size in OrderSize})
                sizes[OrderSize(item["size"])] += item["quantity"] * multiplier
        return summary
