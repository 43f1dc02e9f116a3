"""Cart business logic service."""

import logging
import time
from typing import Any

from src.core.config import get_settings
from src.core.store import KeyValueStore, get_store
from src.models.catalog import OrderSize
from src.models.order import Cart, LineItem
from src.services.catalog_service import CatalogService

logger = logging.getLogger(__name__)

CART_ITEMS_KEY = "cart"
CART_ID_KEY = "cart_id"
DONATION_KEY = "donation_amount"


def generate_cart_id(prefix: str | None = None) -> str:
    """Generate a short, roughly chronological cart number.

    Args:
        prefix: Number prefix. Defaults to the configured cart_id_prefix.

    Returns:
        str: e.g. ``LW-482913`` (last six digits of the epoch milliseconds).
    """
    if prefix is None:
        prefix = get_settings().cart_id_prefix
    millis = time.time_ns() // 1_000_000
    return f"{prefix}-{str(millis)[-6:]}"


def is_amount(value: Any) -> bool:
    """Check for a stored dollar amount (int or float, never bool)."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_order_size(value: Any) -> bool:
    """Check that a stored size is one of the OrderSize values."""
    if not isinstance(value, str):
        return False
    try:
        OrderSize(value)
    except ValueError:
        return False
    return True


def is_valid_line_item(item: Any) -> bool:
    """Check that a stored cart or order line has the expected shape.

    A valid line has string ``product_id`` and ``product_name``, a known
    ``size`` and a positive integer ``quantity``.
    """
    if not isinstance(item, dict):
        return False
    if not isinstance(item.get("product_id"), str) or not isinstance(item.get("product_name"), str):
        return False
    quantity = item.get("quantity")
    if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
        return False
    return is_order_size(item.get("size"))


class CartService:
    """Service for the active customer's cart."""

    def __init__(
        self,
        store: KeyValueStore | None = None,
        catalog: CatalogService | None = None,
    ) -> None:
        """Initialize cart service.

        Args:
            store: Optional key-value store for testing.
            catalog: Optional catalog service for testing.
        """
        self.store = store if store is not None else get_store()
        self.catalog = catalog or CatalogService()

    def _load_items(self) -> list[LineItem]:
        items = self.store.get(CART_ITEMS_KEY, [])
        if not isinstance(items, list):
            logger.warning("Malformed cart record in store, using an empty cart")
            return []
        valid = [item for item in items if is_valid_line_item(item)]
        if len(valid) != len(items):
            logger.warning("Dropping %d malformed cart line(s) from store", len(items) - len(valid))
        return valid

    def _load_cart_id(self) -> str | None:
        cart_id = self.store.get(CART_ID_KEY)
        if cart_id is not None and not isinstance(cart_id, str):
            logger.warning("Malformed cart id in store, ignoring it")
            return None
        return cart_id

    def _load_donation(self) -> float:
        amount = self.store.get(DONATION_KEY, 0)
        if not is_amount(amount):
            logger.warning("Malformed donation amount in store, using 0")
            return 0
        return amount

    def get_cart(self) -> Cart:
        """Get the current cart state.

        Returns:
            Cart: cart_id, items and donation_amount.
        """
        return {
            "cart_id": self._load_cart_id(),
            "items": self._load_items(),
            "donation_amount": self._load_donation(),
        }

    def add_item(self, product_id: str, size: OrderSize | str, quantity: int) -> Cart:
        """Add a product to the cart, merging with an existing line.

        Unknown products are ignored, as is a non-positive quantity for a
        line not yet in the cart. The first addition assigns a cart id.

        Args:
            product_id: Catalog product ID.
            size: Order size of the line.
            quantity: Units to add.

        Returns:
            Cart: The updated cart.
        """
        product = self.catalog.get_product(product_id)
        if not product:
            logger.debug("Ignoring add for unknown product %s", product_id)
            return self.get_cart()

        size = OrderSize(size)
        items = self._load_items()
        existing = next(
            (item for item in items if item["product_id"] == product_id and item["size"] == size),
            None,
        )
        if existing is None and quantity <= 0:
            logger.debug("Ignoring add of %d for %s, not in cart", quantity, product_id)
            return self.get_cart()

        if self._load_cart_id() is None:
            cart_id = generate_cart_id()
            self.store.set(CART_ID_KEY, cart_id)
            logger.info("Started cart %s", cart_id)

        if existing is not None:
            new_quantity = existing["quantity"] + quantity
            if new_quantity <= 0:
                return self.remove_item(product_id, size)
            existing["quantity"] = new_quantity
        else:
            items.append(
                {
                    "product_id": product_id,
                    "product_name": product["name"],
                    "size": size.value,
                    "quantity": quantity,
                }
            )
        self.store.set(CART_ITEMS_KEY, items)
        return self.get_cart()

    def update_quantity(self, product_id: str, size: OrderSize | str, quantity: int) -> Cart:
        """Set a line's quantity, removing the line when quantity <= 0.

        Args:
            product_id: Catalog product ID.
            size: Order size of the line.
            quantity: New quantity (replaces the current one).

        Returns:
            Cart: The updated cart.
        """
        if quantity <= 0:
            return self.remove_item(product_id, size)

        size = OrderSize(size)
        items = self._load_items()
        for item in items:
            if item["product_id"] == product_id and item["size"] == size:
                item["quantity"] = quantity
        self.store.set(CART_ITEMS_KEY, items)
        return self.get_cart()

    def remove_item(self, product_id: str, size: OrderSize | str) -> Cart:
        """Remove a line from the cart.

        Releases the cart id once the cart holds no items and no donation.

        Returns:
            Cart: The updated cart.
        """
        size = OrderSize(size)
        items = [
            item
            for item in self._load_items()
            if not (item["product_id"] == product_id and item["size"] == size)
        ]
        self.store.set(CART_ITEMS_KEY, items)
        if not items and self._load_donation() <= 0:
            self.store.set(CART_ID_KEY, None)
        return self.get_cart()

    def set_donation(self, amount: float) -> Cart:
        """Set the donation amount. The value is stored as given."""
        self.store.set(DONATION_KEY, amount)
        return self.get_cart()

    def clear(self) -> Cart:
        """Empty the cart, reset the donation and release the cart id."""
        self.store.set(CART_ITEMS_KEY, [])
        self.store.set(CART_ID_KEY, None)
        self.store.set(DONATION_KEY, 0)
        return self.get_cart()
