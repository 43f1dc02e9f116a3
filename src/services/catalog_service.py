"""Product catalog lookups."""

from src.models.catalog import PRODUCT_PRICES, PRODUCTS, OrderSize, Product


def unit_price(size: OrderSize | str) -> float:
    """Get the unit price for a size.

    Raises:
        ValueError: If the size is not a known OrderSize.
    """
    return PRODUCT_PRICES[OrderSize(size)]


class CatalogService:
    """Read-only access to the static product catalog."""

    def __init__(self, products: list[Product] | None = None) -> None:
        """Initialize catalog service.

        Args:
            products: Optional product list for testing. Defaults to PRODUCTS.
        """
        self._products = products if products is not None else PRODUCTS
        self._by_id = {product["id"]: product for product in self._products}

    def list_products(self) -> list[Product]:
        """List all products in catalog order."""
        return list(self._products)

    def get_product(self, product_id: str) -> Product | None:
        """Get a product by ID, or None if it is not in the catalog."""
        return self._by_id.get(product_id)

    def prices(self) -> dict[OrderSize, float]:
        """Get the size to unit price table."""
        return dict(PRODUCT_PRICES)
