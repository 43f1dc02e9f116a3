"""Record and catalog type definitions."""

from src.models.catalog import GROUP_NAMES, PRODUCT_PRICES, PRODUCTS, GroupName, OrderSize, Product
from src.models.order import Cart, DeliveryOption, LineItem, Order, OrderUpdate

__all__ = [
    "Cart",
    "DeliveryOption",
    "GROUP_NAMES",
    "GroupName",
    "LineItem",
    "Order",
    "OrderSize",
    "OrderUpdate",
    "PRODUCT_PRICES",
    "PRODUCTS",
    "Product",
]
