"""Cart and order record definitions as persisted in the store."""

from typing import Literal, TypedDict

from src.models.catalog import GroupName, OrderSize

DeliveryOption = Literal["Pickup", "Delivery"]


class LineItem(TypedDict):
    """A single product/size line in a cart or order.

    ``product_name`` is a snapshot of the catalog name at the time the
    line was added.
    """

    product_id: str
    product_name: str
    size: OrderSize
    quantity: int


class Cart(TypedDict):
    """The active customer's cart."""

    cart_id: str | None
    items: list[LineItem]
    donation_amount: float


class Order(TypedDict):
    """Submitted order record.

    ``total_price`` is always derived from items, is_recurring and
    donation_amount.
    """

    id: str
    customer_name: str
    customer_contact: str
    items: list[LineItem]
    donation_amount: float
    assigned_group: GroupName
    order_date: str
    is_fulfilled: bool
    total_price: float
    delivery_option: DeliveryOption
    delivery_address: str | None
    order_number: str
    zelle_confirmation_number: str
    is_recurring: bool


class OrderUpdate(TypedDict, total=False):
    """Fields an organizer can change on an existing order."""

    customer_name: str
    customer_contact: str
    items: list[LineItem]
    donation_amount: float
    assigned_group: GroupName
    is_fulfilled: bool
    delivery_option: DeliveryOption
    delivery_address: str | None
    order_number: str
    zelle_confirmation_number: str
    is_recurring: bool
