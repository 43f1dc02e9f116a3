"""Order API routes for customers and organizers."""

from fastapi import APIRouter, Query, status

from src.api.deps import AdminRequired, Catalog, Orders
from src.api.middleware.error_handler import NotFoundError, ValidationError
from src.schemas.order import (
    OrderCreate,
    OrderListResponse,
    OrderResponse,
    OrderUpdateRequest,
    ProductionSummaryEntry,
    ProductionSummaryResponse,
)

router = APIRouter(prefix="/orders", tags=["orders"])


@router.post(
    "",
    response_model=OrderResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Submit order",
    description="Submits the current cart as an order and clears the cart.",
)
async def create_order(data: OrderCreate, service: Orders) -> OrderResponse:
    """Create an order from the cart.

    Raises:
        ValidationError: 422 if the cart has neither items nor a donation.
    """
    cart = service.cart_service.get_cart()
    if not cart["items"] and cart["donation_amount"] <= 0:
        raise ValidationError("Cart is empty")

    order = service.create_order(
        customer_name=data.customer_name,
        customer_contact=data.customer_contact,
        delivery_option=data.delivery_option,
        delivery_address=data.delivery_address,
        zelle_confirmation_number=data.zelle_confirmation_number,
        is_recurring=data.is_recurring,
    )
    return OrderResponse(**order)


@router.get(
    "",
    response_model=OrderListResponse,
    summary="List orders",
    dependencies=[AdminRequired],
)
async def list_orders(
    service: Orders,
    is_fulfilled: bool | None = Query(default=None, description="Filter by fulfillment state"),
) -> OrderListResponse:
    """List orders, optionally only pending or only fulfilled ones."""
    orders = service.list_orders(is_fulfilled=is_fulfilled)
    return OrderListResponse(items=[OrderResponse(**order) for order in orders])


@router.get(
    "/production-summary",
    response_model=ProductionSummaryResponse,
    summary="Production summary",
    description="Units to prepare per product and size across pending orders. Recurring orders count four times.",
    dependencies=[AdminRequired],
)
async def production_summary(service: Orders) -> ProductionSummaryResponse:
    """Return units needed for all unfulfilled orders."""
    summary = service.production_summary()
    return ProductionSummaryResponse(
        items=[ProductionSummaryEntry(product_name=name, units=units) for name, units in summary.items()]
    )


@router.get(
    "/{order_id}",
    response_model=OrderResponse,
    summary="Get order by ID",
    dependencies=[AdminRequired],
)
async def get_order(order_id: str, service: Orders) -> OrderResponse:
    """Get a single order.

    Raises:
        NotFoundError: 404 if the order does not exist.
    """
    order = service.get_order(order_id)
    if not order:
        raise NotFoundError("Order not found")
    return OrderResponse(**order)


@router.patch(
    "/{order_id}",
    response_model=OrderResponse,
    summary="Edit order",
    description="Overwrites the given fields and recomputes the order total.",
    dependencies=[AdminRequired],
)
async def update_order(
    order_id: str,
    data: OrderUpdateRequest,
    service: Orders,
    catalog: Catalog,
) -> OrderResponse:
    """Edit an order.

    Item lines take their product name from the catalog. Pickup orders
    drop their delivery address.

    Raises:
        NotFoundError: 404 if the order does not exist.
        ValidationError: 422 for unknown products or a delivery without address.
    """
    existing = service.get_order(order_id)
    if not existing:
        raise NotFoundError("Order not found")

    fields = {
        key: value
        for key, value in data.model_dump(exclude_unset=True).items()
        if value is not None or key == "delivery_address"
    }

    if data.items is not None:
        items = []
        for index, item in enumerate(data.items):
            product = catalog.get_product(item.product_id)
            if not product:
                raise ValidationError(
                    f"Unknown product: {item.product_id}",
                    details=[
                        {
                            "loc": ["body", "items", str(index), "product_id"],
                            "msg": f"Unknown product: {item.product_id}",
                            "type": "unknown_product",
                        }
                    ],
                )
            items.append(
                {
                    "product_id": item.product_id,
                    "product_name": product["name"],
                    "size": item.size.value,
                    "quantity": item.quantity,
                }
            )
        fields["items"] = items

    delivery_option = fields.get("delivery_option", existing["delivery_option"])
    if delivery_option == "Pickup":
        fields["delivery_address"] = None
    else:
        delivery_address = fields.get("delivery_address", existing.get("delivery_address"))
        if not (delivery_address and delivery_address.strip()):
            raise ValidationError(
                "delivery_address is required for Delivery orders",
                details=[
                    {
                        "loc": ["body", "delivery_address"],
                        "msg": "Required for Delivery orders",
                        "type": "missing",
                    }
                ],
            )

    order = service.update_order(order_id, fields)
    return OrderResponse(**order)


@router.post(
    "/{order_id}/toggle-fulfilled",
    response_model=OrderResponse,
    summary="Toggle fulfillment",
    dependencies=[AdminRequired],
)
async def toggle_fulfilled(order_id: str, service: Orders) -> OrderResponse:
    """Mark a pending order fulfilled, or a fulfilled order pending again.

    Raises:
        NotFoundError: 404 if the order does not exist.
    """
    order = service.toggle_fulfilled(order_id)
    if not order:
        raise NotFoundError("Order not found")
    return OrderResponse(**order)
