"""Cart API routes."""

from fastapi import APIRouter, Query

from src.api.deps import Cart
from src.models.catalog import OrderSize
from src.models.order import Cart as CartRecord
from src.schemas.cart import CartItemAdd, CartItemQuantityUpdate, CartResponse, DonationUpdate
from src.services.pricing import compute_total

router = APIRouter(prefix="/cart", tags=["cart"])


def _to_response(cart: CartRecord) -> CartResponse:
    return CartResponse(
        cart_id=cart["cart_id"],
        items=cart["items"],
        donation_amount=cart["donation_amount"],
        estimated_total=compute_total(cart["items"], False, cart["donation_amount"]),
    )


@router.get("", response_model=CartResponse, summary="Get cart")
async def get_cart(service: Cart) -> CartResponse:
    """Return the current cart."""
    return _to_response(service.get_cart())


@router.post(
    "/items",
    response_model=CartResponse,
    summary="Add item to cart",
    description="Adds units of a product/size. Repeated additions merge into one line. Unknown products are ignored.",
)
async def add_item(data: CartItemAdd, service: Cart) -> CartResponse:
    """Add a product to the cart."""
    return _to_response(service.add_item(data.product_id, data.size, data.quantity))


@router.patch(
    "/items",
    response_model=CartResponse,
    summary="Set item quantity",
    description="Replaces a line's quantity. A quantity of 0 removes the line.",
)
async def update_item_quantity(data: CartItemQuantityUpdate, service: Cart) -> CartResponse:
    """Set the quantity of a cart line."""
    return _to_response(service.update_quantity(data.product_id, data.size, data.quantity))


@router.delete("/items/{product_id}", response_model=CartResponse, summary="Remove item from cart")
async def remove_item(
    product_id: str,
    service: Cart,
    size: OrderSize = Query(description="Order size of the line to remove"),
) -> CartResponse:
    """Remove a cart line."""
    return _to_response(service.remove_item(product_id, size))


@router.put("/donation", response_model=CartResponse, summary="Set donation amount")
async def set_donation(data: DonationUpdate, service: Cart) -> CartResponse:
    """Set the donation added to the order."""
    return _to_response(service.set_donation(data.amount))


@router.delete("", response_model=CartResponse, summary="Clear cart")
async def clear_cart(service: Cart) -> CartResponse:
    """Discard all items and the donation."""
    return _to_response(service.clear())
