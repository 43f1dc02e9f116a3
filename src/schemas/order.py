"""Order Pydantic schemas for API request/response models."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, model_validator

from src.models.catalog import GroupName, OrderSize
from src.models.order import DeliveryOption
from src.schemas.cart import LineItemSchema


class OrderCreate(BaseModel):
    """Schema for submitting the cart via POST /orders."""

    customer_name: str = Field(min_length=1, description="Customer full name")
    customer_contact: str = Field(min_length=1, description="Phone number or email")
    delivery_option: DeliveryOption = Field(default="Pickup", description="Pickup or Delivery")
    delivery_address: str | None = Field(default=None, description="Address, required for Delivery")
    zelle_confirmation_number: str = Field(min_length=1, description="Zelle payment confirmation")
    is_recurring: bool = Field(default=False, description="Repeat weekly for four weeks")

    @model_validator(mode="after")
    def require_address_for_delivery(self) -> "OrderCreate":
        """Delivery orders need an address; pickup orders drop it."""
        if self.delivery_option == "Delivery":
            if not self.delivery_address or not self.delivery_address.strip():
                raise ValueError("delivery_address is required for Delivery orders")
        else:
            self.delivery_address = None
        return self


class OrderItemInput(BaseModel):
    """A line item as entered by an organizer editing an order."""

    product_id: str = Field(description="Catalog product ID")
    size: OrderSize = Field(default=OrderSize.SEVEN_SHOTS, description="Order size")
    quantity: int = Field(ge=1, description="Units ordered")


class OrderUpdateRequest(BaseModel):
    """Schema for PATCH /orders/{order_id}. Only set fields are applied."""

    customer_name: str | None = Field(default=None, min_length=1)
    customer_contact: str | None = Field(default=None, min_length=1)
    items: list[OrderItemInput] | None = Field(default=None, description="Replacement line items")
    donation_amount: float | None = Field(default=None, ge=0)
    delivery_option: DeliveryOption | None = None
    delivery_address: str | None = None
    zelle_confirmation_number: str | None = None
    is_recurring: bool | None = None


class OrderResponse(BaseModel):
    """Schema for order API responses."""

    model_config = ConfigDict(from_attributes=True)

    id: str = Field(description="Order unique identifier")
    order_number: str = Field(description="Human-readable order number (the cart number)")
    customer_name: str
    customer_contact: str
    items: list[LineItemSchema] = Field(default_factory=list)
    donation_amount: float = 0
    assigned_group: GroupName = Field(description="Volunteer group fulfilling the order")
    order_date: datetime = Field(description="Submission timestamp")
    is_fulfilled: bool = False
    total_price: float = Field(description="Derived total in dollars")
    delivery_option: DeliveryOption
    delivery_address: str | None = None
    zelle_confirmation_number: str
    is_recurring: bool = False


class OrderListResponse(BaseModel):
    """Schema for order list API responses."""

    items: list[OrderResponse] = Field(description="List of orders")


class ProductionSummaryEntry(BaseModel):
    """Units to prepare for one product."""

    product_name: str
    units: dict[OrderSize, int] = Field(description="Units per order size")


class ProductionSummaryResponse(BaseModel):
    """Schema for GET /orders/production-summary."""

    items: list[ProductionSummaryEntry] = Field(description="One entry per product with pending units")
