"""Cart Pydantic schemas for API request/response models."""

from pydantic import BaseModel, ConfigDict, Field

from src.models.catalog import OrderSize


class LineItemSchema(BaseModel):
    """Schema for a single cart or order line."""

    model_config = ConfigDict(from_attributes=True)

    product_id: str = Field(description="Catalog product ID")
    product_name: str = Field(description="Product name at the time it was added")
    size: OrderSize = Field(description="Order size")
    quantity: int = Field(ge=1, description="Units ordered")


class CartItemAdd(BaseModel):
    """Schema for POST /cart/items."""

    product_id: str = Field(description="Catalog product ID")
    size: OrderSize = Field(description="Order size")
    quantity: int = Field(default=1, ge=1, description="Units to add")


class CartItemQuantityUpdate(BaseModel):
    """Schema for PATCH /cart/items. A quantity of 0 removes the line."""

    product_id: str = Field(description="Catalog product ID")
    size: OrderSize = Field(description="Order size")
    quantity: int = Field(ge=0, description="New quantity")


class DonationUpdate(BaseModel):
    """Schema for PUT /cart/donation."""

    amount: float = Field(ge=0, description="Donation in dollars")


class CartResponse(BaseModel):
    """Schema for cart API responses."""

    model_config = ConfigDict(from_attributes=True)

    cart_id: str | None = Field(default=None, description="Cart number, assigned on first addition")
    items: list[LineItemSchema] = Field(default_factory=list, description="Cart lines")
    donation_amount: float = Field(default=0, description="Donation in dollars")
    estimated_total: float = Field(default=0, description="Non-recurring total of items plus donation")
