"""Catalog Pydantic schemas for API responses."""

from pydantic import BaseModel, ConfigDict, Field

from src.models.catalog import OrderSize


class ProductResponse(BaseModel):
    """Schema for a catalog product."""

    model_config = ConfigDict(from_attributes=True)

    id: str = Field(description="Product identifier")
    name: str = Field(description="Product name")
    description: str = Field(description="Product description")
    ingredients: list[str] = Field(default_factory=list, description="Ingredient names")
    image_color: str = Field(description="Hex display color for the placeholder image")
    youtube_id: str | None = Field(default=None, description="Hosted tutorial video ID")
    video_start: int | None = Field(default=None, description="Tutorial segment start (seconds)")
    video_end: int | None = Field(default=None, description="Tutorial segment end (seconds)")


class ProductListResponse(BaseModel):
    """Schema for the product list."""

    items: list[ProductResponse] = Field(description="Catalog products")


class PriceEntry(BaseModel):
    """Unit price for one order size."""

    size: OrderSize = Field(description="Order size")
    unit_price: float = Field(description="Unit price in dollars")


class PriceListResponse(BaseModel):
    """Schema for the size price table."""

    items: list[PriceEntry] = Field(description="Unit price per size")
