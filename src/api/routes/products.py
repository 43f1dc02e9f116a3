"""Product catalog API routes."""

from fastapi import APIRouter

from src.api.deps import Catalog
from src.api.middleware.error_handler import NotFoundError
from src.schemas.product import PriceEntry, PriceListResponse, ProductListResponse, ProductResponse

router = APIRouter(prefix="/products", tags=["products"])


@router.get(
    "",
    response_model=ProductListResponse,
    summary="List products",
)
async def list_products(catalog: Catalog) -> ProductListResponse:
    """List all catalog products."""
    return ProductListResponse(items=[ProductResponse(**product) for product in catalog.list_products()])


@router.get(
    "/prices",
    response_model=PriceListResponse,
    summary="Size price table",
    description="Unit price of each order size. Every product uses the same table.",
)
async def list_prices(catalog: Catalog) -> PriceListResponse:
    """Return the size to unit price table."""
    return PriceListResponse(
        items=[PriceEntry(size=size, unit_price=price) for size, price in catalog.prices().items()]
    )


@router.get(
    "/{product_id}",
    response_model=ProductResponse,
    summary="Get product by ID",
)
async def get_product(product_id: str, catalog: Catalog) -> ProductResponse:
    """Get a single product.

    Raises:
        NotFoundError: 404 if the product is not in the catalog.
    """
    product = catalog.get_product(product_id)
    if not product:
        raise NotFoundError("Product not found")
    return ProductResponse(**product)
