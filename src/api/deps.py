"""FastAPI dependency injection functions."""

from typing import Annotated

from fastapi import Depends

from src.api.middleware.error_handler import AuthorizationError
from src.core.store import KeyValueStore, get_store
from src.services.admin_service import AdminService
from src.services.cart_service import CartService
from src.services.catalog_service import CatalogService
from src.services.dashboard_service import DashboardService
from src.services.order_service import OrderService


def get_catalog_service() -> CatalogService:
    """Provide the catalog service."""
    return CatalogService()


def get_cart_service(store: Annotated[KeyValueStore, Depends(get_store)]) -> CartService:
    """Provide a cart service bound to the application store."""
    return CartService(store=store)


def get_order_service(
    store: Annotated[KeyValueStore, Depends(get_store)],
    cart_service: Annotated[CartService, Depends(get_cart_service)],
) -> OrderService:
    """Provide an order service sharing the store with the cart service."""
    return OrderService(store=store, cart_service=cart_service)


def get_dashboard_service(
    order_service: Annotated[OrderService, Depends(get_order_service)],
) -> DashboardService:
    """Provide the dashboard statistics service."""
    return DashboardService(order_service=order_service)


def get_admin_service(store: Annotated[KeyValueStore, Depends(get_store)]) -> AdminService:
    """Provide the admin gate service."""
    return AdminService(store=store)


async def require_admin(admin_service: Annotated[AdminService, Depends(get_admin_service)]) -> None:
    """Reject the request unless the organizer views are unlocked.

    Raises:
        AuthorizationError: 403 if no organizer is logged in.
    """
    if not admin_service.is_admin():
        raise AuthorizationError("Organizer login required")


# Type aliases for cleaner dependency injection
Catalog = Annotated[CatalogService, Depends(get_catalog_service)]
Cart = Annotated[CartService, Depends(get_cart_service)]
Orders = Annotated[OrderService, Depends(get_order_service)]
Dashboard = Annotated[DashboardService, Depends(get_dashboard_service)]
Admin = Annotated[AdminService, Depends(get_admin_service)]
AdminRequired = Depends(require_admin)
