"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware

from src.api.middleware.error_handler import error_handler_middleware
from src.api.middleware.latency_logging import latency_logging_middleware
from src.api.routes import admin, cart, dashboard, health, orders, products, schedule
from src.core.config import get_settings
from src.services.schedule_service import generate_upcoming

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Handles startup and shutdown events.

    Args:
        app: FastAPI application instance.

    Yields:
        None: Control back to the application.
    """
    settings = get_settings()
    logger.info("Starting %s in %s mode", settings.app_name, settings.app_env)
    if settings.store_backend == "json":
        logger.info("Using JSON store at %s", settings.store_path)
    else:
        logger.info("Using in-memory store")

    upcoming = generate_upcoming(count=1)
    if upcoming:
        logger.info("Next fulfillment day: %s (%s)", upcoming[0]["date"], upcoming[0]["group"].value)

    yield
    logger.info("Shutting down %s", settings.app_name)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        FastAPI: Configured application instance.
    """
    settings = get_settings()

    app = FastAPI(
        title="Shot Fundraiser API",
        description="Storefront and order management for the wellness-shot fundraiser",
        version="0.1.0",
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_url="/openapi.json" if settings.debug else None,
        lifespan=lifespan,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Error handler middleware (renders APIError and unexpected errors)
    app.add_middleware(BaseHTTPMiddleware, dispatch=error_handler_middleware)

    # Latency logging middleware
    app.add_middleware(BaseHTTPMiddleware, dispatch=latency_logging_middleware)

    # Mount health routes at root level (no prefix)
    app.include_router(health.router)

    api_v1_router = APIRouter(prefix="/api/v1")

    # Storefront routes
    api_v1_router.include_router(products.router)
    api_v1_router.include_router(cart.router)
    api_v1_router.include_router(orders.router)
    api_v1_router.include_router(schedule.router)

    # Organizer routes
    api_v1_router.include_router(admin.router)
    api_v1_router.include_router(dashboard.router)

    app.include_router(api_v1_router)

    return app


# Create application instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "src.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
