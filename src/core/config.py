"""Application configuration management using Pydantic Settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    All settings can be overridden via environment variables.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="shot-fundraiser", description="Application name")
    app_env: str = Field(default="development", description="Environment (development/staging/production)")
    debug: bool = Field(default=False, description="Enable debug mode")

    # Server
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=8080, description="Server port")

    # CORS
    cors_origins: str = Field(
        default="http://localhost:3000,http://localhost:5173",
        description="Comma-separated list of allowed CORS origins",
    )

    # Store
    store_backend: Literal["json", "memory"] = Field(default="json", description="Key-value store backend")
    store_path: str = Field(default="data/store.json", description="Path of the JSON store file")

    # Admin gate
    admin_password: str = Field(default="admin123", description="Shared passphrase for the organizer views")

    # Cart and schedule
    cart_id_prefix: str = Field(default="LW", description="Prefix for generated cart/order numbers")
    schedule_event_count: int = Field(default=8, ge=1, description="Number of upcoming fulfillment days to list")
    fulfillment_weekday: int = Field(
        default=6,
        ge=0,
        le=6,
        description="Weekly fulfillment day (0=Monday ... 6=Sunday)",
    )

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS origins string into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.app_env == "production"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings singleton.

    Returns:
        Settings: Application settings instance.

    Note:
        Settings are cached using lru_cache for performance.
        Call get_settings.cache_clear() to reload settings.
    """
    return Settings()
