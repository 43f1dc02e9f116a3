"""Admin gate Pydantic schemas."""

from pydantic import BaseModel, Field


class AdminLoginRequest(BaseModel):
    """Schema for POST /admin/login."""

    password: str = Field(description="Shared organizer passphrase")


class AdminStatusResponse(BaseModel):
    """Whether the organizer views are unlocked."""

    is_admin: bool = Field(description="True after a successful login")
