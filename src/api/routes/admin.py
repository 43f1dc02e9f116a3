"""Organizer login API routes."""

from fastapi import APIRouter

from src.api.deps import Admin
from src.api.middleware.error_handler import AuthenticationError
from src.schemas.admin import AdminLoginRequest, AdminStatusResponse

router = APIRouter(prefix="/admin", tags=["admin"])


@router.post(
    "/login",
    response_model=AdminStatusResponse,
    summary="Organizer login",
    responses={401: {"description": "Wrong passphrase"}},
)
async def login(data: AdminLoginRequest, service: Admin) -> AdminStatusResponse:
    """Unlock the organizer views with the shared passphrase.

    Raises:
        AuthenticationError: 401 if the passphrase does not match.
    """
    if not service.login(data.password):
        raise AuthenticationError("Incorrect password")
    return AdminStatusResponse(is_admin=True)


@router.post("/logout", response_model=AdminStatusResponse, summary="Organizer logout")
async def logout(service: Admin) -> AdminStatusResponse:
    """Lock the organizer views."""
    service.logout()
    return AdminStatusResponse(is_admin=False)


@router.get("/status", response_model=AdminStatusResponse, summary="Organizer login status")
async def admin_status(service: Admin) -> AdminStatusResponse:
    """Report whether the organizer views are unlocked."""
    return AdminStatusResponse(is_admin=service.is_admin())
