"""Sales dashboard API routes."""

from fastapi import APIRouter

from src.api.deps import AdminRequired, Dashboard
from src.schemas.dashboard import DashboardResponse

router = APIRouter(prefix="/dashboard", tags=["dashboard"], dependencies=[AdminRequired])


@router.get(
    "",
    response_model=DashboardResponse,
    summary="Sales by group",
    description="Revenue and order counts per volunteer group, with overall totals.",
)
async def get_dashboard(service: Dashboard) -> DashboardResponse:
    """Return sales statistics for all orders."""
    return DashboardResponse(**service.summary())
