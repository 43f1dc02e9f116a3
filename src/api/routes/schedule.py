"""Fulfillment schedule API routes."""

from fastapi import APIRouter, Query

from src.schemas.schedule import ScheduleEventResponse, ScheduleResponse
from src.services.schedule_service import generate_upcoming

router = APIRouter(prefix="/schedule", tags=["schedule"])


@router.get(
    "",
    response_model=ScheduleResponse,
    summary="Upcoming fulfillment days",
    description="Next fulfillment days with volunteer groups assigned in rotation. Display only; orders are assigned separately.",
)
async def get_schedule(
    count: int | None = Query(default=None, ge=1, le=52, description="Number of days to list"),
) -> ScheduleResponse:
    """List upcoming fulfillment days."""
    return ScheduleResponse(items=[ScheduleEventResponse(**event) for event in generate_upcoming(count=count)])
