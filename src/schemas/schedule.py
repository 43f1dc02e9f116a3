"""Schedule Pydantic schemas."""

import datetime

from pydantic import BaseModel, Field

from src.models.catalog import GroupName


class ScheduleEventResponse(BaseModel):
    """A fulfillment day and the group on duty."""

    date: datetime.date
    group: GroupName


class ScheduleResponse(BaseModel):
    """Schema for GET /schedule."""

    items: list[ScheduleEventResponse] = Field(description="Upcoming fulfillment days")
