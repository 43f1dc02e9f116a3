"""Upcoming fulfillment schedule for the volunteer groups."""

from datetime import date, datetime, timedelta
from typing import TypedDict

from src.core.config import get_settings
from src.models.catalog import GROUP_NAMES, GroupName


class ScheduleEvent(TypedDict):
    """A fulfillment day and the group on duty."""

    date: date
    group: GroupName


def generate_upcoming(
    count: int | None = None,
    now: datetime | date | None = None,
    weekday: int | None = None,
) -> list[ScheduleEvent]:
    """List the next fulfillment days with groups assigned round-robin.

    Scanning starts the day after ``now``, so today is never included even
    when it falls on the fulfillment day. The i-th event goes to
    ``GROUP_NAMES[i % len(GROUP_NAMES)]``.

    Args:
        count: Number of events. Defaults to settings.schedule_event_count.
        now: Reference time. Defaults to the current local time.
        weekday: Fulfillment weekday (0=Monday ... 6=Sunday).
            Defaults to settings.fulfillment_weekday.

    Returns:
        list[ScheduleEvent]: Events in increasing date order.
    """
    settings = get_settings()
    if count is None:
        count = settings.schedule_event_count
    if weekday is None:
        weekday = settings.fulfillment_weekday
    if now is None:
        now = datetime.now()
    current = now.date() if isinstance(now, datetime) else now

    events: list[ScheduleEvent] = []
    while len(events) < count:
        current += timedelta(days=1)
        if current.weekday() == weekday:
            events.append({"date": current, "group": GROUP_NAMES[len(events) % len(GROUP_NAMES)]})
    return events
