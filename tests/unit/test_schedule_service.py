"""Unit tests for the fulfillment schedule."""

from datetime import date, datetime

from src.models.catalog import GROUP_NAMES, GroupName
from src.services.schedule_service import generate_upcoming

MONDAY = datetime(2026, 10, 19, 9, 30)
SUNDAY = date(2026, 10, 25)


class TestGenerateUpcoming:
    """Tests for generate_upcoming."""

    def test_returns_eight_sundays_by_default(self, test_settings) -> None:
        """Test the default count and weekday."""
        events = generate_upcoming(now=MONDAY)

        assert len(events) == 8
        assert all(event["date"].weekday() == 6 for event in events)

    def test_dates_strictly_increase_by_a_week(self) -> None:
        """Test that events are consecutive weeks in order."""
        events = generate_upcoming(count=8, now=MONDAY)

        assert events[0]["date"] == SUNDAY
        for earlier, later in zip(events, events[1:]):
            assert (later["date"] - earlier["date"]).days == 7

    def test_groups_cycle_from_first(self) -> None:
        """Test round-robin assignment starting at index 0."""
        events = generate_upcoming(count=8, now=MONDAY)

        assert [event["group"] for event in events] == [GROUP_NAMES[i % len(GROUP_NAMES)] for i in range(8)]
        assert events[0]["group"] == GroupName.GROUP_A
        assert events[4]["group"] == GroupName.GROUP_A

    def test_today_is_skipped_on_fulfillment_day(self) -> None:
        """Test that scanning starts the day after now."""
        events = generate_upcoming(count=1, now=SUNDAY)

        assert events[0]["date"] == date(2026, 11, 1)

    def test_custom_weekday_and_count(self) -> None:
        """Test a different fulfillment day."""
        events = generate_upcoming(count=3, now=MONDAY, weekday=2)

        assert [event["date"] for event in events] == [
            date(2026, 10, 21),
            date(2026, 10, 28),
            date(2026, 11, 4),
        ]

    def test_zero_count_is_empty(self) -> None:
        """Test that no events are produced for count=0."""
        assert generate_upcoming(count=0, now=MONDAY) == []
