"""
Unit tests for the RecurringSchedule model.

Tests cover:
- Active window checks
- Next occurrence per frequency, including month-end starts
- Ended schedules
- Due-on-day checks
"""

from datetime import date
from decimal import Decimal

import pytest

from networth.domain.models import RecurringSchedule, ScheduleFrequency


def _schedule(frequency, start, end=None, amount="-100") -> RecurringSchedule:
    return RecurringSchedule(
        schedule_id="s-1",
        account_id="acc-1",
        frequency=frequency,
        start_date=start,
        end_date=end,
        amount=amount,
    )


class TestActiveWindow:
    """Tests for is_active_on."""

    def test_active_between_start_and_end_inclusive(self):
        """
        GIVEN a schedule from 2024-01-01 to 2024-03-31
        WHEN I check days around the window
        THEN only days inside the window (both ends included) are active
        """
        schedule = _schedule("monthly", date(2024, 1, 1), date(2024, 3, 31))

        assert not schedule.is_active_on(date(2023, 12, 31))
        assert schedule.is_active_on(date(2024, 1, 1))
        assert schedule.is_active_on(date(2024, 3, 31))
        assert not schedule.is_active_on(date(2024, 4, 1))

    def test_open_ended_schedule_stays_active(self):
        """
        GIVEN a schedule without an end date
        WHEN I check a day years later
        THEN it is still active
        """
        assert _schedule("weekly", date(2020, 1, 1)).is_active_on(date(2030, 1, 1))

    def test_fields_are_coerced(self):
        """
        GIVEN a frequency string and a string amount
        WHEN I build a schedule
        THEN the frequency is an enum and the amount a Decimal
        """
        schedule = _schedule("biweekly", date(2024, 1, 1), amount="-42.50")

        assert schedule.frequency == ScheduleFrequency.BIWEEKLY
        assert schedule.amount == Decimal("-42.50")


class TestNextOccurrence:
    """Tests for next_occurrence."""

    @pytest.mark.parametrize("frequency,start,today,expected", [
        ("daily", date(2024, 1, 1), date(2024, 6, 15), date(2024, 6, 15)),
        ("daily", date(2024, 7, 1), date(2024, 6, 15), date(2024, 7, 1)),
        ("weekly", date(2024, 6, 3), date(2024, 6, 15), date(2024, 6, 17)),
        ("weekly", date(2024, 6, 1), date(2024, 6, 15), date(2024, 6, 15)),
        ("biweekly", date(2024, 6, 3), date(2024, 6, 15), date(2024, 6, 17)),
        ("biweekly", date(2024, 6, 4), date(2024, 6, 15), date(2024, 6, 18)),
        ("monthly", date(2024, 1, 20), date(2024, 6, 15), date(2024, 6, 20)),
        ("quarterly", date(2024, 1, 10), date(2024, 6, 15), date(2024, 7, 10)),
        ("annually", date(2020, 3, 1), date(2024, 6, 15), date(2025, 3, 1)),
        ("monthly", date(2024, 9, 1), date(2024, 6, 15), date(2024, 9, 1)),
    ])
    def test_first_occurrence_on_or_after_today(self, frequency, start, today, expected):
        """
        GIVEN a schedule of each frequency
        WHEN I ask for the next occurrence
        THEN it is the first step from the start date that is not before today
        """
        assert _schedule(frequency, start).next_occurrence(today) == expected

    def test_month_end_start_does_not_drift(self):
        """
        GIVEN a monthly schedule starting 2024-01-31
        WHEN I ask for occurrences after February and in April
        THEN February clamps to the 29th and later months return to their last day
        """
        schedule = _schedule("monthly", date(2024, 1, 31))

        assert schedule.next_occurrence(date(2024, 2, 1)) == date(2024, 2, 29)
        assert schedule.next_occurrence(date(2024, 3, 1)) == date(2024, 3, 31)
        assert schedule.next_occurrence(date(2024, 4, 1)) == date(2024, 4, 30)

    def test_leap_day_annual_schedule(self):
        """
        GIVEN an annual schedule starting on 2024-02-29
        WHEN I ask for the occurrence in 2025
        THEN it falls on 2025-02-28
        """
        schedule = _schedule("annually", date(2024, 2, 29))

        assert schedule.next_occurrence(date(2024, 3, 1)) == date(2025, 2, 28)

    def test_ended_schedule_has_no_next_occurrence(self):
        """
        GIVEN a schedule that ended yesterday
        WHEN I ask for the next occurrence
        THEN there is none
        """
        schedule = _schedule("daily", date(2024, 1, 1), date(2024, 6, 14))

        assert schedule.next_occurrence(date(2024, 6, 15)) is None

    def test_next_step_past_end_date(self):
        """
        GIVEN a monthly schedule on the 20th ending 2024-06-18
        WHEN I ask for the next occurrence on 2024-06-15
        THEN there is none because the June step falls after the end date
        """
        schedule = _schedule("monthly", date(2024, 1, 20), date(2024, 6, 18))

        assert schedule.next_occurrence(date(2024, 6, 15)) is None


class TestDueOn:
    """Tests for is_due_on."""

    def test_due_only_on_occurrence_days(self):
        """
        GIVEN a weekly schedule starting Monday 2024-06-03
        WHEN I check the following Monday and Tuesday
        THEN it is due on Monday only
        """
        schedule = _schedule("weekly", date(2024, 6, 3))

        assert schedule.is_due_on(date(2024, 6, 10))
        assert not schedule.is_due_on(date(2024, 6, 11))

    def test_not_due_before_start(self):
        """
        GIVEN a daily schedule starting next week
        WHEN I check today
        THEN it is not due
        """
        schedule = _schedule("daily", date(2024, 6, 22))

        assert not schedule.is_due_on(date(2024, 6, 15))
