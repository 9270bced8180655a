"""Recurring schedule domain model."""

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from dateutil.relativedelta import relativedelta

from networth.core.numbers import coerce_decimal
from networth.domain.models.enums import ScheduleFrequency

_STEPS = {
    ScheduleFrequency.DAILY: relativedelta(days=1),
    ScheduleFrequency.WEEKLY: relativedelta(weeks=1),
    ScheduleFrequency.BIWEEKLY: relativedelta(weeks=2),
    ScheduleFrequency.MONTHLY: relativedelta(months=1),
    ScheduleFrequency.QUARTERLY: relativedelta(months=3),
    ScheduleFrequency.ANNUALLY: relativedelta(years=1),
}


@dataclass
class RecurringSchedule:
    """
    A bill or income that repeats on an account.

    Occurrence n falls on start_date + n * step. Steps are calendar-aware, so a
    monthly schedule starting on the 31st lands on the last day of shorter
    months without drifting afterwards.
    """

    schedule_id: str
    account_id: str
    frequency: ScheduleFrequency
    start_date: date
    amount: Decimal
    end_date: Optional[date] = None
    merchant: Optional[str] = None
    category: Optional[str] = None
    created_at: Optional[datetime] = field(default=None)

    def __post_init__(self) -> None:
        if isinstance(self.frequency, str):
            self.frequency = ScheduleFrequency(self.frequency)
        amount = coerce_decimal(self.amount)
        self.amount = amount if amount is not None else Decimal("0")

    def is_active_on(self, day: date) -> bool:
        """Return True if day lies within [start_date, end_date]."""
        if self.start_date > day:
            return False
        return self.end_date is None or self.end_date >= day

    def occurrence(self, n: int) -> date:
        """Date of the n-th occurrence (0 is start_date)."""
        return self.start_date + _STEPS[self.frequency] * n

    def next_occurrence(self, today: date) -> Optional[date]:
        """
        First occurrence on or after today, or None once the schedule has ended.

        Daily schedules occur every day, so the answer is today (or the start
        date when that is later).
        """
        if self.end_date is not None and self.end_date < today:
            return None

        if self.frequency == ScheduleFrequency.DAILY:
            upcoming = max(self.start_date, today)
        else:
            n = 0
            upcoming = self.start_date
            while upcoming < today:
                n += 1
                upcoming = self.occurrence(n)

        if self.end_date is not None and upcoming > self.end_date:
            return None
        return upcoming

    def is_due_on(self, day: date) -> bool:
        """Return True if an occurrence falls exactly on day."""
        return self.is_active_on(day) and self.next_occurrence(day) == day
