"""Recurring schedule repository protocol."""

from typing import Protocol, Optional

from networth.domain.models import RecurringSchedule


class ScheduleRepository(Protocol):
    """Interface for recurring schedule data access."""

    def create(self, schedule: RecurringSchedule) -> RecurringSchedule:
        """Persist a new schedule."""
        ...

    def get_by_id(self, schedule_id: str) -> Optional[RecurringSchedule]:
        """Retrieve schedule by ID."""
        ...

    def update(self, schedule: RecurringSchedule) -> RecurringSchedule:
        """Store new values for an existing schedule."""
        ...

    def delete(self, schedule_id: str) -> None:
        """Remove a schedule; no-op when absent."""
        ...

    def list_all(self, account_id: Optional[str] = None) -> list[RecurringSchedule]:
        """List schedules, optionally for one account, ordered by start_date."""
        ...
