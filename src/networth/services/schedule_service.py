"""Recurring schedule service."""

import logging
import uuid
from dataclasses import dataclass, replace
from datetime import date
from decimal import Decimal
from typing import Optional

from networth.core.exceptions import ValidationError, NotFoundError
from networth.core.numbers import coerce_decimal
from networth.core.timezone import now_utc
from networth.domain.models import RecurringSchedule, ScheduleFrequency
from networth.domain.views import ScheduleView
from networth.repositories.protocols import AccountRepository, ScheduleRepository
from networth.services.ledger_service import UNSET

logger = logging.getLogger(__name__)


def today_utc() -> date:
    """Current calendar day in UTC."""
    return now_utc().date()


@dataclass
class ScheduleCreate:
    """Input data for a recurring schedule."""

    account_id: str
    frequency: str
    start_date: date
    amount: Decimal
    end_date: Optional[date] = None
    merchant: Optional[str] = None
    category: Optional[str] = None


@dataclass
class ScheduleUpdate:
    """Partial update data; UNSET fields keep their stored values."""

    frequency: Optional[str] = UNSET
    start_date: Optional[date] = UNSET
    end_date: Optional[date] = UNSET
    amount: Optional[Decimal] = UNSET
    merchant: Optional[str] = UNSET
    category: Optional[str] = UNSET


class ScheduleService:
    """
    Service for bills and income that repeat on an account.

    Schedules never post transactions themselves; they only report when the
    next occurrence is due.
    """

    def __init__(self, schedule_repo: ScheduleRepository, account_repo: AccountRepository):
        self._schedule_repo = schedule_repo
        self._account_repo = account_repo

    def create_schedule(self, data: ScheduleCreate) -> RecurringSchedule:
        """Create a schedule on an existing account."""
        if not self._account_repo.get_by_id(data.account_id):
            raise NotFoundError("Account", data.account_id)
        schedule = RecurringSchedule(
            schedule_id=str(uuid.uuid4()),
            account_id=data.account_id,
            frequency=self._parse_frequency(data.frequency),
            start_date=data.start_date,
            end_date=data.end_date,
            amount=self._require_amount(data.amount),
            merchant=data.merchant,
            category=data.category,
            created_at=now_utc(),
        )
        self._validate(schedule)
        created = self._schedule_repo.create(schedule)
        logger.info(
            "Created %s schedule %s on account %s",
            created.frequency.value, created.schedule_id, created.account_id,
        )
        return created

    def get_schedule(self, schedule_id: str) -> RecurringSchedule:
        """Get schedule by ID."""
        schedule = self._schedule_repo.get_by_id(schedule_id)
        if not schedule:
            raise NotFoundError("Schedule", schedule_id)
        return schedule

    def list_schedules(
        self,
        account_id: Optional[str] = None,
        active: Optional[bool] = None,
        today: Optional[date] = None,
    ) -> list[RecurringSchedule]:
        """List schedules, optionally filtered by account and by active state on today."""
        if account_id and not self._account_repo.get_by_id(account_id):
            raise NotFoundError("Account", account_id)
        schedules = self._schedule_repo.list_all(account_id=account_id)
        if active is None:
            return schedules
        today = today or today_utc()
        return [s for s in schedules if s.is_active_on(today) == active]

    def update_schedule(self, schedule_id: str, patch: ScheduleUpdate) -> RecurringSchedule:
        """Apply a partial update to a schedule."""
        current = self.get_schedule(schedule_id)
        changes = {name: value for name, value in vars(patch).items() if value is not UNSET}
        if "frequency" in changes:
            changes["frequency"] = self._parse_frequency(changes["frequency"])
        if "amount" in changes:
            changes["amount"] = self._require_amount(changes["amount"])

        updated = replace(current, **changes)
        self._validate(updated)
        return self._schedule_repo.update(updated)

    def end_schedule(self, schedule_id: str, today: Optional[date] = None) -> RecurringSchedule:
        """Stop a schedule: it stays on record with end_date set to today."""
        current = self.get_schedule(schedule_id)
        today = today or today_utc()
        if current.start_date > today:
            raise ValidationError("Cannot end a schedule before it starts")
        ended = self._schedule_repo.update(replace(current, end_date=today))
        logger.info("Ended schedule %s on %s", schedule_id, today.isoformat())
        return ended

    def delete_schedule(self, schedule_id: str) -> None:
        """Delete a schedule (idempotent)."""
        self._schedule_repo.delete(schedule_id)

    def due_on(self, day: Optional[date] = None) -> list[RecurringSchedule]:
        """Schedules with an occurrence on the given day (today by default)."""
        day = day or today_utc()
        return [s for s in self._schedule_repo.list_all() if s.is_due_on(day)]

    @staticmethod
    def describe(schedule: RecurringSchedule, today: Optional[date] = None) -> ScheduleView:
        """Schedule fields plus its active state and next occurrence as of today."""
        today = today or today_utc()
        return ScheduleView(
            schedule_id=schedule.schedule_id,
            account_id=schedule.account_id,
            frequency=schedule.frequency.value,
            start_date=schedule.start_date,
            end_date=schedule.end_date,
            amount=schedule.amount,
            merchant=schedule.merchant,
            category=schedule.category,
            is_active=schedule.is_active_on(today),
            next_occurrence=schedule.next_occurrence(today),
        )

    @staticmethod
    def _parse_frequency(frequency: Optional[str]) -> ScheduleFrequency:
        try:
            return ScheduleFrequency((frequency or "").strip().lower())
        except ValueError:
            allowed = ", ".join(f.value for f in ScheduleFrequency)
            raise ValidationError(f"Schedule frequency must be one of: {allowed}")

    @staticmethod
    def _require_amount(amount) -> Decimal:
        parsed = coerce_decimal(amount)
        if parsed is None:
            raise ValidationError("Schedule requires a numeric amount")
        return parsed

    @staticmethod
    def _validate(schedule: RecurringSchedule) -> None:
        if schedule.start_date is None:
            raise ValidationError("Schedule requires a start date")
        if schedule.end_date is not None and schedule.end_date < schedule.start_date:
            raise ValidationError("Schedule end date cannot precede its start date")
