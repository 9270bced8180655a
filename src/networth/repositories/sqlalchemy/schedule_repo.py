"""SQLAlchemy implementation of ScheduleRepository."""

from decimal import Decimal
from typing import Optional

from sqlalchemy.orm import Session

from networth.core.timezone import now_utc
from networth.domain.models import RecurringSchedule
from networth.repositories.sqlalchemy.orm_models import RecurringScheduleORM

_COPIED_FIELDS = (
    "account_id",
    "frequency",
    "start_date",
    "end_date",
    "amount",
    "merchant",
    "category",
)


class SqlAlchemyScheduleRepository:
    """SQLAlchemy-backed recurring schedule repository."""

    def __init__(self, db: Session):
        self._db = db

    def create(self, schedule: RecurringSchedule) -> RecurringSchedule:
        """Persist a new schedule."""
        orm_schedule = RecurringScheduleORM(
            schedule_id=schedule.schedule_id,
            created_at=schedule.created_at or now_utc(),
            **{name: getattr(schedule, name) for name in _COPIED_FIELDS},
        )
        self._db.add(orm_schedule)
        self._db.commit()
        self._db.refresh(orm_schedule)
        return self._to_domain(orm_schedule)

    def get_by_id(self, schedule_id: str) -> Optional[RecurringSchedule]:
        """Retrieve schedule by ID."""
        orm_schedule = self._get(schedule_id)
        return self._to_domain(orm_schedule) if orm_schedule else None

    def update(self, schedule: RecurringSchedule) -> RecurringSchedule:
        """Store new values for an existing schedule."""
        orm_schedule = self._get(schedule.schedule_id)
        if not orm_schedule:
            raise ValueError(f"Schedule not found: {schedule.schedule_id}")

        for name in _COPIED_FIELDS:
            setattr(orm_schedule, name, getattr(schedule, name))

        self._db.commit()
        self._db.refresh(orm_schedule)
        return self._to_domain(orm_schedule)

    def delete(self, schedule_id: str) -> None:
        """Remove a schedule; no-op when absent."""
        self._db.query(RecurringScheduleORM).filter(
            RecurringScheduleORM.schedule_id == schedule_id
        ).delete()
        self._db.commit()

    def list_all(self, account_id: Optional[str] = None) -> list[RecurringSchedule]:
        """List schedules, optionally for one account, ordered by start_date."""
        query = self._db.query(RecurringScheduleORM)
        if account_id:
            query = query.filter(RecurringScheduleORM.account_id == account_id)
        query = query.order_by(RecurringScheduleORM.start_date, RecurringScheduleORM.created_at)
        return [self._to_domain(s) for s in query.all()]

    def _get(self, schedule_id: str) -> Optional[RecurringScheduleORM]:
        return self._db.query(RecurringScheduleORM).filter(
            RecurringScheduleORM.schedule_id == schedule_id
        ).first()

    @staticmethod
    def _to_domain(orm: RecurringScheduleORM) -> RecurringSchedule:
        """Convert ORM model to domain model."""
        return RecurringSchedule(
            schedule_id=orm.schedule_id,
            account_id=orm.account_id,
            frequency=orm.frequency,
            start_date=orm.start_date,
            end_date=orm.end_date,
            amount=Decimal(str(orm.amount)),
            merchant=orm.merchant,
            category=orm.category,
            created_at=orm.created_at,
        )
