"""Recurring schedule endpoints."""

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from networth.api.deps import get_schedule_service
from networth.api.schemas import (
    ScheduleCreateRequest,
    ScheduleUpdateRequest,
    ScheduleResponse,
    ScheduleListResponse,
)
from networth.services import ScheduleService, ScheduleCreate, ScheduleUpdate

router = APIRouter(prefix="/schedules", tags=["schedules"])


def _list_response(service: ScheduleService, schedules, today: Optional[date] = None) -> ScheduleListResponse:
    return ScheduleListResponse(
        schedules=[
            ScheduleResponse.model_validate(service.describe(s, today)) for s in schedules
        ],
        count=len(schedules),
    )


@router.post("/", response_model=ScheduleResponse, status_code=status.HTTP_201_CREATED)
def create_schedule(
    data: ScheduleCreateRequest,
    schedules: ScheduleService = Depends(get_schedule_service),
) -> ScheduleResponse:
    """Create a recurring schedule on an account."""
    payload = data.model_dump()
    payload["frequency"] = data.frequency.value
    schedule = schedules.create_schedule(ScheduleCreate(**payload))
    return ScheduleResponse.model_validate(schedules.describe(schedule))


@router.get("/", response_model=ScheduleListResponse)
def list_schedules(
    account_id: Optional[str] = Query(None, description="Only schedules of this account"),
    active: Optional[bool] = Query(None, description="Filter by active state today"),
    schedules: ScheduleService = Depends(get_schedule_service),
) -> ScheduleListResponse:
    """List schedules ordered by start date."""
    return _list_response(schedules, schedules.list_schedules(account_id=account_id, active=active))


@router.get("/due", response_model=ScheduleListResponse)
def list_due_schedules(
    on: Optional[date] = Query(None, description="Day to check; defaults to today (UTC)"),
    schedules: ScheduleService = Depends(get_schedule_service),
) -> ScheduleListResponse:
    """Schedules with an occurrence on the given day."""
    return _list_response(schedules, schedules.due_on(on), on)


@router.get("/{schedule_id}", response_model=ScheduleResponse)
def get_schedule(
    schedule_id: str,
    schedules: ScheduleService = Depends(get_schedule_service),
) -> ScheduleResponse:
    """Get a single schedule with its next occurrence."""
    return ScheduleResponse.model_validate(schedules.describe(schedules.get_schedule(schedule_id)))


@router.patch("/{schedule_id}", response_model=ScheduleResponse)
def update_schedule(
    schedule_id: str,
    data: ScheduleUpdateRequest,
    schedules: ScheduleService = Depends(get_schedule_service),
) -> ScheduleResponse:
    """Change a schedule; only fields present in the body change."""
    schedule = schedules.update_schedule(
        schedule_id,
        ScheduleUpdate(**data.model_dump(exclude_unset=True)),
    )
    return ScheduleResponse.model_validate(schedules.describe(schedule))


@router.post("/{schedule_id}/end", response_model=ScheduleResponse)
def end_schedule(
    schedule_id: str,
    schedules: ScheduleService = Depends(get_schedule_service),
) -> ScheduleResponse:
    """Stop a schedule as of today; it stays on record."""
    schedule = schedules.end_schedule(schedule_id)
    return ScheduleResponse.model_validate(schedules.describe(schedule))


@router.delete("/{schedule_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_schedule(
    schedule_id: str,
    schedules: ScheduleService = Depends(get_schedule_service),
) -> None:
    """Delete a schedule (idempotent)."""
    schedules.delete_schedule(schedule_id)
