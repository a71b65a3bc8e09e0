# modules/pulse/router.py
"""
Pulse endpoints: manual / backfill trigger and stored history.
The weekly run for every team goes through wishwello.jobs.weekly_pulse.
"""
from datetime import date, datetime, time
from typing import List, Optional
from zoneinfo import ZoneInfo
from uuid import UUID

from fastapi import APIRouter, HTTPException, Query, status

from wishwello.core.config import settings
from wishwello.modules.pulse.schemas import PulseCalculateOut, PulseScoreOut
from wishwello.shared.deps import DbDep, PulseServiceDep

router = APIRouter(prefix="/pulse", tags=["Pulse"])


@router.post(
    "/{team_id}/calculate",
    response_model=PulseCalculateOut,
    summary="Calculate the weekly pulse of a team",
    description=(
        "Current week by default; weekStart (YYYY-MM-DD) targets the week "
        "containing that day. Idempotent per team and week."
    ),
)
async def calculate_pulse(
    team_id: UUID,
    db: DbDep,
    service: PulseServiceDep,
    week_start: Optional[date] = Query(None, alias="weekStart"),
):
    boundary = None
    if week_start is not None:
        boundary = datetime.combine(week_start, time.min, tzinfo=ZoneInfo(settings.TIMEZONE))

    try:
        result = await service.calculate(db, team_id, week_start=boundary)
    except LookupError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Team not found.")
    return {"created": result.created, "score": result.score}


@router.get(
    "/{team_id}/history",
    response_model=List[PulseScoreOut],
    summary="Stored pulse scores, newest week first",
)
async def get_history(
    team_id: UUID,
    db: DbDep,
    service: PulseServiceDep,
    limit: int = Query(settings.PULSE_HISTORY_LIMIT, ge=1, le=104),
):
    try:
        return await service.get_history(db, team_id, limit)
    except LookupError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Team not found.")
