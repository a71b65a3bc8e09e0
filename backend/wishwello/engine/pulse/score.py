# engine/pulse/score.py
"""
Weekly pulse score. ZERO DB access.
Receives the responses of one week, returns a WeeklyPulse or None.

The headline number is bounds-strict (only 1-10 integers count), unlike
the dashboard analytics which keep out-of-range values. An empty week
produces no score at all, never a zero placeholder.
"""
import math
from dataclasses import dataclass
from datetime import datetime, time, timedelta, timezone, tzinfo
from typing import Any, List, Optional, Sequence, Union
from zoneinfo import ZoneInfo

import numpy as np

from wishwello.engine.numeric import parse_int_prefix, round_half_up

# Fixed divisor used to turn raw response volume into a submission count.
# Does not follow the team's actual catalog size; stored history and
# dashboards are on this scale.
ESTIMATED_QUESTIONS_PER_SUBMISSION = 3

PULSE_MIN_SCORE = 1
PULSE_MAX_SCORE = 10

WEEK = timedelta(days=7)


@dataclass
class WeeklyPulse:
    team_id: Any
    week_starting: datetime
    score: float                # 1.0 - 10.0, one decimal
    response_count: int         # estimate, see ESTIMATED_QUESTIONS_PER_SUBMISSION
    total_employees: int


def week_start_for(moment: datetime, tz: Union[str, tzinfo] = "UTC") -> datetime:
    """Most recent Sunday 00:00 in `tz`, at or before `moment` (Sunday is day 0)."""
    zone = ZoneInfo(tz) if isinstance(tz, str) else tz
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    local = moment.astimezone(zone)
    days_since_sunday = (local.weekday() + 1) % 7
    sunday = local.date() - timedelta(days=days_since_sunday)
    return datetime.combine(sunday, time.min, tzinfo=zone)


def select_week(responses: Sequence[Any], week_start: datetime) -> List[Any]:
    """Responses submitted in the half-open window [week_start, week_start + 7 days)."""
    week_end = week_start + WEEK
    return [r for r in responses if week_start <= r.submitted_at < week_end]


def _valid_scores(responses: Sequence[Any]) -> List[int]:
    scores = []
    for r in responses:
        n = parse_int_prefix(r.value)
        if n is not None and PULSE_MIN_SCORE <= n <= PULSE_MAX_SCORE:
            scores.append(n)
    return scores


def compute_weekly_pulse(
    team_id: Any,
    week_start: datetime,
    responses: Sequence[Any],
    employee_count: int,
) -> Optional[WeeklyPulse]:
    """
    Pulse for one team and one week.

    Args:
        responses: candidate rows (value, submitted_at). Rows outside the
                   week are ignored, so a wider window can be passed.
                   Orphaned rows are not filtered against the catalog.
        employee_count: active employees, copied as total_employees.

    Returns:
        None when the week has no responses or no valid 1-10 value.
    """
    week_responses = select_week(responses, week_start)
    if not week_responses:
        return None

    scores = _valid_scores(week_responses)
    if not scores:
        return None

    return WeeklyPulse(
        team_id=team_id,
        week_starting=week_start,
        score=round_half_up(float(np.mean(scores)), 1),
        response_count=math.ceil(len(week_responses) / ESTIMATED_QUESTIONS_PER_SUBMISSION),
        total_employees=employee_count,
    )
