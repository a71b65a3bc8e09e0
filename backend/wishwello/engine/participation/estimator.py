# engine/participation/estimator.py
"""
Participation estimate from anonymous responses. ZERO DB access.

Responses carry no respondent identity. One respondent is assumed to
answer the whole survey within a single calendar day, so the number of
distinct submission days stands in for the number of respondents. Two
people answering on the same day count once: this undercounts.

Days are calendar days in the team's zone (settings.TIMEZONE), the same
zone the pulse weeks are cut in.
"""
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Sequence
from zoneinfo import ZoneInfo

from wishwello.engine.numeric import round_half_up


@dataclass
class Participation:
    unique_respondents: int
    response_rate: int          # 0-100 when the estimate does not exceed headcount


def _local_day(moment: datetime, zone: ZoneInfo):
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(zone).date()


def estimate_unique_respondents(responses: Sequence[Any], tz: str = "UTC") -> int:
    zone = ZoneInfo(tz)
    return len({_local_day(r.submitted_at, zone) for r in responses})


def estimate_participation(responses: Sequence[Any], employee_count: int, tz: str = "UTC") -> Participation:
    unique = estimate_unique_respondents(responses, tz)
    if employee_count <= 0:
        return Participation(unique_respondents=unique, response_rate=0)
    return Participation(
        unique_respondents=unique,
        response_rate=round_half_up(100 * unique / employee_count),
    )
