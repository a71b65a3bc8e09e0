# modules/dashboard/service.py
"""
Manager dashboard: headline pulse, trend, participation, history, comments.

Window defaults to the last DASHBOARD_WINDOW_DAYS days. The pulse part
comes from the stored weekly scores, not from the window.
"""
from datetime import datetime, timedelta, timezone
from typing import Dict, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from wishwello.engine.participation.estimator import estimate_participation
from wishwello.engine.pulse.alerting import compute_trend
from wishwello.modules.feedback.repository import ResponseRepository
from wishwello.modules.pulse.repository import PulseScoreRepository
from wishwello.modules.team.repository import EmployeeRepository, TeamRepository

RECENT_COMMENT_MIN_LENGTH = 10      # strictly longer
RECENT_COMMENTS_LIMIT = 10
MAX_RESPONSE_RATE = 100


def unavailable_dashboard() -> Dict:
    """Placeholder body the UI renders when the store cannot be read."""
    return {
        "currentPulse": None,
        "trend": 0,
        "responseRate": 0,
        "totalEmployees": 0,
        "pulseHistory": [],
        "recentComments": [],
    }


class DashboardService:

    def __init__(
        self,
        team_repo: TeamRepository,
        employee_repo: EmployeeRepository,
        response_repo: ResponseRepository,
        pulse_repo: PulseScoreRepository,
        window_days: int = 30,
        history_limit: int = 12,
        tz: str = "UTC",
    ):
        self.team_repo = team_repo
        self.employee_repo = employee_repo
        self.response_repo = response_repo
        self.pulse_repo = pulse_repo
        self.window_days = window_days
        self.history_limit = history_limit
        self.tz = tz

    async def get_dashboard(
        self,
        db: AsyncSession,
        team_id: UUID,
        date_from: Optional[datetime] = None,
        date_to: Optional[datetime] = None,
        now: Optional[datetime] = None,
    ) -> Dict:
        if not await self.team_repo.get(db, team_id):
            raise LookupError("TEAM_NOT_FOUND")

        now = now or datetime.now(timezone.utc)
        if date_from is None:
            date_from = now - timedelta(days=self.window_days)

        history = await self.pulse_repo.list_by_team(db, team_id, limit=self.history_limit)
        employee_count = await self.employee_repo.count_active(db, team_id)
        responses = await self.response_repo.list_by_team(db, team_id, date_from, date_to)

        participation = estimate_participation(responses, employee_count, self.tz)

        newest_first = sorted(responses, key=lambda r: r.submitted_at, reverse=True)
        comments = [r for r in newest_first if r.value and len(r.value) > RECENT_COMMENT_MIN_LENGTH]

        return {
            "current_pulse": float(history[0].score) if history else None,
            "trend": compute_trend(history),
            "response_rate": min(participation.response_rate, MAX_RESPONSE_RATE),
            "total_employees": employee_count,
            "pulse_history": [
                {
                    "date":           s.week_starting,
                    "score":          float(s.score),
                    "response_count": s.response_count,
                }
                for s in reversed(history)
            ],
            "recent_comments": [
                {"text": r.value, "submitted_at": r.submitted_at}
                for r in comments[:RECENT_COMMENTS_LIMIT]
            ],
        }
