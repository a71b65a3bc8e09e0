# modules/analytics/service.py
"""
Question-level analytics over an arbitrary date range.

Reads the current catalog and the window's responses, then hands both
to the engine. Responses to questions no longer in the catalog are
dropped by the engine's join but still count in responseStats.
"""
from dataclasses import asdict
from datetime import datetime, timedelta, timezone
from typing import Dict, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from wishwello.content import insights as text
from wishwello.engine.analytics.overall import compute_overall_insights
from wishwello.engine.analytics.question_analytics import compute_analytics
from wishwello.engine.participation.estimator import estimate_unique_respondents
from wishwello.modules.catalog.repository import QuestionRepository
from wishwello.modules.feedback.repository import ResponseRepository
from wishwello.modules.team.repository import TeamRepository

RECENT_RESPONSES_WINDOW = timedelta(days=30)


def unavailable_analytics() -> Dict:
    """Placeholder body the UI renders when the store cannot be read."""
    return {
        "team": None,
        "questionAnalytics": [],
        "overallInsights": [text.ANALYTICS_UNAVAILABLE],
        "responseStats": {
            "totalResponses": 0,
            "approximateRespondents": 0,
            "responsesPer30Days": 0,
        },
    }


class AnalyticsService:

    def __init__(
        self,
        team_repo: TeamRepository,
        question_repo: QuestionRepository,
        response_repo: ResponseRepository,
        tz: str = "UTC",
    ):
        self.team_repo = team_repo
        self.question_repo = question_repo
        self.response_repo = response_repo
        self.tz = tz

    async def get_team_analytics(
        self,
        db: AsyncSession,
        team_id: UUID,
        date_from: Optional[datetime] = None,
        date_to: Optional[datetime] = None,
        now: Optional[datetime] = None,
    ) -> Dict:
        team = await self.team_repo.get(db, team_id)
        if not team:
            raise LookupError("TEAM_NOT_FOUND")

        now = now or datetime.now(timezone.utc)
        questions = await self.question_repo.list_by_team(db, team_id)
        responses = await self.response_repo.list_by_team(db, team_id, date_from, date_to)

        question_analytics = compute_analytics(questions, responses)
        recent_since = now - RECENT_RESPONSES_WINDOW

        return {
            "team": {"name": team.name, "company_name": team.company_name},
            "question_analytics": [asdict(qa) for qa in question_analytics],
            "overall_insights": compute_overall_insights(question_analytics, responses, self.tz),
            "response_stats": {
                "total_responses": len(responses),
                "approximate_respondents": estimate_unique_respondents(responses, self.tz),
                "responses_per_30_days": sum(1 for r in responses if r.submitted_at >= recent_since),
            },
        }
