# modules/feedback/service.py
"""
Anonymous survey submission.

Pipeline:
1. Team exists
2. Every answer targets a question of the team's current catalog
3. Every required question has a non-empty answer
4. One Response per answer, all with the same submitted_at

Nothing identifying the respondent is read or stored.
"""
import logging
from datetime import datetime, timezone
from typing import Dict, List, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from wishwello.modules.catalog.repository import QuestionRepository
from wishwello.modules.feedback.repository import ResponseRepository
from wishwello.modules.team.repository import TeamRepository

logger = logging.getLogger(__name__)


class FeedbackService:

    def __init__(
        self,
        team_repo: TeamRepository,
        question_repo: QuestionRepository,
        response_repo: ResponseRepository,
    ):
        self.team_repo = team_repo
        self.question_repo = question_repo
        self.response_repo = response_repo

    async def get_form(self, db: AsyncSession, team_id: UUID) -> Dict:
        team = await self.team_repo.get(db, team_id)
        if not team:
            raise LookupError("TEAM_NOT_FOUND")
        questions = await self.question_repo.list_by_team(db, team_id)
        return {"team": team, "questions": questions}

    async def submit(
        self,
        db: AsyncSession,
        team_id: UUID,
        answers: List[Dict],
        now: Optional[datetime] = None,
    ) -> Dict:
        if not await self.team_repo.get(db, team_id):
            raise LookupError("TEAM_NOT_FOUND")

        catalog = {q.id: q for q in await self.question_repo.list_by_team(db, team_id)}

        values = [(a["question_id"], (a.get("value") or "").strip()) for a in answers]
        if any(question_id not in catalog for question_id, _ in values):
            raise ValueError("UNKNOWN_QUESTION")

        answered = {question_id for question_id, value in values if value}
        if any(q.is_required and q.id not in answered for q in catalog.values()):
            raise ValueError("MISSING_REQUIRED_ANSWER")

        submitted_at = now or datetime.now(timezone.utc)
        await self.response_repo.create_many(db, [
            {
                "team_id":      team_id,
                "question_id":  question_id,
                "value":        value,
                "submitted_at": submitted_at,
            }
            for question_id, value in values
        ])

        logger.info("Feedback received for team %s (%d answers)", team_id, len(values))
        return {"received": len(values), "submitted_at": submitted_at}
