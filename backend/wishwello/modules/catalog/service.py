# modules/catalog/service.py
"""
Question catalog per team.

Display order is always zero-based and contiguous after a save, whatever
the caller sent: questions are stably sorted on the supplied order (list
position when absent) and renumbered.
"""
import logging
from typing import Dict, List
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from wishwello.modules.catalog.repository import QuestionRepository, TemplateRepository
from wishwello.modules.team.repository import TeamRepository
from wishwello.shared.enums import QuestionType
from wishwello.shared.models import Question, QuestionTemplate

logger = logging.getLogger(__name__)


def normalize_order(questions: List[Dict]) -> List[Dict]:
    indexed = list(enumerate(questions))
    indexed.sort(key=lambda item: item[1].get("order") if item[1].get("order") is not None else item[0])
    return [{**q, "order": position} for position, (_, q) in enumerate(indexed)]


class CatalogService:

    def __init__(
        self,
        question_repo: QuestionRepository,
        team_repo: TeamRepository,
        template_repo: TemplateRepository,
    ):
        self.question_repo = question_repo
        self.team_repo = team_repo
        self.template_repo = template_repo

    async def list_questions(self, db: AsyncSession, team_id: UUID) -> List[Question]:
        if not await self.team_repo.get(db, team_id):
            raise LookupError("TEAM_NOT_FOUND")
        return await self.question_repo.list_by_team(db, team_id)

    async def replace_questions(
        self, db: AsyncSession, team_id: UUID, questions: List[Dict]
    ) -> List[Question]:
        if not await self.team_repo.get(db, team_id):
            raise LookupError("TEAM_NOT_FOUND")

        rows = [
            {
                "title":       q["title"].strip(),
                "type":        QuestionType(q["type"]).value,
                "is_required": q.get("is_required", True),
                "order":       q.get("order"),
            }
            for q in questions
        ]
        saved = await self.question_repo.replace_for_team(db, team_id, normalize_order(rows))
        logger.info("Question catalog replaced for team %s (%d questions)", team_id, len(saved))
        return saved


    async def list_templates(self, db: AsyncSession) -> List[QuestionTemplate]:
        """Built-in templates only. Loading one is a plain replace_questions."""
        return await self.template_repo.list_built_in(db)
