# modules/catalog/repository.py
"""
DB access for the question catalog.

A team's catalog is only ever replaced as a whole (delete-all-then-insert).
Responses are not touched: they keep the old question ids and become orphans.
"""
from typing import Dict, List
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from wishwello.core.exceptions import store_operation
from wishwello.shared.models import Question, QuestionTemplate


class QuestionRepository:

    @store_operation
    async def list_by_team(self, db: AsyncSession, team_id: UUID) -> List[Question]:
        r = await db.execute(
            select(Question)
            .where(Question.team_id == team_id)
            .order_by(Question.order)
        )
        return r.scalars().all()

    @store_operation
    async def replace_for_team(
        self, db: AsyncSession, team_id: UUID, questions: List[Dict]
    ) -> List[Question]:
        """Delete the team's questions and insert `questions` in one transaction."""
        try:
            await db.execute(delete(Question).where(Question.team_id == team_id))
            rows = [Question(team_id=team_id, **q) for q in questions]
            db.add_all(rows)
            await db.commit()
        except Exception:
            await db.rollback()
            raise
        for row in rows:
            await db.refresh(row)
        return sorted(rows, key=lambda q: q.order)


class TemplateRepository:

    @store_operation
    async def list_built_in(self, db: AsyncSession) -> List[QuestionTemplate]:
        r = await db.execute(
            select(QuestionTemplate)
            .where(QuestionTemplate.is_built_in.is_(True))
            .order_by(QuestionTemplate.name)
        )
        return r.scalars().all()
