# modules/feedback/repository.py
"""
DB access for anonymous responses (append-only).
No update, no delete, no respondent column.
"""
from datetime import datetime
from typing import Dict, List, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from wishwello.core.exceptions import store_operation
from wishwello.engine.pulse.score import WEEK
from wishwello.shared.models import Response


class ResponseRepository:

    @store_operation
    async def create_many(self, db: AsyncSession, rows: List[Dict]) -> List[Response]:
        objs = [Response(**row) for row in rows]
        db.add_all(objs)
        await db.commit()
        return objs

    @store_operation
    async def list_by_team(
        self,
        db: AsyncSession,
        team_id: UUID,
        date_from: Optional[datetime] = None,
        date_to: Optional[datetime] = None,
    ) -> List[Response]:
        """Newest first. Both bounds optional and inclusive."""
        query = select(Response).where(Response.team_id == team_id)
        if date_from is not None:
            query = query.where(Response.submitted_at >= date_from)
        if date_to is not None:
            query = query.where(Response.submitted_at <= date_to)
        r = await db.execute(query.order_by(Response.submitted_at.desc()))
        return r.scalars().all()

    @store_operation
    async def list_for_week(
        self, db: AsyncSession, team_id: UUID, week_start: datetime
    ) -> List[Response]:
        r = await db.execute(
            select(Response).where(
                Response.team_id == team_id,
                Response.submitted_at >= week_start,
                Response.submitted_at < week_start + WEEK,
            )
        )
        return r.scalars().all()
