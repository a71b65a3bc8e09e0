# modules/pulse/repository.py
"""
DB access for the weekly pulse time series (append-only).

(team_id, week_starting) is unique in the database. A concurrent or
repeated trigger for the same week gets the existing row back instead
of a second one.
"""
from datetime import datetime
from typing import Dict, List, Optional, Tuple
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from wishwello.core.exceptions import store_operation
from wishwello.shared.models import PulseScore


class PulseScoreRepository:

    @store_operation
    async def create(self, db: AsyncSession, data: Dict) -> Tuple[PulseScore, bool]:
        """Returns (row, created). created is False when the week already had a score."""
        db_obj = PulseScore(**data)
        db.add(db_obj)
        try:
            await db.commit()
        except IntegrityError:
            await db.rollback()
            existing = await self._get_for_week(db, data["team_id"], data["week_starting"])
            if existing is None:
                raise
            return existing, False
        await db.refresh(db_obj)
        return db_obj, True

    async def _get_for_week(
        self, db: AsyncSession, team_id: UUID, week_starting: datetime
    ) -> Optional[PulseScore]:
        r = await db.execute(
            select(PulseScore).where(
                PulseScore.team_id == team_id,
                PulseScore.week_starting == week_starting,
            )
        )
        return r.scalar_one_or_none()

    @store_operation
    async def list_by_team(
        self, db: AsyncSession, team_id: UUID, limit: int = 12
    ) -> List[PulseScore]:
        """Newest week first."""
        r = await db.execute(
            select(PulseScore)
            .where(PulseScore.team_id == team_id)
            .order_by(PulseScore.week_starting.desc())
            .limit(limit)
        )
        return r.scalars().all()
