# modules/team/repository.py
"""
Read-only DB access for teams and employees.
Team CRUD and employee import live outside this service.
"""
from typing import List, Optional
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from wishwello.core.exceptions import store_operation
from wishwello.shared.models import Employee, Team


class TeamRepository:

    @store_operation
    async def get(self, db: AsyncSession, team_id: UUID) -> Optional[Team]:
        r = await db.execute(select(Team).where(Team.id == team_id))
        return r.scalar_one_or_none()

    @store_operation
    async def list_all(self, db: AsyncSession) -> List[Team]:
        r = await db.execute(select(Team).order_by(Team.created_at))
        return r.scalars().all()


class EmployeeRepository:

    @store_operation
    async def count_active(self, db: AsyncSession, team_id: UUID) -> int:
        r = await db.execute(
            select(func.count(Employee.id)).where(
                Employee.team_id == team_id,
                Employee.is_active == True,  # noqa: E712
            )
        )
        return r.scalar_one()
