# backend/wishwello/shared/models/Team.py
"""
Teams and their employees.

Owned by the surrounding application (team CRUD, employee import).
The pulse core only reads them: team existence and the number of
active employees. Never joined against responses (anonymity).
"""
import uuid

from sqlalchemy import Column, String, Boolean, DateTime, ForeignKey, Uuid
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from wishwello.core.database import Base


class Team(Base):
    __tablename__ = "teams"

    id           = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name         = Column(String(255), nullable=False)
    manager_id   = Column(String, nullable=False, index=True)
    company_name = Column(String(255), nullable=True)
    created_at   = Column(DateTime(timezone=True), server_default=func.now())

    employees = relationship("Employee", back_populates="team", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<Team id={self.id} name={self.name}>"


class Employee(Base):
    __tablename__ = "employees"

    id         = Column(Uuid, primary_key=True, default=uuid.uuid4)
    team_id    = Column(Uuid, ForeignKey("teams.id", ondelete="CASCADE"), nullable=False, index=True)
    email      = Column(String(255), nullable=False)
    is_active  = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    team = relationship("Team", back_populates="employees")

    def __repr__(self):
        return f"<Employee id={self.id} team={self.team_id} active={self.is_active}>"
