# backend/wishwello/shared/models/Pulse.py
"""
Weekly pulse score, one row per team per week.

Written only by the weekly calculation (modules/pulse/service.py),
never updated or deleted: the rows form the trend time series read by
the dashboard and by the drop alert.
"""
import uuid

from sqlalchemy import Column, Integer, Numeric, DateTime, ForeignKey, Uuid, UniqueConstraint
from sqlalchemy.sql import func

from wishwello.core.database import Base


class PulseScore(Base):
    __tablename__ = "pulse_scores"

    id              = Column(Uuid, primary_key=True, default=uuid.uuid4)
    team_id         = Column(Uuid, ForeignKey("teams.id", ondelete="CASCADE"), nullable=False, index=True)

    score           = Column(Numeric(3, 1), nullable=False)   # 1.0 - 10.0
    response_count  = Column(Integer, nullable=False)         # estimate, see engine/pulse/score.py
    total_employees = Column(Integer, nullable=False)
    week_starting   = Column(DateTime(timezone=True), nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # A duplicate trigger for the same week must not create a second row
    __table_args__ = (
        UniqueConstraint("team_id", "week_starting", name="uq_pulse_team_week"),
    )

    def __repr__(self):
        return f"<PulseScore team={self.team_id} week={self.week_starting} score={self.score}>"
