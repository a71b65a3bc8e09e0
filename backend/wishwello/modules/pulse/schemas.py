# modules/pulse/schemas.py
from datetime import datetime
from typing import Optional
from uuid import UUID

from wishwello.shared.schemas import CamelModel


class PulseScoreOut(CamelModel):
    id: UUID
    team_id: UUID
    score: float
    response_count: int        # estimate, ceil(responses / 3)
    total_employees: int
    week_starting: datetime
    created_at: Optional[datetime] = None


class PulseCalculateOut(CamelModel):
    """score is null when the week has no valid 1-10 answer."""
    created: bool
    score: Optional[PulseScoreOut] = None
