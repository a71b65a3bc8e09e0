# modules/dashboard/schemas.py
from datetime import datetime
from typing import List, Optional

from pydantic import Field

from wishwello.shared.schemas import CamelModel


class PulsePointOut(CamelModel):
    date: datetime
    score: float
    response_count: int


class RecentCommentOut(CamelModel):
    text: str
    submitted_at: datetime


class DashboardOut(CamelModel):
    current_pulse: Optional[float] = None
    trend: float = 0
    response_rate: int = Field(0, ge=0, le=100)
    total_employees: int
    pulse_history: List[PulsePointOut]      # oldest first
    recent_comments: List[RecentCommentOut]  # newest first
