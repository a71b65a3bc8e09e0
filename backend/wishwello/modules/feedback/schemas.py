# modules/feedback/schemas.py
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import Field

from wishwello.modules.catalog.schemas import QuestionOut
from wishwello.shared.schemas import CamelModel


class TeamPublicOut(CamelModel):
    name: str
    company_name: Optional[str] = None


class FeedbackFormOut(CamelModel):
    team: TeamPublicOut
    questions: List[QuestionOut]


class AnswerIn(CamelModel):
    question_id: UUID
    # Stored as text whatever the question type; the analytics tolerate junk.
    value: str = Field("", max_length=5000)


class FeedbackSubmitIn(CamelModel):
    answers: List[AnswerIn] = Field(..., min_length=1)


class FeedbackSubmitOut(CamelModel):
    received: int
    submitted_at: datetime
