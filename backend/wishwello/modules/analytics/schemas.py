# modules/analytics/schemas.py
"""
Analytics-facing JSON shape consumed by the dashboard UI.
QuestionAnalyticsOut is discriminated on `type`.
"""
from typing import Annotated, Dict, List, Literal, Optional, Union
from uuid import UUID

from pydantic import Field

from wishwello.modules.feedback.schemas import TeamPublicOut
from wishwello.shared.schemas import CamelModel


class MetricAnalyticsOut(CamelModel):
    type: Literal["metric"]
    question_id: UUID
    title: str
    total_responses: int
    average: Optional[float] = None
    distribution: Dict[str, int]
    insights: List[str]


class YesNoAnalyticsOut(CamelModel):
    type: Literal["yesno"]
    question_id: UUID
    title: str
    total_responses: int
    yes_count: int
    no_count: int
    yes_percentage: int
    no_percentage: int
    insights: List[str]


class SentimentCountsOut(CamelModel):
    positive: int
    negative: int
    stress: int
    communication: int


class CommentAnalyticsOut(CamelModel):
    type: Literal["comment"]
    question_id: UUID
    title: str
    total_responses: int
    total_comments: int
    comments: List[str]
    sentiment_counts: SentimentCountsOut
    themes: List[str]
    insights: List[str]


QuestionAnalyticsOut = Annotated[
    Union[MetricAnalyticsOut, YesNoAnalyticsOut, CommentAnalyticsOut],
    Field(discriminator="type"),
]


class ResponseStatsOut(CamelModel):
    total_responses: int
    approximate_respondents: int
    responses_per_30_days: int = Field(..., alias="responsesPer30Days")


class TeamAnalyticsOut(CamelModel):
    team: Optional[TeamPublicOut] = None
    question_analytics: List[QuestionAnalyticsOut]
    overall_insights: List[str]
    response_stats: ResponseStatsOut
