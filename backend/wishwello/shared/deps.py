# backend/wishwello/shared/deps.py
"""
FastAPI dependencies reused by every router.
Injected through Depends(), never called directly.

Services are built per request from their repositories; tests swap any
of them with app.dependency_overrides.
"""
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Annotated, Optional

from fastapi import Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from wishwello.core.config import settings
from wishwello.core.database import get_db
from wishwello.infra.notifications import AlertSink, build_alert_sink
from wishwello.modules.analytics.service import AnalyticsService
from wishwello.modules.catalog.repository import QuestionRepository, TemplateRepository
from wishwello.modules.catalog.service import CatalogService
from wishwello.modules.dashboard.service import DashboardService
from wishwello.modules.feedback.repository import ResponseRepository
from wishwello.modules.feedback.service import FeedbackService
from wishwello.modules.pulse.repository import PulseScoreRepository
from wishwello.modules.pulse.service import PulseService
from wishwello.modules.team.repository import EmployeeRepository, TeamRepository


# ── Repositories ──────────────────────────────────────────

def get_team_repo() -> TeamRepository:
    return TeamRepository()


def get_employee_repo() -> EmployeeRepository:
    return EmployeeRepository()


def get_question_repo() -> QuestionRepository:
    return QuestionRepository()


def get_template_repo() -> TemplateRepository:
    return TemplateRepository()


def get_response_repo() -> ResponseRepository:
    return ResponseRepository()


def get_pulse_repo() -> PulseScoreRepository:
    return PulseScoreRepository()


def get_alert_sink() -> AlertSink:
    return build_alert_sink(settings)


# ── Services ──────────────────────────────────────────────

def get_catalog_service(
    question_repo: Annotated[QuestionRepository, Depends(get_question_repo)],
    team_repo: Annotated[TeamRepository, Depends(get_team_repo)],
    template_repo: Annotated[TemplateRepository, Depends(get_template_repo)],
) -> CatalogService:
    return CatalogService(question_repo, team_repo, template_repo)


def get_feedback_service(
    team_repo: Annotated[TeamRepository, Depends(get_team_repo)],
    question_repo: Annotated[QuestionRepository, Depends(get_question_repo)],
    response_repo: Annotated[ResponseRepository, Depends(get_response_repo)],
) -> FeedbackService:
    return FeedbackService(team_repo, question_repo, response_repo)


def get_analytics_service(
    team_repo: Annotated[TeamRepository, Depends(get_team_repo)],
    question_repo: Annotated[QuestionRepository, Depends(get_question_repo)],
    response_repo: Annotated[ResponseRepository, Depends(get_response_repo)],
) -> AnalyticsService:
    return AnalyticsService(team_repo, question_repo, response_repo, tz=settings.TIMEZONE)


def get_dashboard_service(
    team_repo: Annotated[TeamRepository, Depends(get_team_repo)],
    employee_repo: Annotated[EmployeeRepository, Depends(get_employee_repo)],
    response_repo: Annotated[ResponseRepository, Depends(get_response_repo)],
    pulse_repo: Annotated[PulseScoreRepository, Depends(get_pulse_repo)],
) -> DashboardService:
    return DashboardService(
        team_repo, employee_repo, response_repo, pulse_repo,
        window_days=settings.DASHBOARD_WINDOW_DAYS,
        history_limit=settings.PULSE_HISTORY_LIMIT,
        tz=settings.TIMEZONE,
    )


def build_pulse_service(alert_sink: Optional[AlertSink] = None) -> PulseService:
    """Also used outside FastAPI by the weekly job."""
    return PulseService(
        TeamRepository(), EmployeeRepository(), ResponseRepository(), PulseScoreRepository(),
        alert_sink=alert_sink or build_alert_sink(settings),
        tz=settings.TIMEZONE,
        concurrency=settings.PULSE_JOB_CONCURRENCY,
        team_timeout=settings.PULSE_JOB_TEAM_TIMEOUT_SECONDS,
    )


def get_pulse_service(
    alert_sink: Annotated[AlertSink, Depends(get_alert_sink)],
) -> PulseService:
    return build_pulse_service(alert_sink)


# ── Query parameters ──────────────────────────────────────

@dataclass
class DateRange:
    date_from: Optional[datetime] = None
    date_to: Optional[datetime] = None


def _aware(value: Optional[datetime]) -> Optional[datetime]:
    # Naive datetimes from the query string are read as UTC
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def get_date_range(
    date_from: Annotated[Optional[datetime], Query(alias="from")] = None,
    date_to: Annotated[Optional[datetime], Query(alias="to")] = None,
) -> DateRange:
    return DateRange(date_from=_aware(date_from), date_to=_aware(date_to))


# ── Type aliases for the routers ──────────────────────────
DbDep               = Annotated[AsyncSession, Depends(get_db)]
DateRangeDep        = Annotated[DateRange, Depends(get_date_range)]
CatalogServiceDep   = Annotated[CatalogService, Depends(get_catalog_service)]
FeedbackServiceDep  = Annotated[FeedbackService, Depends(get_feedback_service)]
AnalyticsServiceDep = Annotated[AnalyticsService, Depends(get_analytics_service)]
DashboardServiceDep = Annotated[DashboardService, Depends(get_dashboard_service)]
PulseServiceDep     = Annotated[PulseService, Depends(get_pulse_service)]
