# modules/pulse/service.py
"""
Weekly pulse calculation and drop alert.

Pipeline for one team:
1. Resolve the week boundary (Sunday 00:00, settings.TIMEZONE)
2. Read the week's responses and the active-employee count
3. engine.pulse.score.compute_weekly_pulse → nothing persisted on None
4. Persist the PulseScore (unique per team and week)
5. Compare the two latest scores → AlertSink on a sharp drop

run_weekly() fans this out over every team for the external scheduler.
One team failing or timing out never stops the others.
"""
import asyncio
import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, List, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from wishwello.engine.pulse.alerting import detect_pulse_drop
from wishwello.engine.pulse.score import compute_weekly_pulse, week_start_for
from wishwello.infra.notifications import AlertSink
from wishwello.modules.feedback.repository import ResponseRepository
from wishwello.modules.pulse.repository import PulseScoreRepository
from wishwello.modules.team.repository import EmployeeRepository, TeamRepository
from wishwello.shared.models import PulseScore

logger = logging.getLogger(__name__)


@dataclass
class PulseCalculation:
    score: Optional[PulseScore]
    created: bool


@dataclass
class WeeklyRunReport:
    week_starting: datetime
    created: List[UUID] = field(default_factory=list)
    skipped: List[UUID] = field(default_factory=list)
    failed: List[UUID] = field(default_factory=list)


class PulseService:

    def __init__(
        self,
        team_repo: TeamRepository,
        employee_repo: EmployeeRepository,
        response_repo: ResponseRepository,
        pulse_repo: PulseScoreRepository,
        alert_sink: AlertSink,
        tz: str = "UTC",
        concurrency: int = 8,
        team_timeout: float = 60.0,
    ):
        self.team_repo = team_repo
        self.employee_repo = employee_repo
        self.response_repo = response_repo
        self.pulse_repo = pulse_repo
        self.alert_sink = alert_sink
        self.tz = tz
        self.concurrency = concurrency
        self.team_timeout = team_timeout

    def resolve_week(self, week_start: Optional[datetime] = None, now: Optional[datetime] = None) -> datetime:
        """Explicit boundaries are aligned on their own Sunday as well."""
        return week_start_for(week_start or now or datetime.now(timezone.utc), self.tz)

    # ── One team ──────────────────────────────────────────────

    async def calculate(
        self,
        db: AsyncSession,
        team_id: UUID,
        week_start: Optional[datetime] = None,
        now: Optional[datetime] = None,
    ) -> PulseCalculation:
        if not await self.team_repo.get(db, team_id):
            raise LookupError("TEAM_NOT_FOUND")

        week = self.resolve_week(week_start, now)
        responses = await self.response_repo.list_for_week(db, team_id, week)
        employee_count = await self.employee_repo.count_active(db, team_id)

        pulse = compute_weekly_pulse(team_id, week, responses, employee_count)
        if pulse is None:
            logger.info("No valid pulse responses for team %s, week of %s", team_id, week.date())
            return PulseCalculation(score=None, created=False)

        row, created = await self.pulse_repo.create(db, {
            "team_id":         pulse.team_id,
            "score":           pulse.score,
            "response_count":  pulse.response_count,
            "total_employees": pulse.total_employees,
            "week_starting":   pulse.week_starting,
        })
        if not created:
            logger.info("Pulse already recorded for team %s, week of %s", team_id, week.date())
            return PulseCalculation(score=row, created=False)

        logger.info("Pulse score calculated for team %s: %.1f", team_id, pulse.score)
        await self._check_drop(db, team_id)
        return PulseCalculation(score=row, created=True)

    async def calculate_weekly_pulse(
        self,
        db: AsyncSession,
        team_id: UUID,
        week_start: Optional[datetime] = None,
        now: Optional[datetime] = None,
    ) -> Optional[PulseScore]:
        return (await self.calculate(db, team_id, week_start, now)).score

    async def _check_drop(self, db: AsyncSession, team_id: UUID) -> None:
        history = await self.pulse_repo.list_by_team(db, team_id, limit=2)
        alert = detect_pulse_drop(team_id, history)
        if alert is None:
            return
        logger.warning("Pulse drop for team %s: -%.1f (now %.1f)", team_id, alert.drop, alert.current_score)
        await self.alert_sink.notify(alert)

    async def get_history(self, db: AsyncSession, team_id: UUID, limit: int) -> List[PulseScore]:
        if not await self.team_repo.get(db, team_id):
            raise LookupError("TEAM_NOT_FOUND")
        return await self.pulse_repo.list_by_team(db, team_id, limit=limit)

    # ── Every team (weekly job) ───────────────────────────────

    async def run_weekly(
        self,
        session_factory: Callable[[], Any],
        week_start: Optional[datetime] = None,
        now: Optional[datetime] = None,
    ) -> WeeklyRunReport:
        week = self.resolve_week(week_start, now)

        async with session_factory() as db:
            teams = await self.team_repo.list_all(db)

        report = WeeklyRunReport(week_starting=week)
        semaphore = asyncio.Semaphore(self.concurrency)

        async def run_team(team_id: UUID) -> None:
            async with semaphore:
                try:
                    async with session_factory() as db:
                        result = await asyncio.wait_for(
                            self.calculate(db, team_id, week_start=week),
                            timeout=self.team_timeout,
                        )
                except asyncio.TimeoutError:
                    logger.error("Pulse calculation timed out for team %s", team_id)
                    report.failed.append(team_id)
                    return
                except Exception:
                    logger.exception("Failed to calculate pulse score for team %s", team_id)
                    report.failed.append(team_id)
                    return

            if result.created:
                report.created.append(team_id)
            else:
                report.skipped.append(team_id)

        await asyncio.gather(*(run_team(t.id) for t in teams))

        logger.info(
            "Weekly pulse run for week of %s: %d created, %d skipped, %d failed",
            week.date(), len(report.created), len(report.skipped), len(report.failed),
        )
        return report
