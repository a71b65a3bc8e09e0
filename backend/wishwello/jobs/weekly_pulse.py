# jobs/weekly_pulse.py
"""
Weekly pulse run for every team, invoked by the external scheduler
(Sunday 00:00, settings.TIMEZONE):

    python -m wishwello.jobs.weekly_pulse
    python -m wishwello.jobs.weekly_pulse --week-start 2024-03-03   # backfill

Exit code 1 when at least one team failed.
"""
import argparse
import asyncio
import logging
import sys
from datetime import date, datetime, time
from typing import List, Optional
from zoneinfo import ZoneInfo

from wishwello.core.config import settings
from wishwello.core.database import AsyncSessionLocal, engine
from wishwello.core.logging import configure_logging
from wishwello.modules.pulse.service import WeeklyRunReport
from wishwello.shared.deps import build_pulse_service

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Calculate the weekly pulse score of every team.")
    parser.add_argument(
        "--week-start",
        type=date.fromisoformat,
        default=None,
        help="Any day of the week to calculate (YYYY-MM-DD). Defaults to the current week.",
    )
    return parser.parse_args(argv)


async def run(week_start: Optional[date] = None) -> WeeklyRunReport:
    boundary = None
    if week_start is not None:
        boundary = datetime.combine(week_start, time.min, tzinfo=ZoneInfo(settings.TIMEZONE))

    service = build_pulse_service()
    try:
        return await service.run_weekly(AsyncSessionLocal, week_start=boundary)
    finally:
        await engine.dispose()


def main(argv: Optional[List[str]] = None) -> int:
    configure_logging()
    args = parse_args(argv)
    report = asyncio.run(run(args.week_start))
    return 1 if report.failed else 0


if __name__ == "__main__":
    sys.exit(main())
