# tests/modules/pulse/test_service.py
"""
Unit tests for modules.pulse.service — PulseService.

Coverage:
    calculate   → persisted score, no row on empty / invalid week, week resolution,
                  alert on sharp drop, no alert on small drop,
                  no alert when the week already had a score, TEAM_NOT_FOUND
    run_weekly  → every team processed, failures and timeouts isolated
"""
import asyncio
import uuid
from datetime import timedelta

import pytest

from wishwello.core.exceptions import StoreError
from wishwello.modules.pulse.service import PulseService
from tests.conftest import (
    TEAM_ID,
    WEEK_START,
    make_async_db,
    make_history,
    make_pulse_score,
    make_response,
    make_session_factory,
    make_team,
    utc,
)

pytestmark = pytest.mark.service

NOW = utc(2024, 3, 6, 12, 0)     # Wednesday of the WEEK_START week


@pytest.fixture
def service(mocker):
    team_repo = mocker.Mock()
    team_repo.get = mocker.AsyncMock(return_value=make_team())
    team_repo.list_all = mocker.AsyncMock(return_value=[])
    employee_repo = mocker.Mock()
    employee_repo.count_active = mocker.AsyncMock(return_value=6)
    response_repo = mocker.Mock()
    response_repo.list_for_week = mocker.AsyncMock(return_value=[])
    pulse_repo = mocker.Mock()
    pulse_repo.create = mocker.AsyncMock(
        side_effect=lambda db, data: (make_pulse_score(**data), True)
    )
    pulse_repo.list_by_team = mocker.AsyncMock(return_value=[])
    alert_sink = mocker.Mock()
    alert_sink.notify = mocker.AsyncMock()
    return PulseService(
        team_repo, employee_repo, response_repo, pulse_repo, alert_sink,
        tz="UTC", concurrency=2, team_timeout=0.5,
    )


def _week_responses(*values):
    return [make_response(value=v, submitted_at=NOW) for v in values]


# ── calculate ─────────────────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_calculate_persists_score(service):
    service.response_repo.list_for_week.return_value = _week_responses("7", "8", "yes", "Nice week overall")

    result = await service.calculate(make_async_db(), TEAM_ID, now=NOW)

    assert result.created is True
    data = service.pulse_repo.create.await_args.args[1]
    assert data == {
        "team_id": TEAM_ID,
        "score": 7.5,
        "response_count": 2,
        "total_employees": 6,
        "week_starting": WEEK_START,
    }


@pytest.mark.asyncio
async def test_calculate_resolves_week_from_now(service):
    db = make_async_db()
    await service.calculate(db, TEAM_ID, now=NOW)
    service.response_repo.list_for_week.assert_awaited_once_with(db, TEAM_ID, WEEK_START)


@pytest.mark.asyncio
async def test_calculate_aligns_explicit_boundary(service):
    db = make_async_db()
    await service.calculate(db, TEAM_ID, week_start=WEEK_START + timedelta(days=3))
    service.response_repo.list_for_week.assert_awaited_once_with(db, TEAM_ID, WEEK_START)


@pytest.mark.asyncio
async def test_empty_week_persists_nothing(service):
    result = await service.calculate(make_async_db(), TEAM_ID, now=NOW)

    assert result.score is None
    assert result.created is False
    service.pulse_repo.create.assert_not_awaited()


@pytest.mark.asyncio
async def test_no_valid_metric_persists_nothing(service):
    service.response_repo.list_for_week.return_value = _week_responses("yes", "no", "42")

    assert await service.calculate_weekly_pulse(make_async_db(), TEAM_ID, now=NOW) is None
    service.pulse_repo.create.assert_not_awaited()


@pytest.mark.asyncio
async def test_sharp_drop_notifies_sink(service):
    service.response_repo.list_for_week.return_value = _week_responses("6", "7")
    service.pulse_repo.list_by_team.return_value = make_history(9.0, 6.5)

    await service.calculate(make_async_db(), TEAM_ID, now=NOW)

    service.alert_sink.notify.assert_awaited_once()
    alert = service.alert_sink.notify.await_args.args[0]
    assert (alert.team_id, alert.current_score, alert.drop) == (TEAM_ID, 6.5, 2.5)


@pytest.mark.asyncio
async def test_small_drop_does_not_notify(service):
    service.response_repo.list_for_week.return_value = _week_responses("6")
    service.pulse_repo.list_by_team.return_value = make_history(8.0, 6.0)

    await service.calculate(make_async_db(), TEAM_ID, now=NOW)

    service.alert_sink.notify.assert_not_awaited()


@pytest.mark.asyncio
async def test_duplicate_week_does_not_alert_twice(service):
    existing = make_pulse_score(score=6.5)
    service.response_repo.list_for_week.return_value = _week_responses("6", "7")
    service.pulse_repo.create.side_effect = None
    service.pulse_repo.create.return_value = (existing, False)
    service.pulse_repo.list_by_team.return_value = make_history(9.0, 6.5)

    result = await service.calculate(make_async_db(), TEAM_ID, now=NOW)

    assert result.score is existing
    assert result.created is False
    service.alert_sink.notify.assert_not_awaited()


@pytest.mark.asyncio
async def test_calculate_unknown_team(service):
    service.team_repo.get.return_value = None
    with pytest.raises(LookupError):
        await service.calculate(make_async_db(), TEAM_ID, now=NOW)


# ── run_weekly ────────────────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_run_weekly_one_failure_does_not_stop_others(service):
    ok_id, empty_id, broken_id = uuid.uuid4(), uuid.uuid4(), uuid.uuid4()
    service.team_repo.list_all.return_value = [make_team(id=t) for t in (ok_id, empty_id, broken_id)]

    async def list_for_week(db, team_id, week_start):
        if team_id == broken_id:
            raise StoreError("ResponseRepository.list_for_week")
        if team_id == empty_id:
            return []
        return _week_responses("8")

    service.response_repo.list_for_week.side_effect = list_for_week

    report = await service.run_weekly(make_session_factory(), now=NOW)

    assert report.week_starting == WEEK_START
    assert report.created == [ok_id]
    assert report.skipped == [empty_id]
    assert report.failed == [broken_id]


@pytest.mark.asyncio
async def test_run_weekly_timeout_is_a_failure(service):
    slow_id, fast_id = uuid.uuid4(), uuid.uuid4()
    service.team_repo.list_all.return_value = [make_team(id=slow_id), make_team(id=fast_id)]

    async def list_for_week(db, team_id, week_start):
        if team_id == slow_id:
            await asyncio.sleep(5)
        return _week_responses("7")

    service.response_repo.list_for_week.side_effect = list_for_week

    report = await service.run_weekly(make_session_factory(), now=NOW)

    assert report.failed == [slow_id]
    assert report.created == [fast_id]


@pytest.mark.asyncio
async def test_run_weekly_no_teams(service):
    report = await service.run_weekly(make_session_factory(), now=NOW)
    assert (report.created, report.skipped, report.failed) == ([], [], [])
