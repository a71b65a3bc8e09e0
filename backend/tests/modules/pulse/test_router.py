# tests/modules/pulse/test_router.py
"""
HTTP tests for modules.pulse.router

Coverage:
    POST /pulse/{id}/calculate → created score, null score, weekStart forwarded, 404
    GET  /pulse/{id}/history   → 200 list, limit validation, 404
"""
from datetime import datetime
from unittest.mock import AsyncMock, MagicMock

import pytest

from wishwello.main import app
from wishwello.modules.pulse.service import PulseCalculation
from wishwello.shared.deps import get_pulse_service
from tests.conftest import TEAM_ID, make_pulse_score

pytestmark = pytest.mark.router


@pytest.fixture
def pulse_service():
    service = MagicMock()
    service.calculate = AsyncMock(return_value=PulseCalculation(score=None, created=False))
    service.get_history = AsyncMock(return_value=[])
    app.dependency_overrides[get_pulse_service] = lambda: service
    return service


@pytest.mark.asyncio
async def test_calculate_created(client, pulse_service):
    row = make_pulse_score(score=7.5, response_count=3)
    pulse_service.calculate.return_value = PulseCalculation(score=row, created=True)

    resp = await client.post(f"/pulse/{TEAM_ID}/calculate")

    assert resp.status_code == 200
    body = resp.json()
    assert body["created"] is True
    assert body["score"]["score"] == 7.5
    assert body["score"]["responseCount"] == 3


@pytest.mark.asyncio
async def test_calculate_no_pulse(client, pulse_service):
    resp = await client.post(f"/pulse/{TEAM_ID}/calculate")
    assert resp.json() == {"created": False, "score": None}


@pytest.mark.asyncio
async def test_calculate_week_start_forwarded(client, pulse_service):
    await client.post(f"/pulse/{TEAM_ID}/calculate", params={"weekStart": "2024-03-06"})

    boundary = pulse_service.calculate.await_args.kwargs["week_start"]
    assert isinstance(boundary, datetime)
    assert boundary.date().isoformat() == "2024-03-06"
    assert boundary.tzinfo is not None


@pytest.mark.asyncio
async def test_calculate_unknown_team(client, pulse_service):
    pulse_service.calculate.side_effect = LookupError("TEAM_NOT_FOUND")
    resp = await client.post(f"/pulse/{TEAM_ID}/calculate")
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_history(client, pulse_service):
    pulse_service.get_history.return_value = [make_pulse_score(score=6.0), make_pulse_score(score=8.0)]

    resp = await client.get(f"/pulse/{TEAM_ID}/history", params={"limit": 2})

    assert resp.status_code == 200
    assert [p["score"] for p in resp.json()] == [6.0, 8.0]
    assert pulse_service.get_history.await_args.args[2] == 2


@pytest.mark.asyncio
async def test_history_limit_validated(client, pulse_service):
    resp = await client.get(f"/pulse/{TEAM_ID}/history", params={"limit": 0})
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_history_unknown_team(client, pulse_service):
    pulse_service.get_history.side_effect = LookupError("TEAM_NOT_FOUND")
    resp = await client.get(f"/pulse/{TEAM_ID}/history")
    assert resp.status_code == 404
