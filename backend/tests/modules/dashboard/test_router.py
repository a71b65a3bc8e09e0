# tests/modules/dashboard/test_router.py
"""
HTTP tests for modules.dashboard.router

Coverage:
    GET /teams/{id}/dashboard → 200 camelCase, 404, 503 placeholder on any failure
"""
from unittest.mock import AsyncMock, MagicMock

import pytest

from wishwello.core.exceptions import StoreError
from wishwello.main import app
from wishwello.shared.deps import get_dashboard_service
from tests.conftest import TEAM_ID, WEEK_START, utc

pytestmark = pytest.mark.router


@pytest.fixture
def dashboard_service():
    service = MagicMock()
    service.get_dashboard = AsyncMock(return_value={
        "current_pulse": 6.5,
        "trend": -2.5,
        "response_rate": 40,
        "total_employees": 5,
        "pulse_history": [{"date": WEEK_START, "score": 6.5, "response_count": 2}],
        "recent_comments": [{"text": "Deadlines are brutal", "submitted_at": utc(2024, 3, 5, 9)}],
    })
    app.dependency_overrides[get_dashboard_service] = lambda: service
    return service


@pytest.mark.asyncio
async def test_dashboard(client, dashboard_service):
    resp = await client.get(f"/teams/{TEAM_ID}/dashboard")

    assert resp.status_code == 200
    body = resp.json()
    assert body["currentPulse"] == 6.5
    assert body["trend"] == -2.5
    assert body["responseRate"] == 40
    assert body["totalEmployees"] == 5
    assert body["pulseHistory"][0]["responseCount"] == 2
    assert body["pulseHistory"][0]["date"].startswith("2024-03-03T00:00:00")
    assert body["recentComments"][0]["submittedAt"].startswith("2024-03-05T09:00:00")


@pytest.mark.asyncio
async def test_unknown_team(client, dashboard_service):
    dashboard_service.get_dashboard.side_effect = LookupError("TEAM_NOT_FOUND")
    resp = await client.get(f"/teams/{TEAM_ID}/dashboard")
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_store_failure_returns_placeholder(client, dashboard_service):
    dashboard_service.get_dashboard.side_effect = StoreError("PulseScoreRepository.list_by_team")

    resp = await client.get(f"/teams/{TEAM_ID}/dashboard")

    assert resp.status_code == 503
    assert resp.json() == {
        "currentPulse": None,
        "trend": 0,
        "responseRate": 0,
        "totalEmployees": 0,
        "pulseHistory": [],
        "recentComments": [],
    }


@pytest.mark.asyncio
async def test_unexpected_failure_returns_placeholder(client, dashboard_service):
    dashboard_service.get_dashboard.side_effect = RuntimeError("boom")

    resp = await client.get(f"/teams/{TEAM_ID}/dashboard")

    assert resp.status_code == 503
    assert resp.json()["currentPulse"] is None
    assert resp.json()["recentComments"] == []
