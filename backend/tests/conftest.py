# tests/conftest.py
"""
Fixtures and factories shared by the whole test suite.

Three layers:
    1. Engine  — pure functions, no mocks (SimpleNamespace rows)
    2. Service — AsyncSession + repositories mocked with pytest-mock
    3. Router  — httpx.AsyncClient + FastAPI dependency_overrides
"""
import uuid
from datetime import datetime, timedelta, timezone
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession

from wishwello.main import app
from wishwello.core.database import get_db

TEAM_ID = uuid.UUID("00000000-0000-0000-0000-00000000000a")

# Sunday 3 March 2024, 00:00 UTC
WEEK_START = datetime(2024, 3, 3, tzinfo=timezone.utc)


def utc(*args) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


# ── ORM-like rows (SimpleNamespace, no ORM) ───────────────────────────────────

def make_team(**kwargs) -> SimpleNamespace:
    defaults = {
        "id": TEAM_ID,
        "name": "Platform Team",
        "manager_id": "manager-1",
        "company_name": "Acme",
        "created_at": utc(2024, 1, 1),
    }
    defaults.update(kwargs)
    return SimpleNamespace(**defaults)


def make_question(**kwargs) -> SimpleNamespace:
    defaults = {
        "id": uuid.uuid4(),
        "team_id": TEAM_ID,
        "title": "How was your week?",
        "type": "metric",
        "is_required": True,
        "order": 0,
        "created_at": utc(2024, 1, 1),
    }
    defaults.update(kwargs)
    return SimpleNamespace(**defaults)


def make_template(**kwargs) -> SimpleNamespace:
    defaults = {
        "id": uuid.uuid4(),
        "name": "Weekly check-in",
        "description": "A short pulse for every week.",
        "questions": [
            {"title": "How would you rate your week? (1-10)", "type": "metric", "is_required": True},
            {"title": "Anything to share?", "type": "comment", "is_required": False},
        ],
        "is_built_in": True,
        "created_at": utc(2024, 1, 1),
    }
    defaults.update(kwargs)
    return SimpleNamespace(**defaults)

def make_response(**kwargs) -> SimpleNamespace:
    defaults = {
        "id": uuid.uuid4(),
        "team_id": TEAM_ID,
        "question_id": uuid.uuid4(),
        "value": "7",
        "submitted_at": utc(2024, 3, 4, 10, 0),
    }
    defaults.update(kwargs)
    return SimpleNamespace(**defaults)


def make_responses(question, values, submitted_at=None) -> list:
    """One response per value, all for `question`."""
    at = submitted_at or utc(2024, 3, 4, 10, 0)
    return [make_response(question_id=question.id, value=v, submitted_at=at) for v in values]


def make_pulse_score(**kwargs) -> SimpleNamespace:
    defaults = {
        "id": uuid.uuid4(),
        "team_id": TEAM_ID,
        "score": 7.0,
        "response_count": 4,
        "total_employees": 10,
        "week_starting": WEEK_START,
        "created_at": utc(2024, 3, 10),
    }
    defaults.update(kwargs)
    return SimpleNamespace(**defaults)


def make_history(*scores) -> list:
    """Pulse history newest week first, from scores given oldest → newest."""
    return [
        make_pulse_score(score=score, week_starting=WEEK_START - timedelta(weeks=weeks_back))
        for weeks_back, score in enumerate(reversed(scores))
    ]


# ── DB mock factory ───────────────────────────────────────────────────────────

def make_async_db() -> AsyncMock:
    """AsyncMock standing in for a SQLAlchemy AsyncSession."""
    db = AsyncMock(spec=AsyncSession)
    db.add = MagicMock()
    db.add_all = MagicMock()
    db.commit = AsyncMock()
    db.rollback = AsyncMock()
    db.refresh = AsyncMock()
    db.close = AsyncMock()
    return db


def make_session_factory(db=None):
    """async_sessionmaker stand-in: each call yields an async context manager."""
    session = db or make_async_db()

    class _Ctx:
        async def __aenter__(self):
            return session

        async def __aexit__(self, *exc):
            return False

    return MagicMock(side_effect=lambda: _Ctx())


# ── HTTP fixtures (httpx.AsyncClient + dependency_overrides) ──────────────────

@pytest.fixture
async def client():
    """Client with a mocked DB session; services are overridden per test."""
    mock_db = AsyncMock(spec=AsyncSession)
    app.dependency_overrides[get_db] = lambda: mock_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
async def lenient_client():
    """Same as client, but unhandled errors come back as 500 responses instead of raising."""
    mock_db = AsyncMock(spec=AsyncSession)
    app.dependency_overrides[get_db] = lambda: mock_db
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()
