# tests/engine/participation/test_estimator.py
import pytest

from wishwello.engine.participation.estimator import (
    estimate_participation,
    estimate_unique_respondents,
)
from tests.conftest import make_response, utc

pytestmark = pytest.mark.engine


def test_same_day_counts_once():
    responses = [
        make_response(submitted_at=utc(2024, 3, 4, 8)),
        make_response(submitted_at=utc(2024, 3, 4, 17)),
        make_response(submitted_at=utc(2024, 3, 6, 12)),
    ]
    assert estimate_unique_respondents(responses) == 2


def test_response_rate_rounded():
    responses = [make_response(submitted_at=utc(2024, 3, d, 9)) for d in (4, 5)]
    result = estimate_participation(responses, employee_count=3)

    assert result.unique_respondents == 2
    assert result.response_rate == 67


def test_zero_employees_no_division():
    responses = [make_response() for _ in range(5)]
    result = estimate_participation(responses, employee_count=0)

    assert result.response_rate == 0


def test_no_responses():
    result = estimate_participation([], employee_count=10)
    assert (result.unique_respondents, result.response_rate) == (0, 0)


def test_days_are_counted_in_team_timezone():
    # 18:00 and 20:30 on 4 March in New York, two different UTC dates
    responses = [
        make_response(submitted_at=utc(2024, 3, 4, 23, 0)),
        make_response(submitted_at=utc(2024, 3, 5, 1, 30)),
    ]

    assert estimate_unique_respondents(responses) == 2
    assert estimate_unique_respondents(responses, "America/New_York") == 1
    assert estimate_participation(responses, employee_count=2, tz="America/New_York").response_rate == 50
