# tests/engine/pulse/test_score.py
"""
Unit tests for engine.pulse.score.

Coverage:
    week_start_for        → Sunday alignment, timezone, Sunday itself
    select_week           → half-open window
    compute_weekly_pulse  → None on empty / invalid week, strict bounds,
                            rounding, response_count estimate
"""
from datetime import datetime, timedelta
from zoneinfo import ZoneInfo

import pytest

from wishwello.engine.pulse.score import (
    ESTIMATED_QUESTIONS_PER_SUBMISSION,
    compute_weekly_pulse,
    select_week,
    week_start_for,
)
from tests.conftest import TEAM_ID, WEEK_START, make_response, utc

pytestmark = pytest.mark.engine


# ── week_start_for ────────────────────────────────────────────────────────────

def test_week_start_mid_week():
    # Wednesday 6 March 2024
    assert week_start_for(utc(2024, 3, 6, 15, 30)) == WEEK_START


def test_week_start_on_sunday_is_same_day():
    assert week_start_for(utc(2024, 3, 3, 0, 0)) == WEEK_START
    assert week_start_for(utc(2024, 3, 3, 23, 59)) == WEEK_START


def test_week_start_saturday_night():
    assert week_start_for(utc(2024, 3, 9, 23, 59)) == WEEK_START


def test_week_start_uses_timezone():
    paris = ZoneInfo("Europe/Paris")
    # Saturday 23:30 UTC is already Sunday 00:30 in Paris
    start = week_start_for(utc(2024, 3, 9, 23, 30), paris)

    assert start == datetime(2024, 3, 10, tzinfo=paris)


def test_week_start_naive_read_as_utc():
    assert week_start_for(datetime(2024, 3, 6, 12)) == WEEK_START


# ── select_week ───────────────────────────────────────────────────────────────

def test_select_week_half_open():
    inside_first = make_response(submitted_at=WEEK_START)
    inside_last = make_response(submitted_at=WEEK_START + timedelta(days=7, microseconds=-1))
    next_week = make_response(submitted_at=WEEK_START + timedelta(days=7))
    before = make_response(submitted_at=WEEK_START - timedelta(seconds=1))

    selected = select_week([inside_first, inside_last, next_week, before], WEEK_START)

    assert selected == [inside_first, inside_last]


# ── compute_weekly_pulse ──────────────────────────────────────────────────────

def test_empty_week_returns_none():
    assert compute_weekly_pulse(TEAM_ID, WEEK_START, [], employee_count=5) is None


def test_responses_outside_week_return_none():
    last_week = [make_response(value="8", submitted_at=WEEK_START - timedelta(days=1))]
    assert compute_weekly_pulse(TEAM_ID, WEEK_START, last_week, employee_count=5) is None


def test_no_valid_metric_returns_none():
    responses = [make_response(value=v) for v in ("yes", "0", "11", "great week")]
    assert compute_weekly_pulse(TEAM_ID, WEEK_START, responses, employee_count=5) is None


def test_oversized_values_are_not_scores():
    responses = [make_response(value=v) for v in ("8", "9" * 5000, "1" + "0" * 400)]
    pulse = compute_weekly_pulse(TEAM_ID, WEEK_START, responses, employee_count=5)

    assert pulse.score == 8.0


def test_pulse_is_bounds_strict():
    responses = [make_response(value=v) for v in ("8", "6", "0", "12", "no")]
    pulse = compute_weekly_pulse(TEAM_ID, WEEK_START, responses, employee_count=5)

    assert pulse.score == 7.0
    # all 5 rows of the week count as volume
    assert pulse.response_count == 2


def test_pulse_fields():
    responses = [make_response(value=v) for v in ("7", "8", "8", "9")]
    pulse = compute_weekly_pulse(TEAM_ID, WEEK_START, responses, employee_count=12)

    assert pulse.team_id == TEAM_ID
    assert pulse.week_starting == WEEK_START
    assert pulse.score == 8.0
    assert pulse.total_employees == 12


def test_score_rounds_half_up():
    responses = [make_response(value=v) for v in ("7", "8", "8", "8")]
    pulse = compute_weekly_pulse(TEAM_ID, WEEK_START, responses, employee_count=1)
    assert pulse.score == 7.8


@pytest.mark.parametrize("rows, expected", [(1, 1), (3, 1), (4, 2), (7, 3)])
def test_response_count_estimate(rows, expected):
    responses = [make_response(value="5") for _ in range(rows)]
    pulse = compute_weekly_pulse(TEAM_ID, WEEK_START, responses, employee_count=1)

    assert ESTIMATED_QUESTIONS_PER_SUBMISSION == 3
    assert pulse.response_count == expected
