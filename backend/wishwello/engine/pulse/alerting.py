# engine/pulse/alerting.py
"""
Week-over-week comparison of pulse scores. ZERO DB access.

One-sided fixed threshold: only a drop strictly greater than
PULSE_DROP_ALERT_THRESHOLD raises an alert. No hysteresis, no
suppression of repeated alerts across weeks.
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Optional, Sequence

from wishwello.engine.numeric import round_half_up

PULSE_DROP_ALERT_THRESHOLD = Decimal("2.0")


@dataclass
class PulseAlert:
    team_id: Any
    current_score: float
    drop: float


def _as_decimal(score: Any) -> Decimal:
    # Scores are stored with one decimal; str() keeps 6.3 as 6.3, not 6.2999...
    return score if isinstance(score, Decimal) else Decimal(str(score))


def _latest_pair(history: Sequence[Any]):
    """(current, previous) from a history ordered by week_starting descending."""
    return _as_decimal(history[0].score), _as_decimal(history[1].score)


def detect_pulse_drop(team_id: Any, history: Sequence[Any]) -> Optional[PulseAlert]:
    if len(history) < 2:
        return None
    current, previous = _latest_pair(history)
    drop = previous - current
    if drop > PULSE_DROP_ALERT_THRESHOLD:
        return PulseAlert(
            team_id=team_id,
            current_score=float(current),
            drop=round_half_up(drop, 1),
        )
    return None


def compute_trend(history: Sequence[Any]) -> float:
    """Change of the latest score against the one before; 0 without two points."""
    if len(history) < 2:
        return 0
    current, previous = _latest_pair(history)
    return round_half_up(current - previous, 1)
