# engine/analytics/overall.py
"""Team-level insights built on top of the per-question analytics. ZERO DB access."""
from typing import Any, List, Sequence

import numpy as np

from wishwello.content import insights as text
from wishwello.engine.analytics.question_analytics import MetricAnalytics, QuestionAnalytics
from wishwello.engine.numeric import round_half_up
from wishwello.engine.participation.estimator import estimate_unique_respondents

OVERALL_STRONG_AVERAGE = 7.5
OVERALL_GOOD_AVERAGE = 6


def compute_overall_insights(
    question_analytics: Sequence[QuestionAnalytics],
    responses: Sequence[Any],
    tz: str = "UTC",
) -> List[str]:
    if not responses:
        return [text.NO_RESPONSES_COLLECTED]

    insights = [
        text.RESPONSE_SUMMARY.format(
            total=len(responses),
            respondents=estimate_unique_respondents(responses, tz),
        )
    ]

    averages = [
        qa.average for qa in question_analytics
        if isinstance(qa, MetricAnalytics) and qa.total_responses > 0
    ]
    if averages:
        overall = round_half_up(float(np.mean(averages)), 1)
        if overall >= OVERALL_STRONG_AVERAGE:
            insights.append(text.OVERALL_STRONG.format(average=overall))
        elif overall >= OVERALL_GOOD_AVERAGE:
            insights.append(text.OVERALL_GOOD.format(average=overall))
        else:
            insights.append(text.OVERALL_NEEDS_SUPPORT.format(average=overall))

    return insights
