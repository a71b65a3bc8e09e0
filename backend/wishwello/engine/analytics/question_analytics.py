# engine/analytics/question_analytics.py
"""
Per-question analytics. ZERO DB access.
Receives a team's question catalog and a window of responses, returns
one QuestionAnalytics per question, in catalog order.

One analyzer per QuestionType:
- metric  : mean / histogram / population variance (lenient parse)
- yesno   : yes/no split, percentages rounded independently
- comment : keyword-bag heuristic over comments longer than 5 characters

Malformed values are dropped from the aggregate, empty cohorts return a
zero-state. Nothing here raises on bad data.
"""
import logging
import numpy as np
from collections import Counter, defaultdict
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Sequence, Union

from wishwello.content import insights as text
from wishwello.engine.analytics import sentiment
from wishwello.engine.numeric import parse_int_prefix, round_half_up
from wishwello.shared.enums import QuestionType

logger = logging.getLogger(__name__)

# --- Thresholds ---
METRIC_EXCELLENT_AVERAGE = 8
METRIC_GOOD_AVERAGE = 6
METRIC_VARIANCE_MIN_SAMPLE = 5
METRIC_HIGH_VARIANCE = 4

YESNO_STRONG_CONSENSUS = 80
YESNO_MAJORITY_POSITIVE = 60
YESNO_MIXED = 40

COMMENT_MIN_LENGTH = 5      # strictly longer than this is kept
COMMENT_PREVIEW_SIZE = 5


@dataclass
class MetricAnalytics:
    question_id: Any
    title: str
    total_responses: int
    average: Optional[float]
    distribution: Dict[str, int]
    insights: List[str]
    type: str = field(default=QuestionType.METRIC.value, init=False)


@dataclass
class YesNoAnalytics:
    question_id: Any
    title: str
    total_responses: int
    yes_count: int
    no_count: int
    yes_percentage: int
    no_percentage: int
    insights: List[str]
    type: str = field(default=QuestionType.YESNO.value, init=False)


@dataclass
class CommentAnalytics:
    question_id: Any
    title: str
    total_responses: int
    total_comments: int
    comments: List[str]                 # preview, first COMMENT_PREVIEW_SIZE
    sentiment_counts: sentiment.SentimentCounts
    themes: List[str]
    insights: List[str]
    type: str = field(default=QuestionType.COMMENT.value, init=False)


QuestionAnalytics = Union[MetricAnalytics, YesNoAnalytics, CommentAnalytics]


# ── Analyzers ────────────────────────────────────────────────

def analyze_metric(question: Any, values: Sequence[str]) -> MetricAnalytics:
    scores = [n for n in (parse_int_prefix(v) for v in values) if n is not None]

    if not scores:
        return MetricAnalytics(
            question_id=question.id, title=question.title,
            total_responses=0, average=None, distribution={},
            insights=[text.NO_RESPONSES_YET],
        )

    average = round_half_up(float(np.mean(scores)), 1)
    distribution = {str(score): count for score, count in sorted(Counter(scores).items())}

    if average >= METRIC_EXCELLENT_AVERAGE:
        insights = [text.METRIC_EXCELLENT]
    elif average >= METRIC_GOOD_AVERAGE:
        insights = [text.METRIC_GOOD]
    else:
        insights = [text.METRIC_NEEDS_ATTENTION]

    if len(scores) >= METRIC_VARIANCE_MIN_SAMPLE:
        # np.var is the population variance (ddof=0)
        if float(np.var(scores)) > METRIC_HIGH_VARIANCE:
            insights.append(text.METRIC_HIGH_VARIATION)
        else:
            insights.append(text.METRIC_CONSISTENT)

    return MetricAnalytics(
        question_id=question.id, title=question.title,
        total_responses=len(scores), average=average,
        distribution=distribution, insights=insights,
    )


def analyze_yesno(question: Any, values: Sequence[str]) -> YesNoAnalytics:
    normalized = [(v or "").strip().lower() for v in values]
    yes_count = normalized.count("yes")
    no_count = normalized.count("no")
    total = yes_count + no_count

    if total == 0:
        return YesNoAnalytics(
            question_id=question.id, title=question.title,
            total_responses=0, yes_count=0, no_count=0,
            yes_percentage=0, no_percentage=0,
            insights=[text.NO_RESPONSES_YET],
        )

    yes_percentage = round_half_up(100 * yes_count / total)
    no_percentage = round_half_up(100 * no_count / total)

    if yes_percentage >= YESNO_STRONG_CONSENSUS:
        insight = text.YESNO_STRONG_CONSENSUS
    elif yes_percentage >= YESNO_MAJORITY_POSITIVE:
        insight = text.YESNO_MAJORITY_POSITIVE
    elif yes_percentage >= YESNO_MIXED:
        insight = text.YESNO_MIXED
    else:
        insight = text.YESNO_SIGNIFICANT_CONCERNS

    return YesNoAnalytics(
        question_id=question.id, title=question.title,
        total_responses=total, yes_count=yes_count, no_count=no_count,
        yes_percentage=yes_percentage, no_percentage=no_percentage,
        insights=[insight],
    )


def analyze_comment(question: Any, values: Sequence[str]) -> CommentAnalytics:
    comments = [v for v in values if v is not None and len(v.strip()) > COMMENT_MIN_LENGTH]

    if not comments:
        return CommentAnalytics(
            question_id=question.id, title=question.title,
            total_responses=0, total_comments=0, comments=[],
            sentiment_counts=sentiment.SentimentCounts(),
            themes=[], insights=[text.NO_COMMENTS_YET],
        )

    counts = sentiment.count_sentiment(comments)
    return CommentAnalytics(
        question_id=question.id, title=question.title,
        total_responses=len(comments),
        total_comments=len(comments),
        comments=comments[:COMMENT_PREVIEW_SIZE],
        sentiment_counts=counts,
        themes=sentiment.derive_themes(counts, len(comments)),
        insights=sentiment.derive_insights(counts, len(comments)),
    )


_ANALYZERS: Dict[QuestionType, Callable[[Any, Sequence[str]], QuestionAnalytics]] = {
    QuestionType.METRIC:  analyze_metric,
    QuestionType.YESNO:   analyze_yesno,
    QuestionType.COMMENT: analyze_comment,
}

_missing = set(QuestionType) - set(_ANALYZERS)
if _missing:
    raise RuntimeError(f"No analyzer registered for question types: {sorted(t.value for t in _missing)}")


# ── Entry point ──────────────────────────────────────────────

def compute_analytics(questions: Sequence[Any], responses: Sequence[Any]) -> List[QuestionAnalytics]:
    """
    Analytics for every question of the catalog.

    Args:
        questions: catalog rows (id, title, type), already in display order.
        responses: response rows (question_id, value) for the window.
                   Rows whose question_id is not in the catalog are ignored.
    """
    values_by_question: Dict[Any, List[str]] = defaultdict(list)
    for r in responses:
        values_by_question[r.question_id].append(r.value)

    results: List[QuestionAnalytics] = []
    for q in questions:
        try:
            qtype = QuestionType(q.type)
        except ValueError:
            logger.warning("Skipping question %s with unknown type %r", q.id, q.type)
            continue
        results.append(_ANALYZERS[qtype](q, values_by_question.get(q.id, [])))
    return results
