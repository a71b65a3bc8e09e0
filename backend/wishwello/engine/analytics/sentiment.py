# engine/analytics/sentiment.py
"""
Keyword-bag heuristic over free-text comments. ZERO DB access.

Not sentiment analysis: a case-insensitive substring match against four
fixed word lists. A comment counts at most once per category, however
many of the category's words it contains.
"""
from dataclasses import dataclass
from typing import Dict, List, Sequence

from wishwello.content import insights as text

POSITIVE_WORDS = (
    "good", "great", "excellent", "happy", "satisfied", "love",
    "amazing", "wonderful", "positive", "enjoy", "appreciate",
)
NEGATIVE_WORDS = (
    "bad", "terrible", "awful", "unhappy", "frustrated", "hate",
    "difficult", "problem", "issue", "concern", "worried",
)
STRESS_WORDS = (
    "stress", "overwhelmed", "burnout", "tired", "exhausted", "pressure", "deadline",
)
COMMUNICATION_WORDS = (
    "communication", "feedback", "meeting", "talk", "discuss", "share", "listen",
)

KEYWORD_LISTS: Dict[str, Sequence[str]] = {
    "positive":      POSITIVE_WORDS,
    "negative":      NEGATIVE_WORDS,
    "stress":        STRESS_WORDS,
    "communication": COMMUNICATION_WORDS,
}

# --- Thresholds (share of comments) ---
POSITIVE_THEME_RATIO = 0.6
CONCERN_THEME_RATIO = 0.4
STRESS_WARNING_RATIO = 0.3


@dataclass
class SentimentCounts:
    positive: int = 0
    negative: int = 0
    stress: int = 0
    communication: int = 0


def matched_categories(comment: str) -> List[str]:
    """Categories with at least one keyword present in the comment."""
    lowered = comment.lower()
    return [
        category
        for category, words in KEYWORD_LISTS.items()
        if any(word in lowered for word in words)
    ]


def count_sentiment(comments: Sequence[str]) -> SentimentCounts:
    counts = SentimentCounts()
    for comment in comments:
        for category in matched_categories(comment):
            setattr(counts, category, getattr(counts, category) + 1)
    return counts


def derive_themes(counts: SentimentCounts, comment_count: int) -> List[str]:
    themes = []
    if counts.stress > 0:
        themes.append(text.THEME_STRESS.format(count=counts.stress))
    if counts.communication > 0:
        themes.append(text.THEME_COMMUNICATION.format(count=counts.communication))
    if counts.positive >= POSITIVE_THEME_RATIO * comment_count:
        themes.append(text.THEME_POSITIVE)
    if counts.negative >= CONCERN_THEME_RATIO * comment_count:
        themes.append(text.THEME_CONCERNS)
    return themes


def derive_insights(counts: SentimentCounts, comment_count: int) -> List[str]:
    if counts.positive > counts.negative:
        insights = [text.COMMENT_POSITIVE]
    elif counts.negative > counts.positive:
        insights = [text.COMMENT_NEGATIVE]
    else:
        insights = [text.COMMENT_MIXED]

    if counts.stress >= STRESS_WARNING_RATIO * comment_count:
        insights.append(text.COMMENT_STRESS_WARNING)
    return insights
