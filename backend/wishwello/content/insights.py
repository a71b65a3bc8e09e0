#backend/wishwello/content/insights.py
"""
Human-readable insight strings shown on the manager dashboard.

Kept out of the engine so wording can change without touching the
thresholds. The engine picks the message, this module owns the text.
"""

NO_RESPONSES_YET = "No responses yet for this question."
NO_COMMENTS_YET = "No comments yet for this question."
NO_RESPONSES_COLLECTED = "No responses collected yet."

# ── Metric questions ─────────────────────────────────────────
METRIC_EXCELLENT = "Excellent scores! Team is performing very well in this area."
METRIC_GOOD = "Good scores with room for improvement."
METRIC_NEEDS_ATTENTION = "Scores indicate this area needs attention and support."
METRIC_HIGH_VARIATION = "High variation in responses suggests mixed experiences across the team."
METRIC_CONSISTENT = "Consistent responses indicate aligned team experiences."

# ── Yes / No questions ───────────────────────────────────────
YESNO_STRONG_CONSENSUS = "Strong positive consensus on this topic."
YESNO_MAJORITY_POSITIVE = "Majority positive, but some concerns exist."
YESNO_MIXED = "Mixed responses suggest this area needs attention."
YESNO_SIGNIFICANT_CONCERNS = "Significant concerns - this area requires immediate focus."

# ── Comment questions ────────────────────────────────────────
COMMENT_POSITIVE = "Overall positive sentiment in team feedback."
COMMENT_NEGATIVE = "Comments highlight areas needing attention."
COMMENT_MIXED = "Mixed sentiment in feedback."
COMMENT_STRESS_WARNING = "Stress and workload concerns mentioned frequently - consider workload review."

THEME_STRESS = "Stress/Workload ({count} mentions)"
THEME_COMMUNICATION = "Communication ({count} mentions)"
THEME_POSITIVE = "Generally Positive Feedback"
THEME_CONCERNS = "Areas of Concern Identified"


# ── Overall ──────────────────────────────────────────────────
RESPONSE_SUMMARY = "Collected {total} responses from approximately {respondents} respondents."
OVERALL_STRONG = "🎉 Strong overall team sentiment (average {average}/10)."
OVERALL_GOOD = "Good overall team sentiment with opportunities for improvement (average {average}/10)."
OVERALL_NEEDS_SUPPORT = "Team may need additional support (average {average}/10)."

ANALYTICS_UNAVAILABLE = "Analytics are not available at the moment."
