# backend/wishwello/shared/models/__init__.py
"""
Single entry point for every SQLAlchemy model.

ALWAYS import models from here:
  from wishwello.shared.models import Team, Question, Response, QuestionTemplate, PulseScore

Never directly from wishwello.shared.models.Team etc.
→ guarantees every model is registered on Base.metadata before the
  tables are created (Alembic, create_all).
"""

from wishwello.shared.models.Team   import Team, Employee
from wishwello.shared.models.Survey import Question, Response, QuestionTemplate
from wishwello.shared.models.Pulse  import PulseScore

__all__ = [
    # Team
    "Team", "Employee",
    # Survey
    "Question",
    "Response",
    "QuestionTemplate",
    # Pulse
    "PulseScore",
]
