# backend/wishwello/shared/enums.py
"""
Project enumerations.

Single source of truth for question types. Imported by the models,
schemas, services and the engine.
"""

from enum import Enum


class QuestionType(str, Enum):
    METRIC  = "metric"    # 1-10 integer scale
    YESNO   = "yesno"     # "yes" / "no"
    COMMENT = "comment"   # free text


class AlertSinkKind(str, Enum):
    LOG   = "log"
    EMAIL = "email"
