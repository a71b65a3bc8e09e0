# modules/catalog/schemas.py
from typing import List, Optional
from uuid import UUID

from pydantic import Field

from wishwello.shared.enums import QuestionType
from wishwello.shared.schemas import CamelModel


class QuestionIn(CamelModel):
    title: str = Field(..., min_length=1, max_length=500)
    type: QuestionType
    is_required: bool = True
    # Relative position; renumbered 0..n-1 on save. Missing = list position.
    order: Optional[int] = None


class CatalogReplaceIn(CamelModel):
    questions: List[QuestionIn] = Field(..., min_length=1)


class QuestionOut(CamelModel):
    id: UUID
    title: str
    type: QuestionType
    is_required: bool
    order: int


class TemplateQuestionOut(CamelModel):
    title: str
    type: QuestionType
    is_required: bool = True


class TemplateOut(CamelModel):
    id: UUID
    name: str
    description: Optional[str] = None
    questions: List[TemplateQuestionOut]
