# backend/wishwello/shared/models/Survey.py
"""
Question catalog and anonymous responses.

Question → (no FK) → Response
QuestionTemplate: ready-made catalogs a manager can load, not tied to a team

Response.question_id is deliberately not a foreign key: replacing a
team's catalog (delete-all-then-insert) must not delete history. Old
responses become orphans, invisible to question-keyed analytics but
still part of raw weekly volume.
"""
import uuid

from sqlalchemy import Column, Integer, String, Boolean, DateTime, JSON, Text, ForeignKey, Uuid, Index
from sqlalchemy.sql import func

from wishwello.core.database import Base


class Question(Base):
    __tablename__ = "questions"

    id          = Column(Uuid, primary_key=True, default=uuid.uuid4)
    team_id     = Column(Uuid, ForeignKey("teams.id", ondelete="CASCADE"), nullable=False, index=True)
    title       = Column(Text, nullable=False)
    type        = Column(String(50), nullable=False)   # metric | yesno | comment
    is_required = Column(Boolean, default=True, nullable=False)
    order       = Column(Integer, nullable=False)       # 0-based, contiguous
    created_at  = Column(DateTime(timezone=True), server_default=func.now())

    def __repr__(self):
        return f"<Question id={self.id} type={self.type} order={self.order}>"


class Response(Base):
    """Append-only. No respondent identity, ever."""
    __tablename__ = "responses"

    id           = Column(Uuid, primary_key=True, default=uuid.uuid4)
    team_id      = Column(Uuid, ForeignKey("teams.id", ondelete="CASCADE"), nullable=False)
    question_id  = Column(Uuid, nullable=False, index=True)
    value        = Column(Text, nullable=False, default="")
    submitted_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    __table_args__ = (
        Index("ix_responses_team_submitted", "team_id", "submitted_at"),
    )

    def __repr__(self):
        return f"<Response id={self.id} question={self.question_id} at={self.submitted_at}>"


class QuestionTemplate(Base):
    __tablename__ = "templates"

    id          = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name        = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    questions   = Column(JSON, nullable=False)          # [{title, type, is_required}]
    is_built_in = Column(Boolean, default=False, nullable=False)
    created_at  = Column(DateTime(timezone=True), server_default=func.now())

    def __repr__(self):
        return f"<QuestionTemplate id={self.id} name={self.name}>"
