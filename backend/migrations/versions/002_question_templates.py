"""question templates, with the built-in set

Revision ID: 002_question_templates
Revises: 001_initial
Create Date: 2026-10-19
"""
import uuid

from alembic import op
import sqlalchemy as sa

revision = '002_question_templates'
down_revision = '001_initial'


BUILT_IN_TEMPLATES = [
    {
        "name": "Weekly check-in",
        "description": "A short pulse for every week.",
        "questions": [
            {"title": "How would you rate your week overall? (1-10)", "type": "metric", "is_required": True},
            {"title": "Do you have what you need to do your job well?", "type": "yesno", "is_required": True},
            {"title": "Anything you would like to share with your manager?", "type": "comment", "is_required": False},
        ],
    },
    {
        "name": "Workload",
        "description": "Spot overload before it turns into burnout.",
        "questions": [
            {"title": "How manageable was your workload this week? (1-10)", "type": "metric", "is_required": True},
            {"title": "Did you have to work outside your usual hours?", "type": "yesno", "is_required": True},
            {"title": "What is taking most of your time right now?", "type": "comment", "is_required": False},
        ],
    },
    {
        "name": "Team communication",
        "description": "How well information flows inside the team.",
        "questions": [
            {"title": "How clear were priorities this week? (1-10)", "type": "metric", "is_required": True},
            {"title": "Did you get the feedback you needed?", "type": "yesno", "is_required": True},
            {"title": "What would make meetings more useful?", "type": "comment", "is_required": False},
        ],
    },
    {
        "name": "Well-being",
        "description": "Energy and stress levels.",
        "questions": [
            {"title": "How is your energy level this week? (1-10)", "type": "metric", "is_required": True},
            {"title": "Are you feeling stressed at work?", "type": "yesno", "is_required": True},
            {"title": "What would help you feel better at work?", "type": "comment", "is_required": False},
        ],
    },
]


def upgrade() -> None:
    templates = op.create_table("templates",
        sa.Column("id", sa.Uuid, primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("questions", sa.JSON, nullable=False),
        sa.Column("is_built_in", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.bulk_insert(templates, [
        {"id": uuid.uuid4(), "is_built_in": True, **t} for t in BUILT_IN_TEMPLATES
    ])


def downgrade() -> None:
    op.drop_table("templates")
