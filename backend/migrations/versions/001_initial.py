"""initial schema: teams, questions, responses, weekly pulse

Revision ID: 001_initial
Create Date: 2026-10-19
"""
from alembic import op
import sqlalchemy as sa

revision = '001_initial'
down_revision = None


def upgrade() -> None:
    op.create_table("teams",
        sa.Column("id", sa.Uuid, primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("manager_id", sa.String, nullable=False, index=True),
        sa.Column("company_name", sa.String(255), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )

    op.create_table("employees",
        sa.Column("id", sa.Uuid, primary_key=True),
        sa.Column("team_id", sa.Uuid, sa.ForeignKey("teams.id", ondelete="CASCADE"), nullable=False, index=True),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("is_active", sa.Boolean, nullable=False, server_default=sa.true()),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )

    op.create_table("questions",
        sa.Column("id", sa.Uuid, primary_key=True),
        sa.Column("team_id", sa.Uuid, sa.ForeignKey("teams.id", ondelete="CASCADE"), nullable=False, index=True),
        sa.Column("title", sa.Text, nullable=False),
        sa.Column("type", sa.String(50), nullable=False),
        sa.Column("is_required", sa.Boolean, nullable=False, server_default=sa.true()),
        sa.Column("order", sa.Integer, nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )

    # question_id without FK: replacing the catalog leaves responses in place
    op.create_table("responses",
        sa.Column("id", sa.Uuid, primary_key=True),
        sa.Column("team_id", sa.Uuid, sa.ForeignKey("teams.id", ondelete="CASCADE"), nullable=False),
        sa.Column("question_id", sa.Uuid, nullable=False, index=True),
        sa.Column("value", sa.Text, nullable=False, server_default=""),
        sa.Column("submitted_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_responses_team_submitted", "responses", ["team_id", "submitted_at"])

    op.create_table("pulse_scores",
        sa.Column("id", sa.Uuid, primary_key=True),
        sa.Column("team_id", sa.Uuid, sa.ForeignKey("teams.id", ondelete="CASCADE"), nullable=False, index=True),
        sa.Column("score", sa.Numeric(3, 1), nullable=False),
        sa.Column("response_count", sa.Integer, nullable=False),
        sa.Column("total_employees", sa.Integer, nullable=False),
        sa.Column("week_starting", sa.DateTime(timezone=True), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.UniqueConstraint("team_id", "week_starting", name="uq_pulse_team_week"),
    )


def downgrade() -> None:
    op.drop_table("pulse_scores")
    op.drop_index("ix_responses_team_submitted", table_name="responses")
    op.drop_table("responses")
    op.drop_table("questions")
    op.drop_table("employees")
    op.drop_table("teams")
