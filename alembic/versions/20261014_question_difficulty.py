"""Add difficulty to questions

Revision ID: 20261014_question_difficulty
Revises: 20261012_quiz_tables
Create Date: 2026-10-14
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa


revision = "20261014_question_difficulty"
down_revision = "20261012_quiz_tables"
branch_labels = None
depends_on = None


def upgrade() -> None:
    with op.batch_alter_table("questions") as batch:
        batch.add_column(sa.Column("difficulty", sa.String(length=10), nullable=False, server_default="medium"))
        batch.create_check_constraint("difficulty_valid", "difficulty IN ('easy', 'medium', 'hard')")
    op.create_index("ix_questions_difficulty", "questions", ["difficulty"])

    # Backfill from time_required
    op.execute("UPDATE questions SET difficulty = 'easy' WHERE time_required <= 5")
    op.execute("UPDATE questions SET difficulty = 'medium' WHERE time_required > 5 AND time_required <= 10")
    op.execute("UPDATE questions SET difficulty = 'hard' WHERE time_required > 10")


def downgrade() -> None:
    op.drop_index("ix_questions_difficulty", table_name="questions")
    with op.batch_alter_table("questions") as batch:
        batch.drop_constraint("difficulty_valid", type_="check")
        batch.drop_column("difficulty")
