"""create habit tables

Revision ID: 20261019_0001
Revises: 
Create Date: 2026-10-19
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


revision: str = "20261019_0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "habits",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=False, server_default=""),
        sa.Column("frequency", sa.String(length=20), nullable=False, server_default="daily"),
        sa.Column("color", sa.String(length=7), nullable=False, server_default="#3B82F6"),
        sa.Column("category", sa.String(length=255), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        "habit_completions",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("habit_id", sa.String(length=36), sa.ForeignKey("habits.id", ondelete="CASCADE"), nullable=False),
        sa.Column("completed_on", sa.Date(), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.UniqueConstraint("habit_id", "completed_on", name="uq_habit_completion_per_day"),
    )
    op.create_index("ix_habit_completions_habit_id", "habit_completions", ["habit_id"], unique=False)
    op.create_index("ix_habit_completions_completed_on", "habit_completions", ["completed_on"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_habit_completions_completed_on", table_name="habit_completions")
    op.drop_index("ix_habit_completions_habit_id", table_name="habit_completions")
    op.drop_table("habit_completions")
    op.drop_table("habits")
