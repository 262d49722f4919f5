"""Initial schema: workout_entries, workout_sets, exercises.

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "workout_entries",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("owner_id", sa.String(length=100), nullable=False),
        sa.Column("exercise_name", sa.String(length=255), nullable=False),
        sa.Column("exercise_norm", sa.String(length=255), nullable=False),
        sa.Column("workout_date", sa.String(length=10), nullable=False),
        sa.Column("created_at", sa.BigInteger(), nullable=False),
        sa.Column("top_set_weight", sa.Numeric(precision=8, scale=2), nullable=False),
        sa.Column("top_set_reps", sa.Integer(), nullable=False),
        sa.Column("est1rm", sa.Numeric(precision=10, scale=2), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_workout_entries_owner_exercise_date",
        "workout_entries",
        ["owner_id", "exercise_norm", "workout_date", "created_at"],
        unique=False,
    )

    op.create_table(
        "workout_sets",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("entry_id", sa.Integer(), nullable=False),
        sa.Column("set_number", sa.Integer(), nullable=False),
        sa.Column("reps", sa.Integer(), nullable=False),
        sa.Column("weight", sa.Numeric(precision=8, scale=2), nullable=False),
        sa.ForeignKeyConstraint(["entry_id"], ["workout_entries.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_workout_sets_entry_id", "workout_sets", ["entry_id"], unique=False)

    op.create_table(
        "exercises",
        sa.Column("owner_id", sa.String(length=100), nullable=False),
        sa.Column("exercise_norm", sa.String(length=255), nullable=False),
        sa.Column("exercise_name", sa.String(length=255), nullable=False),
        sa.Column("updated_at", sa.BigInteger(), nullable=False),
        sa.PrimaryKeyConstraint("owner_id", "exercise_norm"),
    )
    op.create_index(op.f("ix_exercises_updated_at"), "exercises", ["updated_at"], unique=False)


def downgrade() -> None:
    op.drop_index(op.f("ix_exercises_updated_at"), table_name="exercises")
    op.drop_table("exercises")
    op.drop_index("ix_workout_sets_entry_id", table_name="workout_sets")
    op.drop_table("workout_sets")
    op.drop_index("ix_workout_entries_owner_exercise_date", table_name="workout_entries")
    op.drop_table("workout_entries")
