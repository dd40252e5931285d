"""create habits and records

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
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("type", sa.String(length=16), nullable=False),
        sa.Column("color", sa.String(length=32), nullable=False),
        sa.Column("target_value", sa.Float(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.CheckConstraint("length(trim(name)) > 0", name="ck_habits_name_not_empty"),
        sa.CheckConstraint("type IN ('boolean', 'numeric')", name="ck_habits_type"),
        sqlite_autoincrement=True,
    )
    op.create_index("ix_habits_created_at", "habits", ["created_at"], unique=False)

    op.create_table(
        "records",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("habit_id", sa.Integer(), sa.ForeignKey("habits.id", ondelete="CASCADE"), nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("status", sa.String(length=16), nullable=False),
        sa.Column("value", sa.Float(), nullable=True),
        sa.CheckConstraint("status IN ('completed', 'missed', 'skipped', 'none')", name="ck_records_status"),
        sqlite_autoincrement=True,
    )
    op.create_index("idx_records_habit_date", "records", ["habit_id", "date"], unique=True)
    op.create_index("ix_records_habit_id", "records", ["habit_id"], unique=False)
    op.create_index("ix_records_date", "records", ["date"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_records_date", table_name="records")
    op.drop_index("ix_records_habit_id", table_name="records")
    op.drop_index("idx_records_habit_date", table_name="records")
    op.drop_table("records")

    op.drop_index("ix_habits_created_at", table_name="habits")
    op.drop_table("habits")
