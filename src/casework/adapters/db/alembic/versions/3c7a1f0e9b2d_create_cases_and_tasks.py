"""create cases and tasks tables

Revision ID: 3c7a1f0e9b2d
Revises:
Create Date: 2026-10-12 14:03:27.518204

"""

# pylint: disable=invalid-name

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

from casework.adapters.db.sa_types import BIGINT_PK, LocalDateTime

# pylint: disable=no-member

# revision identifiers, used by Alembic.
revision: str = "3c7a1f0e9b2d"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Upgrade schema."""

    op.create_table(
        "cases",
        sa.Column(
            "id",
            sa.String(length=36),
            nullable=False,
            comment="Server-generated UUID (canonical string).",
        ),
        sa.Column(
            "case_number",
            sa.String(length=255),
            nullable=False,
            comment="Human-facing case number; unique across all cases.",
        ),
        sa.Column("title", sa.String(length=255), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("status", sa.String(length=255), nullable=True),
        sa.Column(
            "created_date",
            LocalDateTime(),
            nullable=False,
            comment="Local creation time, second precision.",
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_cases")),
        sa.UniqueConstraint("case_number", name=op.f("uq_cases_case_number")),
        comment="Cases: the aggregate root. Tasks hang off these.",
    )

    op.create_table(
        "tasks",
        sa.Column(
            "seq",
            BIGINT_PK,
            sa.Identity(start=1),
            nullable=False,
            comment="Insertion order.",
        ),
        sa.Column(
            "id",
            sa.String(length=36),
            nullable=False,
            comment="Server-generated UUID (canonical string).",
        ),
        sa.Column(
            "parent_case_id",
            sa.String(length=36),
            nullable=False,
            comment="Owning case; deleting it deletes the task.",
        ),
        sa.Column("title", sa.String(length=255), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("status", sa.String(length=255), nullable=True),
        sa.Column("due_date", LocalDateTime(), nullable=True),
        sa.ForeignKeyConstraint(
            ["parent_case_id"],
            ["cases.id"],
            name=op.f("fk_tasks_parent_case_id_cases"),
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("seq", name=op.f("pk_tasks")),
        sa.UniqueConstraint("id", name=op.f("uq_tasks_id")),
        comment="Tasks: each belongs to exactly one case.",
    )
    op.create_index(
        op.f("ix_tasks_parent_case_id"), "tasks", ["parent_case_id"], unique=False
    )


def downgrade() -> None:
    """Downgrade schema."""

    op.drop_index(op.f("ix_tasks_parent_case_id"), table_name="tasks")
    op.drop_table("tasks")
    op.drop_table("cases")
