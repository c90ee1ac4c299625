"""Relational schema for cases and tasks.

Constraints (enforced here):

| Constraint                                 | Purpose                               |
|--------------------------------------------|---------------------------------------|
| PRIMARY KEY(cases.id)                      | server-generated case id              |
| UNIQUE(cases.case_number)                  | one case per case number, "" included |
| UNIQUE(tasks.id)                           | server-generated task id              |
| FK(tasks.parent_case_id) ON DELETE CASCADE | every task has a case; cases own them |

``tasks.seq`` is a surrogate auto-increment key that records insertion order,
used to list a case's task ids oldest first.
"""

from __future__ import annotations

from sqlalchemy import Column, ForeignKey, Identity, String, Table, Text

from .metadata import metadata
from .sa_types import BIGINT_PK, LocalDateTime

__all__ = ["cases", "tasks"]

cases = Table(
    "cases",
    metadata,
    Column(
        "id",
        String(36),
        primary_key=True,
        comment="Server-generated UUID (canonical string).",
    ),
    Column(
        "case_number",
        String(255),
        nullable=False,
        unique=True,
        comment="Human-facing case number; unique across all cases.",
    ),
    Column("title", String(255), nullable=True),
    Column("description", Text, nullable=True),
    Column("status", String(255), nullable=True),
    Column(
        "created_date",
        LocalDateTime(),
        nullable=False,
        comment="Local creation time, second precision.",
    ),
    comment="Cases: the aggregate root. Tasks hang off these.",
)

tasks = Table(
    "tasks",
    metadata,
    Column(
        "seq",
        BIGINT_PK,
        Identity(start=1),
        primary_key=True,
        comment="Insertion order.",
    ),
    Column(
        "id",
        String(36),
        nullable=False,
        unique=True,
        comment="Server-generated UUID (canonical string).",
    ),
    Column(
        "parent_case_id",
        String(36),
        ForeignKey("cases.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="Owning case; deleting it deletes the task.",
    ),
    Column("title", String(255), nullable=True),
    Column("description", Text, nullable=True),
    Column("status", String(255), nullable=True),
    Column("due_date", LocalDateTime(), nullable=True),
    comment="Tasks: each belongs to exactly one case.",
)
