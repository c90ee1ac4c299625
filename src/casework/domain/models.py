"""Case and Task entities.

A Case is the aggregate root; a Task belongs to exactly one Case through
`parent_case_id`. The relation is one-directional: a Case does not hold its
Tasks. The list of task ids shown on a case is computed at read time by
querying tasks by parent.

Date-times are naive local date-times with second precision, matching the
`YYYY-MM-DDTHH:MM:SS` form used at the boundary.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

__all__ = ["CASE_SORT_KEYS", "TASK_SORT_KEYS", "Case", "Task"]


@dataclass(frozen=True, slots=True)
class Case:
    """Persisted case record.

    Conventions:
      - `id` is server generated and never changes.
      - `case_number` is unique across all cases, the empty string included.
      - `title`, `description` and `status` are free text.
    """

    id: str
    case_number: str
    created_date: datetime
    title: str | None = None
    description: str | None = None
    status: str | None = None


@dataclass(frozen=True, slots=True)
class Task:
    """Persisted task record, owned by the case `parent_case_id`."""

    id: str
    parent_case_id: str
    title: str | None = None
    description: str | None = None
    status: str | None = None
    due_date: datetime | None = None


#: Attributes a page of cases may be ordered by.
CASE_SORT_KEYS = frozenset(
    {"id", "case_number", "title", "description", "status", "created_date"}
)

#: Attributes a page of tasks may be ordered by.
TASK_SORT_KEYS = frozenset({"id", "title", "description", "status", "due_date"})
