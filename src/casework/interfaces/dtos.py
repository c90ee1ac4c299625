"""Data transfer objects for cases and tasks.

DTOs are the shape entities take when they cross the application boundary.
They are plain frozen dataclasses with snake_case attributes; `to_dict()` and
`from_dict()` convert to and from the external JSON form, which uses camelCase
names (``caseNumber``, ``createdDate``, ``dueDate``, ``parentCase``).

A `CaseDto` carries the ids of its tasks, never nested task objects, and a
`TaskDto` carries the id of its parent case, never the case itself.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from casework.domain.parsing import (
    format_local_datetime,
    parse_identifier,
    parse_local_datetime,
)

__all__ = ["CaseDto", "TaskDto"]


def _optional_text(data: Mapping[str, Any], key: str) -> str | None:
    value = data.get(key)
    return None if value is None else str(value)


def _optional_datetime(data: Mapping[str, Any], key: str) -> datetime | None:
    value = data.get(key)
    return None if value is None else parse_local_datetime(str(value))


def _task_ref(item: Any) -> str:
    if isinstance(item, Mapping):
        return str(item.get("id") or "")
    return str(item)


@dataclass(frozen=True, slots=True)
class CaseDto:
    """External view of a case.

    Attributes:
        case_number: Unique case number. Absent numbers are carried as ``""``.
        title: Free text.
        description: Free text.
        status: Free text.
        created_date: Creation time; filled in by the service when absent.
        id: Server-assigned identifier; ignored on creation.
        tasks: Ids of the case's tasks, in creation order.
    """

    case_number: str = ""
    title: str | None = None
    description: str | None = None
    status: str | None = None
    created_date: datetime | None = None
    id: str | None = None
    tasks: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        """Render this case in its external JSON shape."""
        return {
            "id": self.id,
            "caseNumber": self.case_number,
            "title": self.title,
            "description": self.description,
            "status": self.status,
            "createdDate": format_local_datetime(self.created_date),
            "tasks": list(self.tasks),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> CaseDto:
        """Build a case DTO from its external JSON shape.

        Unknown keys are ignored. ``tasks`` may hold ids or task objects;
        objects are reduced to their ``id``.

        Raises:
            UnparsableValueError: If ``createdDate`` is not a local date-time.
        """
        return cls(
            case_number=str(data.get("caseNumber") or ""),
            title=_optional_text(data, "title"),
            description=_optional_text(data, "description"),
            status=_optional_text(data, "status"),
            created_date=_optional_datetime(data, "createdDate"),
            id=_optional_text(data, "id"),
            tasks=tuple(_task_ref(item) for item in data.get("tasks") or ()),
        )


@dataclass(frozen=True, slots=True)
class TaskDto:
    """External view of a task.

    `parent_case` is the id of the owning case. It is required when a task is
    created.
    """

    title: str | None = None
    description: str | None = None
    status: str | None = None
    due_date: datetime | None = None
    parent_case: str | None = None
    id: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Render this task in its external JSON shape."""
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "status": self.status,
            "dueDate": format_local_datetime(self.due_date),
            "parentCase": self.parent_case,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> TaskDto:
        """Build a task DTO from its external JSON shape.

        The parent may be given as ``parentCase`` or under the older ``case``
        key.

        Raises:
            UnparsableValueError: If ``dueDate`` is not a local date-time or the
                parent reference is not an identifier.
        """
        parent = data.get("parentCase", data.get("case"))
        return cls(
            title=_optional_text(data, "title"),
            description=_optional_text(data, "description"),
            status=_optional_text(data, "status"),
            due_date=_optional_datetime(data, "dueDate"),
            parent_case=None if parent is None else parse_identifier(str(parent)),
            id=_optional_text(data, "id"),
        )
