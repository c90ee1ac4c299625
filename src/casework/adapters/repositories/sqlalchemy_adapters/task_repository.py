"""Implementation of TaskRepository using SQLAlchemy."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import delete, select

from casework.adapters.db.schema import tasks
from casework.domain.models import TASK_SORT_KEYS, Task
from casework.domain.value_objects import Page, PageRequest
from casework.interfaces.repositories import TaskRepository

from .base import SqlAlchemyRepository

if TYPE_CHECKING:
    from sqlalchemy.engine import RowMapping


def _to_task(row: RowMapping) -> Task:
    return Task(
        id=row.id,
        parent_case_id=row.parent_case_id,
        title=row.title,
        description=row.description,
        status=row.status,
        due_date=row.due_date,
    )


class SqlAlchemyTaskRepository(SqlAlchemyRepository, TaskRepository):
    """TaskRepository implementation that supports both Postgres and SQLite."""

    table = tasks
    kind = "tasks"
    sort_keys = TASK_SORT_KEYS

    def get(self, task_id: str) -> Task | None:
        stmt = select(tasks).where(tasks.c.id == task_id)
        if not (row := self.connection.execute(stmt).mappings().first()):
            return None
        return _to_task(row)

    def exists(self, task_id: str) -> bool:
        return self._exists(task_id)

    def save(self, task: Task) -> None:
        self._upsert(
            {
                "id": task.id,
                "parent_case_id": task.parent_case_id,
                "title": task.title,
                "description": task.description,
                "status": task.status,
                "due_date": task.due_date,
            }
        )

    def delete(self, task_id: str) -> None:
        self.connection.execute(delete(tasks).where(tasks.c.id == task_id))

    def list_by_parent(self, case_id: str, page: PageRequest) -> Page[Task]:
        return self._page([tasks.c.parent_case_id == case_id], page, _to_task)

    def ids_by_parent(self, case_id: str) -> list[str]:
        stmt = (
            select(tasks.c.id)
            .where(tasks.c.parent_case_id == case_id)
            .order_by(tasks.c.seq.asc())
        )
        return list(self.connection.execute(stmt).scalars().all())

    def search(
        self, text: str, task_id: str | None, page: PageRequest
    ) -> Page[Task]:
        criteria = self._text_search(text, task_id, tasks.c.id, tasks.c.title)
        return self._page(criteria, page, _to_task)
