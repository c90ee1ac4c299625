"""Interface for task persistence."""

from __future__ import annotations

import abc

from casework.domain.models import Task
from casework.domain.value_objects import Page, PageRequest


class TaskRepository(abc.ABC):
    """Task store keyed by id; every task references an existing case."""

    @abc.abstractmethod
    def get(self, task_id: str) -> Task | None:
        """Return the task with `task_id`, or ``None`` if there is none."""

    @abc.abstractmethod
    def exists(self, task_id: str) -> bool:
        """Return True if a task with `task_id` is stored."""

    @abc.abstractmethod
    def save(self, task: Task) -> None:
        """Insert `task`, or overwrite the stored task with the same id.

        Raises:
            ConstraintViolationError: If ``task.parent_case_id`` does not name
                a stored case.
        """

    @abc.abstractmethod
    def delete(self, task_id: str) -> None:
        """Delete the task. Its case is untouched; unknown ids are a no-op."""

    @abc.abstractmethod
    def list_by_parent(self, case_id: str, page: PageRequest) -> Page[Task]:
        """Return one page of the tasks owned by `case_id`."""

    @abc.abstractmethod
    def ids_by_parent(self, case_id: str) -> list[str]:
        """Return the ids of every task owned by `case_id`, oldest first."""

    @abc.abstractmethod
    def search(
        self, text: str, task_id: str | None, page: PageRequest
    ) -> Page[Task]:
        """Return one page of tasks whose id equals `task_id` or whose title
        contains `text` ignoring case. An empty `text` matches every task.
        """
