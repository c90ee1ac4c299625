"""In-memory TaskRepository implementation for testing purposes."""

from casework.domain.models import TASK_SORT_KEYS, Task
from casework.domain.value_objects import Page, PageRequest
from casework.interfaces.repositories import (
    ConstraintViolationError,
    TaskRepository,
)

from .store import InMemoryStoreData, contains_ignoring_case, paginate


class InMemoryTaskRepository(TaskRepository):
    """In-memory TaskRepository implementation for testing purposes.

    Note: This implementation is not thread-safe and is intended
    solely for use in single-threaded test scenarios
    """

    def __init__(self, data: InMemoryStoreData):
        self.data = data

    # --- lookups ---

    def get(self, task_id: str) -> Task | None:
        return self.data.tasks.get(task_id)

    def exists(self, task_id: str) -> bool:
        return task_id in self.data.tasks

    def list_by_parent(self, case_id: str, page: PageRequest) -> Page[Task]:
        page.check_sort_key("tasks", TASK_SORT_KEYS)
        children = [t for t in self.data.tasks.values() if t.parent_case_id == case_id]
        return paginate(children, page)

    def ids_by_parent(self, case_id: str) -> list[str]:
        return [t.id for t in self.data.tasks.values() if t.parent_case_id == case_id]

    def search(
        self, text: str, task_id: str | None, page: PageRequest
    ) -> Page[Task]:
        page.check_sort_key("tasks", TASK_SORT_KEYS)
        matches = [
            task
            for task in self.data.tasks.values()
            if not text or task.id == task_id or contains_ignoring_case(task.title, text)
        ]
        return paginate(matches, page)

    # --- writes ---

    def save(self, task: Task) -> None:
        if task.parent_case_id not in self.data.cases:
            raise ConstraintViolationError(
                f"Task {task.id} references missing case {task.parent_case_id}"
            )
        self.data.tasks[task.id] = task

    def delete(self, task_id: str) -> None:
        self.data.tasks.pop(task_id, None)
