"""Read-side handlers: lookups, searches and pages of tasks.

Query handlers open the unit of work but never commit; leaving the context
rolls the read transaction back.
"""

from collections.abc import Callable
from typing import Any

from casework.domain.models import CASE_SORT_KEYS, TASK_SORT_KEYS
from casework.domain.parsing import parse_identifier, try_parse_identifier
from casework.domain.value_objects import Page
from casework.interfaces.dtos import CaseDto, TaskDto
from casework.interfaces.unit_of_work import AbstractUnitOfWork
from casework.service_layer import queries
from casework.service_layer.conversions import case_to_dto, task_to_dto


def get_case(query: queries.GetCase, uow: AbstractUnitOfWork) -> CaseDto | None:
    """Return the case with the given id, or None."""
    case_id = parse_identifier(query.case_id)
    with uow:
        if (case := uow.cases.get(case_id)) is None:
            return None
        return case_to_dto(case, uow.tasks.ids_by_parent(case.id))


def get_case_by_number(
    query: queries.GetCaseByNumber, uow: AbstractUnitOfWork
) -> CaseDto | None:
    """Return the case holding the given case number, or None."""
    with uow:
        if (case := uow.cases.get_by_number(query.case_number)) is None:
            return None
        return case_to_dto(case, uow.tasks.ids_by_parent(case.id))


def get_task(query: queries.GetTask, uow: AbstractUnitOfWork) -> TaskDto | None:
    """Return the task with the given id, or None."""
    task_id = parse_identifier(query.task_id)
    with uow:
        if (task := uow.tasks.get(task_id)) is None:
            return None
        return task_to_dto(task)


def search_cases(
    query: queries.SearchCases, uow: AbstractUnitOfWork
) -> Page[CaseDto]:
    """Search cases by id, title or case number.

    The search string is tried as an id as well; when it does not parse as
    one, only the substring clauses apply.
    """
    query.page.check_sort_key("cases", CASE_SORT_KEYS)
    case_id = try_parse_identifier(query.search_string)
    with uow:
        page = uow.cases.search(query.search_string, case_id, query.page)
        return page.map(lambda case: case_to_dto(case, uow.tasks.ids_by_parent(case.id)))


def search_tasks(
    query: queries.SearchTasks, uow: AbstractUnitOfWork
) -> Page[TaskDto]:
    """Search tasks by id or title."""
    query.page.check_sort_key("tasks", TASK_SORT_KEYS)
    task_id = try_parse_identifier(query.search_string)
    with uow:
        return uow.tasks.search(query.search_string, task_id, query.page).map(
            task_to_dto
        )


def get_tasks_for_case(
    query: queries.GetTasksForCase, uow: AbstractUnitOfWork
) -> Page[TaskDto]:
    """Return a page of one case's tasks. Unknown cases give an empty page."""
    query.page.check_sort_key("tasks", TASK_SORT_KEYS)
    case_id = parse_identifier(query.case_id)
    with uow:
        return uow.tasks.list_by_parent(case_id, query.page).map(task_to_dto)


QUERY_HANDLERS: dict[type, Callable[..., Any]] = {
    queries.GetCase: get_case,
    queries.GetCaseByNumber: get_case_by_number,
    queries.GetTask: get_task,
    queries.SearchCases: search_cases,
    queries.SearchTasks: search_tasks,
    queries.GetTasksForCase: get_tasks_for_case,
}
