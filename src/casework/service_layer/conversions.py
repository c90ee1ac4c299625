"""Conversions between persisted entities and their DTOs.

Outbound, relations are flattened to ids: a case lists the ids of its tasks
and a task names its parent case by id. Inbound, a task's parent id is
resolved against the case repository.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime

from casework.domain.errors import CaseNotFoundError, MissingParentCaseError
from casework.domain.models import Case, Task
from casework.domain.parsing import try_parse_identifier
from casework.interfaces.dtos import CaseDto, TaskDto
from casework.interfaces.repositories import CaseRepository


def case_to_dto(case: Case, task_ids: Iterable[str]) -> CaseDto:
    """Convert a case to its DTO, listing its tasks by id."""
    return CaseDto(
        id=case.id,
        case_number=case.case_number,
        title=case.title,
        description=case.description,
        status=case.status,
        created_date=case.created_date,
        tasks=tuple(task_ids),
    )


def task_to_dto(task: Task) -> TaskDto:
    """Convert a task to its DTO, naming its parent by id."""
    return TaskDto(
        id=task.id,
        title=task.title,
        description=task.description,
        status=task.status,
        due_date=task.due_date,
        parent_case=task.parent_case_id,
    )


def case_from_dto(dto: CaseDto, case_id: str, now: datetime) -> Case:
    """Build a new case from `dto`.

    Any client-supplied id is ignored in favour of `case_id`, and a missing
    creation date becomes `now`.
    """
    created = dto.created_date if dto.created_date is not None else now
    return Case(
        id=case_id,
        case_number=dto.case_number,
        created_date=created.replace(microsecond=0),
        title=dto.title,
        description=dto.description,
        status=dto.status,
    )


def task_from_dto(dto: TaskDto, task_id: str, cases: CaseRepository) -> Task:
    """Build a new task from `dto`, resolving its parent case.

    Raises:
        MissingParentCaseError: If the DTO names no parent case.
        CaseNotFoundError: If the parent case does not exist.
    """
    if dto.parent_case is None:
        raise MissingParentCaseError()
    parent_id = try_parse_identifier(dto.parent_case)
    if parent_id is None or not cases.exists(parent_id):
        raise CaseNotFoundError(dto.parent_case)
    return Task(
        id=task_id,
        parent_case_id=parent_id,
        title=dto.title,
        description=dto.description,
        status=dto.status,
        due_date=dto.due_date,
    )
