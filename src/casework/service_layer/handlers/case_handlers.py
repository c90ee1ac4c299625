"""Handlers for creating, updating and deleting cases."""

import logging
from collections.abc import Callable
from datetime import datetime
from typing import Any

from casework.domain.errors import (
    CaseHasTasksError,
    CaseNotFoundError,
    DuplicateCaseNumberError,
)
from casework.domain.parsing import parse_identifier
from casework.domain.properties import (
    CASE_FIELDS,
    apply_field,
    parse_field_value,
    resolve_case_field,
)
from casework.interfaces.dtos import CaseDto
from casework.interfaces.id_generator import IdGenerator
from casework.interfaces.repositories import CaseNumberAlreadyExistsError
from casework.interfaces.unit_of_work import AbstractUnitOfWork
from casework.service_layer import commands
from casework.service_layer.conversions import case_from_dto, case_to_dto

logger = logging.getLogger(__name__)


def save_case(
    cmd: commands.SaveCase, uow: AbstractUnitOfWork, id_generator: IdGenerator
) -> CaseDto:
    """Create a case with a fresh id and return it with an empty task list."""

    if cmd.case.tasks:
        raise CaseHasTasksError(len(cmd.case.tasks))

    case = case_from_dto(cmd.case, id_generator.new_id(), now=datetime.now())

    with uow:
        try:
            uow.cases.save(case)
        except CaseNumberAlreadyExistsError as e:
            raise DuplicateCaseNumberError(case.case_number) from e
        uow.commit()

    logger.debug("Created case %s (%s)", case.id, case.case_number)
    return case_to_dto(case, ())


def save_cases(
    cmd: commands.SaveCases, uow: AbstractUnitOfWork, id_generator: IdGenerator
) -> list[CaseDto]:
    """Create cases in order, committing each one; stop at the first failure.

    Cases saved before the failing one stay committed.
    """
    return [
        save_case(commands.SaveCase(case), uow, id_generator) for case in cmd.cases
    ]


def delete_case(cmd: commands.DeleteCase, uow: AbstractUnitOfWork) -> None:
    """Delete a case together with its tasks. Unknown ids are a no-op."""

    case_id = parse_identifier(cmd.case_id)
    with uow:
        uow.cases.delete(case_id)
        uow.commit()


def update_case_property(
    cmd: commands.UpdateCaseProperty, uow: AbstractUnitOfWork
) -> CaseDto:
    """Set one allow-listed case property from its string value."""

    case_id = parse_identifier(cmd.case_id)
    with uow:
        case = uow.cases.get(case_id)
        if case is None:
            raise CaseNotFoundError(case_id)

        spec = CASE_FIELDS[resolve_case_field(cmd.property_name)]
        updated = apply_field(case, spec, parse_field_value(spec, cmd.value))

        try:
            uow.cases.save(updated)
        except CaseNumberAlreadyExistsError as e:
            raise DuplicateCaseNumberError(updated.case_number) from e
        uow.commit()

        return case_to_dto(updated, uow.tasks.ids_by_parent(case_id))


COMMAND_HANDLERS: dict[type, Callable[..., Any]] = {
    commands.SaveCase: save_case,
    commands.SaveCases: save_cases,
    commands.DeleteCase: delete_case,
    commands.UpdateCaseProperty: update_case_property,
}
