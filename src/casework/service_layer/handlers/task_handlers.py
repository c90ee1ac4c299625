"""Handlers for creating, updating and deleting tasks."""

from collections.abc import Callable
from typing import Any

from casework.domain.errors import TaskNotFoundError, UnknownParentCaseError
from casework.domain.parsing import parse_identifier
from casework.domain.properties import (
    TASK_FIELDS,
    TaskField,
    apply_field,
    parse_field_value,
    resolve_task_field,
)
from casework.interfaces.dtos import TaskDto
from casework.interfaces.id_generator import IdGenerator
from casework.interfaces.unit_of_work import AbstractUnitOfWork
from casework.service_layer import commands
from casework.service_layer.conversions import task_from_dto, task_to_dto


def save_task(
    cmd: commands.SaveTask, uow: AbstractUnitOfWork, id_generator: IdGenerator
) -> TaskDto:
    """Create a task under an existing case.

    The parent's task list is derived from the tasks table, so it shows the
    new task on the next read without the case being written.
    """

    with uow:
        task = task_from_dto(cmd.task, id_generator.new_id(), uow.cases)
        uow.tasks.save(task)
        uow.commit()

    return task_to_dto(task)


def save_tasks(
    cmd: commands.SaveTasks, uow: AbstractUnitOfWork, id_generator: IdGenerator
) -> list[TaskDto]:
    """Create tasks in order, committing each one; stop at the first failure."""
    return [
        save_task(commands.SaveTask(task), uow, id_generator) for task in cmd.tasks
    ]


def delete_task(cmd: commands.DeleteTask, uow: AbstractUnitOfWork) -> None:
    """Delete a task, leaving its case alone. Unknown ids are a no-op."""

    task_id = parse_identifier(cmd.task_id)
    with uow:
        uow.tasks.delete(task_id)
        uow.commit()


def update_task_property(
    cmd: commands.UpdateTaskProperty, uow: AbstractUnitOfWork
) -> TaskDto:
    """Set one allow-listed task property from its string value.

    Re-pointing ``parentCase`` requires the new parent to exist.
    """

    task_id = parse_identifier(cmd.task_id)
    with uow:
        task = uow.tasks.get(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)

        field = resolve_task_field(cmd.property_name)
        spec = TASK_FIELDS[field]
        value = parse_field_value(spec, cmd.value)
        if field is TaskField.PARENT_CASE and not uow.cases.exists(value):
            raise UnknownParentCaseError(value)

        updated = apply_field(task, spec, value)
        uow.tasks.save(updated)
        uow.commit()

    return task_to_dto(updated)


COMMAND_HANDLERS: dict[type, Callable[..., Any]] = {
    commands.SaveTask: save_task,
    commands.SaveTasks: save_tasks,
    commands.DeleteTask: delete_task,
    commands.UpdateTaskProperty: update_task_property,
}
