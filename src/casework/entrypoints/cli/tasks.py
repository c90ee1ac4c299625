"""``casework task``: create, read, search, update and delete tasks."""

from __future__ import annotations

import json
from pathlib import Path

import click
import click_extra as clickx

from casework.interfaces.dtos import TaskDto
from casework.service_layer import commands, queries

from .helpers import (
    NotFoundException,
    build_page_request,
    emit_json,
    get_message_bus,
    page_options,
    success,
    translate_errors,
)


@click.group(cls=clickx.ExtraGroup, name="task")
def task() -> None:
    """Manage tasks."""


@task.command()
@click.option("--parent-case", "parent_case", default=None, help="Id of the owning case.")
@click.option("--title", default=None, help="Task title.")
@click.option("--description", default=None, help="Task description.")
@click.option("--status", default=None, help="Task status (free text).")
@click.option(
    "--due-date", "due_date", default=None, help="Due time as YYYY-MM-DDTHH:MM:SS."
)
@click.pass_context
def create(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    parent_case: str | None,
    title: str | None,
    description: str | None,
    status: str | None,
    due_date: str | None,
) -> None:
    """Create a task under an existing case."""
    with translate_errors():
        dto = TaskDto.from_dict(
            {
                "parentCase": parent_case,
                "title": title,
                "description": description,
                "status": status,
                "dueDate": due_date,
            }
        )
        created = get_message_bus(ctx).handle(commands.SaveTask(dto))
    emit_json(created.to_dict())


@task.command(name="import")
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.pass_context
def import_tasks(ctx: click.Context, file: Path) -> None:
    """Create every task in FILE, a JSON array of tasks naming their parent.

    Stops at the first failure; tasks created before it are kept.
    """
    try:
        document = json.loads(file.read_text(encoding="utf-8"))
    except ValueError as e:
        raise click.BadParameter(f"{file} is not valid JSON: {e}") from e
    if not isinstance(document, list):
        raise click.BadParameter(f"{file} must contain a JSON array of tasks")

    with translate_errors():
        dtos = tuple(TaskDto.from_dict(item) for item in document)
        created = get_message_bus(ctx).handle(commands.SaveTasks(dtos))
    emit_json([dto.to_dict() for dto in created])
    success(f"Imported {len(created)} task(s).")


@task.command()
@click.argument("task_id")
@click.pass_context
def get(ctx: click.Context, task_id: str) -> None:
    """Show the task with id TASK_ID."""
    with translate_errors():
        found = get_message_bus(ctx).handle(queries.GetTask(task_id))
    if found is None:
        raise NotFoundException(f"Task '{task_id}' not found.")
    emit_json(found.to_dict())


@task.command()
@click.argument("task_id")
@click.pass_context
def delete(ctx: click.Context, task_id: str) -> None:
    """Delete a task. Its case is not affected."""
    with translate_errors():
        get_message_bus(ctx).handle(commands.DeleteTask(task_id))
    success(f"Deleted task {task_id}.")


@task.command()
@click.argument("search_string", default="")
@page_options(default_sort="title")
@click.pass_context
def search(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    search_string: str,
    page_number: int,
    page_size: int,
    sort_by: str,
    descending: bool,
) -> None:
    """Search tasks by id or title."""
    with translate_errors():
        page = build_page_request(page_number, page_size, sort_by, descending)
        result = get_message_bus(ctx).handle(queries.SearchTasks(search_string, page))
    emit_json(result.to_dict())


@task.command(name="for-case")
@click.argument("case_id")
@page_options(default_sort="title")
@click.pass_context
def for_case(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    case_id: str,
    page_number: int,
    page_size: int,
    sort_by: str,
    descending: bool,
) -> None:
    """List the tasks of case CASE_ID, one page at a time."""
    with translate_errors():
        page = build_page_request(page_number, page_size, sort_by, descending)
        result = get_message_bus(ctx).handle(queries.GetTasksForCase(case_id, page))
    emit_json(result.to_dict())


@task.command(name="set")
@click.argument("task_id")
@click.argument("property_name", metavar="PROPERTY")
@click.argument("value")
@click.pass_context
def set_property(ctx: click.Context, task_id: str, property_name: str, value: str) -> None:
    """Set one PROPERTY of a task to VALUE.

    PROPERTY is one of status, description, title, dueDate
    (YYYY-MM-DDTHH:MM:SS) or parentCase (id of an existing case).
    """
    with translate_errors():
        updated = get_message_bus(ctx).handle(
            commands.UpdateTaskProperty(task_id, property_name, value)
        )
    emit_json(updated.to_dict())
