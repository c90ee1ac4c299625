"""``casework example-data``: seed or remove the packaged example data set."""

from __future__ import annotations

import click
import click_extra as clickx

from casework.service_layer import commands

from .helpers import emit_json, get_message_bus, success, translate_errors, warn


@click.group(cls=clickx.ExtraGroup, name="example-data")
def example_data() -> None:
    """Load or clear the example cases and tasks."""


@example_data.command()
@click.pass_context
def load(ctx: click.Context) -> None:
    """Load the example cases and their tasks.

    Running it again stops at the first example case that is still present.
    Example cases ahead of it that were deleted meanwhile are re-created,
    without their tasks.
    """
    with translate_errors():
        result = get_message_bus(ctx).handle(commands.LoadExampleData())
    emit_json(
        {
            "casesLoaded": result.cases_loaded,
            "tasksLoaded": result.tasks_loaded,
            "alreadyLoaded": result.already_loaded,
        }
    )
    if result.already_loaded and result.cases_loaded:
        warn(
            f"Example data was partly present; re-created {result.cases_loaded} "
            "missing case(s) without their tasks."
        )
    elif result.already_loaded:
        warn("Example data was already loaded; nothing added.")
    else:
        success(
            f"Loaded {result.cases_loaded} case(s) and {result.tasks_loaded} task(s)."
        )


@example_data.command()
@click.pass_context
def clear(ctx: click.Context) -> None:
    """Delete the example cases and, with them, their tasks.

    Cases with other case numbers are left alone.
    """
    with translate_errors():
        deleted = get_message_bus(ctx).handle(commands.ClearExampleData())
    emit_json({"casesDeleted": deleted})
    success(f"Deleted {deleted} example case(s).")
