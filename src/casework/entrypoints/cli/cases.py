"""``casework case``: create, read, search, update and delete cases.

Results are printed to stdout as JSON in the external shape (``caseNumber``,
``createdDate`` as ``YYYY-MM-DDTHH:MM:SS``, ``tasks`` as a list of ids).
"""

from __future__ import annotations

import json
from pathlib import Path

import click
import click_extra as clickx

from casework.interfaces.dtos import CaseDto
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


@click.group(cls=clickx.ExtraGroup, name="case")
def case() -> None:
    """Manage cases."""


@case.command()
@click.option("--case-number", "case_number", default="", help="Unique case number.")
@click.option("--title", default=None, help="Case title.")
@click.option("--description", default=None, help="Case description.")
@click.option("--status", default=None, help="Case status (free text).")
@click.option(
    "--created-date",
    "created_date",
    default=None,
    help="Creation time as YYYY-MM-DDTHH:MM:SS. Defaults to now.",
)
@click.pass_context
def create(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    case_number: str,
    title: str | None,
    description: str | None,
    status: str | None,
    created_date: str | None,
) -> None:
    """Create a case."""
    with translate_errors():
        dto = CaseDto.from_dict(
            {
                "caseNumber": case_number,
                "title": title,
                "description": description,
                "status": status,
                "createdDate": created_date,
            }
        )
        created = get_message_bus(ctx).handle(commands.SaveCase(dto))
    emit_json(created.to_dict())


@case.command(name="import")
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.pass_context
def import_cases(ctx: click.Context, file: Path) -> None:
    """Create every case in FILE, a JSON array of cases.

    Cases are created one at a time and the import stops at the first
    failure; cases created before it are kept.
    """
    try:
        document = json.loads(file.read_text(encoding="utf-8"))
    except ValueError as e:
        raise click.BadParameter(f"{file} is not valid JSON: {e}") from e
    if not isinstance(document, list):
        raise click.BadParameter(f"{file} must contain a JSON array of cases")

    with translate_errors():
        dtos = tuple(CaseDto.from_dict(item) for item in document)
        created = get_message_bus(ctx).handle(commands.SaveCases(dtos))
    emit_json([dto.to_dict() for dto in created])
    success(f"Imported {len(created)} case(s).")


@case.command()
@click.argument("identifier")
@click.option(
    "--by-number",
    is_flag=True,
    help="Treat IDENTIFIER as a case number instead of an id.",
)
@click.pass_context
def get(ctx: click.Context, identifier: str, by_number: bool) -> None:
    """Show the case with id IDENTIFIER."""
    query = (
        queries.GetCaseByNumber(identifier) if by_number else queries.GetCase(identifier)
    )
    with translate_errors():
        found = get_message_bus(ctx).handle(query)
    if found is None:
        raise NotFoundException(f"Case '{identifier}' not found.")
    emit_json(found.to_dict())


@case.command()
@click.argument("case_id")
@click.pass_context
def delete(ctx: click.Context, case_id: str) -> None:
    """Delete a case and all of its tasks.

    Deleting a case that does not exist succeeds.
    """
    with translate_errors():
        get_message_bus(ctx).handle(commands.DeleteCase(case_id))
    success(f"Deleted case {case_id}.")


@case.command()
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
    """Search cases by id, title or case number.

    SEARCH_STRING matches a case whose id equals it, or whose title or case
    number contains it (ignoring case). Omit it to list every case.
    """
    with translate_errors():
        page = build_page_request(page_number, page_size, sort_by, descending)
        result = get_message_bus(ctx).handle(queries.SearchCases(search_string, page))
    emit_json(result.to_dict())


@case.command(name="set")
@click.argument("case_id")
@click.argument("property_name", metavar="PROPERTY")
@click.argument("value")
@click.pass_context
def set_property(ctx: click.Context, case_id: str, property_name: str, value: str) -> None:
    """Set one PROPERTY of a case to VALUE.

    PROPERTY is one of status, description, title, caseNumber or createdDate
    (YYYY-MM-DDTHH:MM:SS).
    """
    with translate_errors():
        updated = get_message_bus(ctx).handle(
            commands.UpdateCaseProperty(case_id, property_name, value)
        )
    emit_json(updated.to_dict())
