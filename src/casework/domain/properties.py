"""Allow-listed single-field updates for cases and tasks.

Each updatable field is an enum member carrying the wire name clients use
(``caseNumber``, ``dueDate``, ...). A member maps to a `FieldSpec` pairing the
entity attribute with the parser that turns the raw string into a typed
value. Names outside the enum are rejected with `UnknownPropertyError`.

Example:
    ```py
    >>> field = resolve_case_field("status")
    >>> updated = apply_field(case, CASE_FIELDS[field], "Closed")
    ```
"""

from __future__ import annotations

import dataclasses
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any, TypeVar

from .errors import UnknownPropertyError
from .models import Case, Task
from .parsing import parse_identifier, parse_local_datetime, parse_text

E = TypeVar("E", Case, Task)


class CaseField(str, Enum):
    """Case properties that may be updated by name."""

    STATUS = "status"
    DESCRIPTION = "description"
    TITLE = "title"
    CASE_NUMBER = "caseNumber"
    CREATED_DATE = "createdDate"


class TaskField(str, Enum):
    """Task properties that may be updated by name."""

    STATUS = "status"
    DESCRIPTION = "description"
    TITLE = "title"
    DUE_DATE = "dueDate"
    PARENT_CASE = "parentCase"


@dataclass(frozen=True, slots=True)
class FieldSpec:
    """How to set one field: target attribute and the parser for its value."""

    attribute: str
    parse: Callable[[str], Any]


CASE_FIELDS: dict[CaseField, FieldSpec] = {
    CaseField.STATUS: FieldSpec("status", parse_text),
    CaseField.DESCRIPTION: FieldSpec("description", parse_text),
    CaseField.TITLE: FieldSpec("title", parse_text),
    CaseField.CASE_NUMBER: FieldSpec("case_number", parse_text),
    CaseField.CREATED_DATE: FieldSpec("created_date", parse_local_datetime),
}

TASK_FIELDS: dict[TaskField, FieldSpec] = {
    TaskField.STATUS: FieldSpec("status", parse_text),
    TaskField.DESCRIPTION: FieldSpec("description", parse_text),
    TaskField.TITLE: FieldSpec("title", parse_text),
    TaskField.DUE_DATE: FieldSpec("due_date", parse_local_datetime),
    TaskField.PARENT_CASE: FieldSpec("parent_case_id", parse_identifier),
}


def resolve_case_field(name: str) -> CaseField:
    """Map a property name to a `CaseField`.

    Raises:
        UnknownPropertyError: If `name` is not an updatable case property.
    """
    try:
        return CaseField(name)
    except ValueError as e:
        raise UnknownPropertyError("case", name) from e


def resolve_task_field(name: str) -> TaskField:
    """Map a property name to a `TaskField`.

    Raises:
        UnknownPropertyError: If `name` is not an updatable task property.
    """
    try:
        return TaskField(name)
    except ValueError as e:
        raise UnknownPropertyError("task", name) from e


def parse_field_value(spec: FieldSpec, raw: str) -> Any:
    """Parse `raw` with the field's parser (may raise `UnparsableValueError`)."""
    return spec.parse(raw)


def apply_field(entity: E, spec: FieldSpec, value: Any) -> E:
    """Return a copy of `entity` with the field described by `spec` set to `value`."""
    return dataclasses.replace(entity, **{spec.attribute: value})
