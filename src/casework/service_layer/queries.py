"""Module defining Queries.

Queries are dispatched through the message bus like commands, but only read
and never commit.
"""

from dataclasses import dataclass, field

from casework.domain.value_objects import PageRequest


@dataclass(frozen=True)
class Query:
    """Base class for all queries."""


@dataclass(frozen=True)
class GetCase(Query):
    """Fetch one case by id."""

    case_id: str


@dataclass(frozen=True)
class GetCaseByNumber(Query):
    """Fetch one case by its case number."""

    case_number: str


@dataclass(frozen=True)
class GetTask(Query):
    """Fetch one task by id."""

    task_id: str


@dataclass(frozen=True)
class SearchCases(Query):
    """Page through cases whose id, title or case number match `search_string`."""

    search_string: str = ""
    page: PageRequest = field(default_factory=PageRequest)


@dataclass(frozen=True)
class SearchTasks(Query):
    """Page through tasks whose id or title match `search_string`."""

    search_string: str = ""
    page: PageRequest = field(default_factory=PageRequest)


@dataclass(frozen=True)
class GetTasksForCase(Query):
    """Page through the tasks owned by one case."""

    case_id: str
    page: PageRequest = field(default_factory=PageRequest)
