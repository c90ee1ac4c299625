"""In-memory shared data store for the in-memory repositories."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Any, TypeVar

from casework.domain.models import Case, Task
from casework.domain.value_objects import Page, PageRequest

T = TypeVar("T", Case, Task)


@dataclass(slots=True)
class InMemoryStoreData:
    """Shared in-memory backing store for the in-memory repositories.

    A single shared instance should be passed to both repositories so that
    tasks can check their parent and deleting a case can remove its tasks.
    Both mappings are keyed by id. Dicts keep insertion order, and replacing
    a value keeps its position, which stands in for the task insertion
    sequence of the relational store.
    """

    cases: dict[str, Case] = field(default_factory=dict)
    tasks: dict[str, Task] = field(default_factory=dict)


def contains_ignoring_case(value: str | None, text: str) -> bool:
    """Return True if `value` contains `text`, ignoring case (None never does)."""
    return value is not None and text.lower() in value.lower()


def paginate(items: Iterable[T], page: PageRequest) -> Page[T]:
    """Order `items` as the request asks and cut out the requested page.

    Items are ordered by ``page.sort_by`` with NULLs first when ascending (last
    when descending), ties broken by ascending id.
    """
    by_id = sorted(items, key=lambda item: item.id)
    ordered = sorted(by_id, key=_sort_key(page.sort_by), reverse=page.descending)
    window = ordered[page.offset : page.offset + page.page_size]
    return Page.of(window, page, len(ordered))


def _sort_key(attribute: str) -> Callable[[Any], tuple[bool, Any]]:
    def key(item: Any) -> tuple[bool, Any]:
        value = getattr(item, attribute)
        return (value is not None, value if value is not None else 0)

    return key
