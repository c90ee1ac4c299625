"""Value objects for paginated reads."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from .errors import InvalidPageRequestError, UnknownSortKeyError

T = TypeVar("T")
U = TypeVar("U")

DEFAULT_PAGE_SIZE = 20
DEFAULT_SORT_KEY = "title"


@dataclass(frozen=True, slots=True)
class PageRequest:
    """A request for one page of an ordered result set.

    Validated on construction so an invalid request never reaches a store.

    Attributes:
        page_number: Zero-based page index.
        page_size: Number of items per page (at least 1).
        sort_by: Entity attribute to order by (ascending unless `descending`).
        descending: Reverse the ordering.
    """

    page_number: int = 0
    page_size: int = DEFAULT_PAGE_SIZE
    sort_by: str = DEFAULT_SORT_KEY
    descending: bool = False

    def __post_init__(self) -> None:
        if self.page_number < 0:
            raise InvalidPageRequestError(
                f"Page number must be at least 0, got {self.page_number}."
            )
        if self.page_size < 1:
            raise InvalidPageRequestError(
                f"Page size must be at least 1, got {self.page_size}."
            )

    @property
    def offset(self) -> int:
        """Number of items preceding this page."""
        return self.page_number * self.page_size

    def check_sort_key(self, kind: str, allowed: Iterable[str]) -> None:
        """Raise `UnknownSortKeyError` unless `sort_by` is one of `allowed`."""
        if self.sort_by not in allowed:
            raise UnknownSortKeyError(kind, self.sort_by)


@dataclass(frozen=True, slots=True)
class Page(Generic[T]):
    """A bounded slice of an ordered result set plus its metadata."""

    content: tuple[T, ...]
    page_number: int
    page_size: int
    total_elements: int

    @classmethod
    def of(cls, content: Iterable[T], request: PageRequest, total: int) -> Page[T]:
        """Build a page for `request` holding `content` out of `total` items."""
        return cls(
            content=tuple(content),
            page_number=request.page_number,
            page_size=request.page_size,
            total_elements=total,
        )

    @property
    def total_pages(self) -> int:
        """Number of pages needed to hold every element."""
        return math.ceil(self.total_elements / self.page_size)

    def map(self, fn: Callable[[T], U]) -> Page[U]:
        """Return a page with `fn` applied to every item, metadata unchanged."""
        return Page(
            content=tuple(fn(item) for item in self.content),
            page_number=self.page_number,
            page_size=self.page_size,
            total_elements=self.total_elements,
        )

    def to_dict(self, render: Callable[[T], Any] | None = None) -> dict[str, Any]:
        """Render the page in its external JSON shape.

        Args:
            render: Applied to each item. Defaults to calling the item's own
                ``to_dict()``.
        """
        render = render or (lambda item: item.to_dict())  # type: ignore[attr-defined]
        return {
            "content": [render(item) for item in self.content],
            "pageNumber": self.page_number,
            "pageSize": self.page_size,
            "totalElements": self.total_elements,
            "totalPages": self.total_pages,
        }
