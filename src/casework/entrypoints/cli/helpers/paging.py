"""Shared Click options for paginated commands."""

from collections.abc import Callable
from typing import Any

import click

from casework.domain.value_objects import DEFAULT_PAGE_SIZE, PageRequest


def page_options(default_sort: str) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Add --page/--size/--sort/--desc options to a command.

    The values are passed to the command unvalidated; build the request with
    `build_page_request` inside `translate_errors` so that invalid values
    surface as usage errors.
    """

    def decorator(fn: Callable[..., Any]) -> Callable[..., Any]:
        fn = click.option(
            "--desc",
            "descending",
            is_flag=True,
            help="Sort in descending order.",
        )(fn)
        fn = click.option(
            "--sort",
            "sort_by",
            default=default_sort,
            show_default=True,
            help="Attribute to sort by.",
        )(fn)
        fn = click.option(
            "--size",
            "page_size",
            type=int,
            default=DEFAULT_PAGE_SIZE,
            show_default=True,
            help="Number of results per page (at least 1).",
        )(fn)
        fn = click.option(
            "--page",
            "page_number",
            type=int,
            default=0,
            show_default=True,
            help="Zero-based page number.",
        )(fn)
        return fn

    return decorator


def build_page_request(
    page_number: int, page_size: int, sort_by: str, descending: bool
) -> PageRequest:
    """Build a validated PageRequest (raises InvalidPageRequestError)."""
    return PageRequest(
        page_number=page_number,
        page_size=page_size,
        sort_by=sort_by,
        descending=descending,
    )
