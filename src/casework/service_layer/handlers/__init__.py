"""Service layer handlers."""

from collections.abc import Callable
from typing import Any

from .case_handlers import COMMAND_HANDLERS as CASE_COMMAND_HANDLERS
from .example_data_handlers import COMMAND_HANDLERS as EXAMPLE_DATA_COMMAND_HANDLERS
from .query_handlers import QUERY_HANDLERS
from .task_handlers import COMMAND_HANDLERS as TASK_COMMAND_HANDLERS

__all__ = ["COMMAND_HANDLERS", "HANDLERS", "QUERY_HANDLERS"]

COMMAND_HANDLERS: dict[type, Callable[..., Any]] = {
    **CASE_COMMAND_HANDLERS,
    **TASK_COMMAND_HANDLERS,
    **EXAMPLE_DATA_COMMAND_HANDLERS,
}

HANDLERS: dict[type, Callable[..., Any]] = {
    **COMMAND_HANDLERS,
    **QUERY_HANDLERS,
}
