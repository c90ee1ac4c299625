"""Message bus implementation for handling commands and queries."""

import logging
from collections.abc import Callable
from typing import Any

from casework.domain.errors import DomainError
from casework.interfaces.unit_of_work import AbstractUnitOfWork

from .commands import Command
from .queries import Query

logger = logging.getLogger(__name__)

Message = Command | Query

# pylint: disable=too-few-public-methods


class NoHandlerForMessage(LookupError):
    """Exception raised when no handler is found for a message."""

    def __init__(self, message: Message) -> None:
        super().__init__(f"No handler found for message {type(message).__name__}")


class MessageBus:
    """A simple message bus for handling commands and queries.

    The main responsibility of the message bus is to route messages to their
    appropriate handlers and hand back whatever the handler returns. It also
    logs the dispatch: domain rejections (bad input, missing entities) at
    INFO, anything else with its traceback. Errors are always re-raised.

    Args:
        uow: An instance of AbstractUnitOfWork for managing transactional operations.
            This uow should still have been injected into the handlers, it is
            just also available here for convenience.
        handlers: A mapping of message types to their handlers.
            Handlers should be callables that accept a single message argument.
            Additional dependencies (i.e. uow) are bound beforehand, see
            `casework.bootstrap.inject_dependencies`.
    """

    def __init__(
        self,
        uow: AbstractUnitOfWork,
        handlers: dict[type, Callable[..., Any]],
    ) -> None:
        self.uow = uow
        self._handlers = handlers

    def handle(self, message: Message) -> Any:
        """Handle a message by dispatching it to the appropriate handler.

        Args:
            message: The command or query to handle.

        Returns:
            The handler's result.

        Raises:
            NoHandlerForMessage: If no handler is found for the message type.
            Exception: If the handler raises an exception.
        """

        if handler := self._handlers.get(type(message)):
            handler_name = self._get_handler_name(handler)
            logger.debug("Handling message %s with handler %s", message, handler_name)
            try:
                return handler(message)
            except DomainError as e:
                logger.info(
                    "Rejected %s in handler %s: %s",
                    type(message).__name__,
                    handler_name,
                    e,
                )
                raise
            except Exception:  # pylint: disable=broad-except
                logger.exception(
                    "Exception handling message %s with handler %s",
                    message,
                    handler_name,
                )
                raise
        else:
            logger.error("No handler found for message %s", type(message).__name__)
            raise NoHandlerForMessage(message)

    @staticmethod
    def _get_handler_name(fn: Callable[..., Any]) -> str:
        if hasattr(fn, "__name__"):
            return fn.__name__
        if hasattr(fn, "func") and hasattr(fn.func, "__name__"):
            return fn.func.__name__
        return repr(fn)
