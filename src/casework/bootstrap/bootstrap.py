"""Bootstrap the message bus with handlers and unit of work."""

from __future__ import annotations

import functools
import inspect
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from sqlalchemy.engine import make_url

from casework import config
from casework.adapters.db.engine import make_engine
from casework.adapters.example_data import JsonExampleDataSource
from casework.adapters.id_generators import UUIDv4Generator
from casework.adapters.unit_of_work import SqlAlchemyUnitOfWork
from casework.interfaces.example_data import ExampleDataSource
from casework.interfaces.id_generator import IdGenerator
from casework.interfaces.unit_of_work import AbstractUnitOfWork
from casework.service_layer.handlers import HANDLERS
from casework.service_layer.messagebus import MessageBus

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppContainer:
    """A class to hold application wiring constants."""

    message_bus: MessageBus


def build_write_uow(url: str) -> AbstractUnitOfWork:
    """Build a new unit of work over a fresh engine for `url`."""
    engine = make_engine(url)
    return SqlAlchemyUnitOfWork(engine)


def build_message_bus(
    uow: AbstractUnitOfWork,
    handlers: dict[type, Callable[..., Any]],
    id_generator: IdGenerator | None = None,
    example_data: ExampleDataSource | None = None,
) -> MessageBus:
    """Build a message bus with injected dependencies.

    Args:
        uow: Unit of work shared by every handler.
        handlers: Message type to handler mapping.
        id_generator: Source of new entity ids. Defaults to UUIDv4.
        example_data: Example-data source. Defaults to the packaged JSON files.
    """
    dependencies = {
        "uow": uow,
        "id_generator": id_generator or UUIDv4Generator(),
        "example_data": example_data or JsonExampleDataSource(),
    }
    injected_handlers = {
        message_type: inject_dependencies(handler, dependencies)
        for message_type, handler in handlers.items()
    }

    return MessageBus(uow, handlers=injected_handlers)


def bootstrap(db_url: str | None = None) -> AppContainer:
    """Bootstrap the message bus with handlers and unit of work.

    Args:
        db_url: Database URL. Defaults to the ``CASEWORK_DB_URL`` environment
            variable.

    Raises:
        DatabaseUrlNotSetError: If no URL is given and none is configured.
    """
    url = db_url or config.get_db_url()
    logger.debug(
        "Bootstrapping message bus for %s",
        make_url(url).render_as_string(hide_password=True),
    )
    uow = build_write_uow(url)
    message_bus = build_message_bus(uow, HANDLERS)

    return AppContainer(
        message_bus=message_bus,
    )


def inject_dependencies(
    handler: Callable, dependencies: Mapping[str, object]
) -> Callable:
    """Bind the dependencies a handler asks for (by parameter name)."""
    params = inspect.signature(handler).parameters
    deps = {
        name: dependency for name, dependency in dependencies.items() if name in params
    }
    return functools.partial(handler, **deps)
