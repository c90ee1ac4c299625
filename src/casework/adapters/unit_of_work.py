"""Unit of work over a single SQLAlchemy connection."""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING

from casework.adapters.repositories.sqlalchemy_adapters import (
    SqlAlchemyCaseRepository,
    SqlAlchemyTaskRepository,
)
from casework.interfaces.unit_of_work import AbstractUnitOfWork

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection, Engine


class SqlAlchemyUnitOfWork(AbstractUnitOfWork):
    """Opens a connection per ``with`` block; both repositories share it.

    The open connection and its repositories are held per thread, so one
    instance (and the message bus built on it) may be used from several
    threads at once. Blocks must not be nested within one thread.
    """

    def __init__(self, engine: Engine):
        self.engine = engine
        self._local = threading.local()

    @property
    def connection(self) -> Connection:
        return self._local.connection

    @property
    def cases(self) -> SqlAlchemyCaseRepository:  # type: ignore[override]
        return self._local.cases

    @property
    def tasks(self) -> SqlAlchemyTaskRepository:  # type: ignore[override]
        return self._local.tasks

    def __enter__(self):
        connection = self.engine.connect()
        self._local.connection = connection
        self._local.cases = SqlAlchemyCaseRepository(connection)
        self._local.tasks = SqlAlchemyTaskRepository(connection)
        return super().__enter__()

    def __exit__(self, *args):
        try:
            super().__exit__(*args)
        finally:
            self.connection.close()

    def commit(self):
        self.connection.commit()

    def rollback(self):
        self.connection.rollback()
