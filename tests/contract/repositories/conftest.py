"""Pytest fixtures for case/task repository contract tests.

Provided fixtures
-----------------
- **repos**: Parametrized over every backend. Yields a namespace holding a
  `cases` and a `tasks` repository that share one store:

  - `"memory"`: the in-memory repositories over one `InMemoryStoreData`;
  - `"sqlite_memory"`: SQLAlchemy repositories on an in-memory SQLite
    database created from the table metadata;
  - `"sqlite_file"`: SQLAlchemy repositories on a migrated SQLite file;
  - `"postgres"`: SQLAlchemy repositories on the session Postgres container
    (skipped without Docker).

SQL repositories run on an AUTOCOMMIT connection so that a rejected write
leaves the connection usable for the assertions that follow.
"""

from __future__ import annotations

from collections.abc import Iterator
from types import SimpleNamespace

import pytest

from casework.adapters.repositories.in_memory_adapters import (
    InMemoryCaseRepository,
    InMemoryStoreData,
    InMemoryTaskRepository,
)
from casework.adapters.repositories.sqlalchemy_adapters import (
    SqlAlchemyCaseRepository,
    SqlAlchemyTaskRepository,
)

ENGINE_FIXTURES = {
    "sqlite_memory": "sqlite_engine_memory",
    "sqlite_file": "sqlite_engine_file",
    "postgres": "postgres_engine",
}


@pytest.fixture(params=["memory", *ENGINE_FIXTURES])
def repos(request: pytest.FixtureRequest) -> Iterator[SimpleNamespace]:
    """Return fresh case and task repositories for the requested backend."""

    if request.param == "memory":
        data = InMemoryStoreData()
        yield SimpleNamespace(
            cases=InMemoryCaseRepository(data), tasks=InMemoryTaskRepository(data)
        )
        return

    engine = request.getfixturevalue(ENGINE_FIXTURES[request.param])
    with engine.connect().execution_options(isolation_level="AUTOCOMMIT") as conn:
        yield SimpleNamespace(
            cases=SqlAlchemyCaseRepository(conn), tasks=SqlAlchemyTaskRepository(conn)
        )
