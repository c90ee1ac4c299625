"""Engine construction shared by the CLI, bootstrap and tests.

SQLite only enforces ``ON DELETE CASCADE`` when ``PRAGMA foreign_keys`` is on
for the connection, so `make_engine` switches it on for every new SQLite
connection together with a few performance PRAGMAs.

SQLite's own ``lower()`` and ``LIKE`` fold ASCII letters only. Each SQLite
connection therefore also gets `UNICODE_LOWER`, a SQL function backed by
`str.lower`, which the repositories use for case-insensitive search.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy import create_engine, event
from sqlalchemy.engine import URL, make_url

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

logger = logging.getLogger(__name__)

SQLITE_PRAGMAS = (
    "foreign_keys=ON",
    "journal_mode=WAL",
    "synchronous=NORMAL",
    "temp_store=MEMORY",
)

UNICODE_LOWER = "unicode_lower"  # pragma: no mutate


def is_sqlite(url: str | URL) -> bool:
    return make_url(str(url)).get_backend_name() == "sqlite"


def _unicode_lower(value: str | None) -> str | None:
    return value.lower() if value is not None else None


def _configure_sqlite_connection(dbapi_conn, _conn_record) -> None:
    cursor = dbapi_conn.cursor()
    try:
        for pragma in SQLITE_PRAGMAS:
            cursor.execute(f"PRAGMA {pragma};")
    finally:
        cursor.close()
    dbapi_conn.create_function(UNICODE_LOWER, 1, _unicode_lower, deterministic=True)


def make_engine(url: str | URL, *, echo: bool = False) -> Engine:
    """Create an Engine for `url`.

    SQLite engines get `SQLITE_PRAGMAS` and the `UNICODE_LOWER` function on
    every new connection.
    """
    engine = create_engine(url, echo=echo)
    if is_sqlite(url):
        logger.debug("Installing SQLite connection PRAGMAs: %s", ", ".join(SQLITE_PRAGMAS))
        event.listen(engine, "connect", _configure_sqlite_connection)
    return engine
