"""The two database backends casework runs on.

Repositories ask `DialectName` for the INSERT construct of their backend so
that upserts can use ``ON CONFLICT`` on both PostgreSQL and SQLite.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert

if TYPE_CHECKING:
    from sqlalchemy import Table
    from sqlalchemy.engine import Connection, Engine
    from sqlalchemy.sql.dml import Insert

_ALIASES = {"postgres": "postgresql", "pg": "postgresql"}


class UnsupportedDialect(Exception):
    """The database is neither PostgreSQL nor SQLite."""


class DialectName(str, Enum):
    POSTGRES = "postgresql"
    SQLITE = "sqlite"

    @classmethod
    def from_string(cls, dialect_str: str | None) -> DialectName:
        """Map a dialect or URL drivername (``postgresql+psycopg``) to a member."""
        base = (dialect_str or "").strip().lower().partition("+")[0]
        try:
            return cls(_ALIASES.get(base, base))
        except ValueError:
            raise UnsupportedDialect(f"Unsupported dialect: {dialect_str!r}") from None

    @classmethod
    def from_sqlalchemy(cls, obj: Engine | Connection) -> DialectName:
        dialect = getattr(obj, "dialect", None)
        if dialect is None:
            raise UnsupportedDialect(
                f"Object {type(obj).__name__} does not expose .dialect.name"
            )
        return cls.from_string(dialect.name)

    def insert(self, table: Table) -> Insert:
        """Return an INSERT on `table` that supports ``on_conflict_do_update``."""
        if self is DialectName.POSTGRES:
            return pg_insert(table)
        return sqlite_insert(table)
