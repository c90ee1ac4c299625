"""Query helpers shared by the SQLAlchemy repositories."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any, TypeVar

from sqlalchemy import ColumnElement, Select, String, Table, func, or_, select
from sqlalchemy.exc import DBAPIError, IntegrityError

from casework.adapters.db.dialects import DialectName
from casework.adapters.db.engine import UNICODE_LOWER
from casework.domain.value_objects import Page, PageRequest
from casework.interfaces.repositories import (
    ConstraintViolationError,
    StoreUnavailableError,
)

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection, RowMapping
    from sqlalchemy.sql.dml import Insert

T = TypeVar("T")

EMPTY_STRING = ""  # pragma: no mutate


class SqlAlchemyRepository:
    """Base for repositories over one table, bound to one connection."""

    table: Table
    kind: str
    sort_keys: frozenset[str]

    def __init__(self, connection: Connection):
        self.connection = connection
        self.dialect = DialectName.from_sqlalchemy(connection)

    # --- reads ---

    def _exists(self, key: str) -> bool:
        stmt = select(self.table.c.id).where(self.table.c.id == key)
        return self.connection.execute(stmt).first() is not None

    def _page(
        self,
        criteria: Iterable[ColumnElement[bool]],
        page: PageRequest,
        to_entity: Callable[[RowMapping], T],
    ) -> Page[T]:
        page.check_sort_key(self.kind, self.sort_keys)
        where = list(criteria)

        count_stmt = select(func.count()).select_from(self.table).where(*where)
        total = self.connection.execute(count_stmt).scalar_one()

        stmt: Select = (
            select(self.table)
            .where(*where)
            .order_by(*self._ordering(page))
            .limit(page.page_size)
            .offset(page.offset)
        )
        rows = self.connection.execute(stmt).mappings().all()
        return Page.of((to_entity(row) for row in rows), page, total)

    def _ordering(self, page: PageRequest) -> list[ColumnElement[Any]]:
        column = self.table.c[page.sort_by]
        # NULLs sort as the smallest value on every backend
        primary = (
            column.desc().nulls_last() if page.descending else column.asc().nulls_first()
        )
        return [primary, self.table.c.id.asc()]

    def _text_search(
        self, text: str, key: str | None, *columns: ColumnElement[Any]
    ) -> list[ColumnElement[bool]]:
        """Build the WHERE criteria for a heuristic search.

        An empty `text` matches every row, so no criteria are returned.
        Otherwise a row matches when any column contains `text` ignoring case,
        or (when `key` is given) the first column equals it. On SQLite the
        columns are folded with `UNICODE_LOWER`, since its own ``LIKE`` only
        ignores the case of ASCII letters.
        """
        if not text:
            return []
        id_column, *text_columns = columns
        clauses = [self._contains_ignoring_case(c, text) for c in text_columns]
        if key is not None:
            clauses.append(id_column == key)
        return [or_(*clauses)]

    def _contains_ignoring_case(
        self, column: ColumnElement[Any], text: str
    ) -> ColumnElement[bool]:
        if self.dialect is DialectName.SQLITE:
            folded = getattr(func, UNICODE_LOWER)(column, type_=String)
            return folded.contains(text.lower(), autoescape=True)
        return column.icontains(text, autoescape=True)

    # --- writes ---

    def _upsert(self, values: dict[str, Any]) -> None:
        stmt = self._build_upsert(values)
        try:
            self.connection.execute(stmt)
        except IntegrityError as e:
            self._raise_from_integrity_error(e, values)
        except DBAPIError as e:  # OperationalError, InterfaceError, etc.
            raise StoreUnavailableError(str(e)) from e

    def _build_upsert(self, values: dict[str, Any]) -> Insert:
        updates = {k: v for k, v in values.items() if k != "id"}
        stmt = self.dialect.insert(self.table).values(**values)
        return stmt.on_conflict_do_update(index_elements=[self.table.c.id], set_=updates)

    def _raise_from_integrity_error(
        self, integrity_error: IntegrityError, values: dict[str, Any]
    ) -> None:
        """Raise the repository error matching an IntegrityError.

        Subclasses map the constraints they know about before falling back to
        this generic `ConstraintViolationError`.
        """
        raise ConstraintViolationError(
            self._integrity_message(integrity_error)
        ) from integrity_error

    @staticmethod
    def _integrity_message(integrity_error: IntegrityError) -> str:
        return (
            str(integrity_error.orig)
            if integrity_error.orig not in (None, EMPTY_STRING)
            else str(integrity_error)
        )
