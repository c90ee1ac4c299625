"""Implementation of CaseRepository using SQLAlchemy."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlalchemy import delete, select

from casework.adapters.db.schema import cases
from casework.domain.models import CASE_SORT_KEYS, Case
from casework.domain.value_objects import Page, PageRequest
from casework.interfaces.repositories import (
    CaseNumberAlreadyExistsError,
    CaseRepository,
)

from .base import SqlAlchemyRepository

if TYPE_CHECKING:
    from sqlalchemy.engine import RowMapping
    from sqlalchemy.exc import IntegrityError

# all flags must be present
UNIQUE_CASE_NUMBER_CONSTRAINT_KEYWORDS = ("case_number", "unique")  # pragma: no mutate


def _to_case(row: RowMapping) -> Case:
    return Case(
        id=row.id,
        case_number=row.case_number,
        created_date=row.created_date,
        title=row.title,
        description=row.description,
        status=row.status,
    )


class SqlAlchemyCaseRepository(SqlAlchemyRepository, CaseRepository):
    """CaseRepository implementation that supports both Postgres and SQLite.

    Cascading task deletion is left to the ``ON DELETE CASCADE`` foreign key.
    """

    table = cases
    kind = "cases"
    sort_keys = CASE_SORT_KEYS

    def get(self, case_id: str) -> Case | None:
        stmt = select(cases).where(cases.c.id == case_id)
        if not (row := self.connection.execute(stmt).mappings().first()):
            return None
        return _to_case(row)

    def get_by_number(self, case_number: str) -> Case | None:
        stmt = select(cases).where(cases.c.case_number == case_number)
        if not (row := self.connection.execute(stmt).mappings().first()):
            return None
        return _to_case(row)

    def exists(self, case_id: str) -> bool:
        return self._exists(case_id)

    def save(self, case: Case) -> None:
        self._upsert(
            {
                "id": case.id,
                "case_number": case.case_number,
                "title": case.title,
                "description": case.description,
                "status": case.status,
                "created_date": case.created_date,
            }
        )

    def delete(self, case_id: str) -> None:
        self.connection.execute(delete(cases).where(cases.c.id == case_id))

    def search(
        self, text: str, case_id: str | None, page: PageRequest
    ) -> Page[Case]:
        criteria = self._text_search(
            text, case_id, cases.c.id, cases.c.title, cases.c.case_number
        )
        return self._page(criteria, page, _to_case)

    def _raise_from_integrity_error(
        self, integrity_error: IntegrityError, values: dict[str, Any]
    ) -> None:
        msg = self._integrity_message(integrity_error)
        if all(kw in msg.lower() for kw in UNIQUE_CASE_NUMBER_CONSTRAINT_KEYWORDS):
            raise CaseNumberAlreadyExistsError(
                values["case_number"]
            ) from integrity_error
        super()._raise_from_integrity_error(integrity_error, values)
