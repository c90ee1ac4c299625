"""Interface for case persistence.

Defines the `CaseRepository` abstraction: lookups by id and by case number,
insert-or-update keyed by id, idempotent deletion that cascades to the case's
tasks, and a paginated heuristic search.
"""

from __future__ import annotations

import abc

from casework.domain.models import Case
from casework.domain.value_objects import Page, PageRequest


class CaseRepository(abc.ABC):
    """Case store keyed by id, with a unique case number."""

    @abc.abstractmethod
    def get(self, case_id: str) -> Case | None:
        """Return the case with `case_id`, or ``None`` if there is none."""

    @abc.abstractmethod
    def get_by_number(self, case_number: str) -> Case | None:
        """Return the case holding `case_number`, or ``None`` if there is none."""

    @abc.abstractmethod
    def exists(self, case_id: str) -> bool:
        """Return True if a case with `case_id` is stored."""

    @abc.abstractmethod
    def save(self, case: Case) -> None:
        """Insert `case`, or overwrite the stored case with the same id.

        Args:
            case: The case to persist.

        Raises:
            CaseNumberAlreadyExistsError: If a different case already holds
                ``case.case_number``.
            StoreUnavailableError: If the store fails operationally.
        """

    @abc.abstractmethod
    def delete(self, case_id: str) -> None:
        """Delete the case and every task it owns.

        Deleting an unknown id is a no-op.
        """

    @abc.abstractmethod
    def search(
        self, text: str, case_id: str | None, page: PageRequest
    ) -> Page[Case]:
        """Return one page of cases matching `text` or `case_id`.

        A case matches when its id equals `case_id` (only when given), or its
        title or case number contains `text` ignoring case. An empty `text`
        matches every case.

        Args:
            text: Substring to look for in titles and case numbers.
            case_id: Optional exact id to match as well.
            page: Which page to return and how to order it.

        Returns:
            Page[Case]: The matching cases on the requested page, with the
            total number of matches.
        """
