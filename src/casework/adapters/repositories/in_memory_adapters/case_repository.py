"""In-memory CaseRepository implementation for testing purposes."""

from casework.domain.models import CASE_SORT_KEYS, Case
from casework.domain.value_objects import Page, PageRequest
from casework.interfaces.repositories import (
    CaseNumberAlreadyExistsError,
    CaseRepository,
)

from .store import InMemoryStoreData, contains_ignoring_case, paginate


class InMemoryCaseRepository(CaseRepository):
    """In-memory CaseRepository implementation for testing purposes.

    Note: This implementation is not thread-safe and is intended
    solely for use in single-threaded test scenarios
    """

    def __init__(self, data: InMemoryStoreData):
        self.data = data

    # --- lookups ---

    def get(self, case_id: str) -> Case | None:
        return self.data.cases.get(case_id)

    def get_by_number(self, case_number: str) -> Case | None:
        for case in self.data.cases.values():
            if case.case_number == case_number:
                return case
        return None

    def exists(self, case_id: str) -> bool:
        return case_id in self.data.cases

    def search(
        self, text: str, case_id: str | None, page: PageRequest
    ) -> Page[Case]:
        page.check_sort_key("cases", CASE_SORT_KEYS)
        matches = [
            case
            for case in self.data.cases.values()
            if not text
            or case.id == case_id
            or contains_ignoring_case(case.title, text)
            or contains_ignoring_case(case.case_number, text)
        ]
        return paginate(matches, page)

    # --- writes ---

    def save(self, case: Case) -> None:
        holder = self.get_by_number(case.case_number)
        if holder is not None and holder.id != case.id:
            raise CaseNumberAlreadyExistsError(case.case_number)
        self.data.cases[case.id] = case

    def delete(self, case_id: str) -> None:
        if self.data.cases.pop(case_id, None) is None:
            return
        # cascade
        for task_id in [t.id for t in self.data.tasks.values() if t.parent_case_id == case_id]:
            del self.data.tasks[task_id]
