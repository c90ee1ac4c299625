"""Interface for the example-data source used to seed a fresh store."""

from __future__ import annotations

import abc

from .dtos import CaseDto, TaskDto


class ExampleDataUnavailableError(Exception):
    """Raised when the example data cannot be read or decoded."""

    def __init__(self, resource: str, reason: str):
        super().__init__(f"Example data '{resource}' is unavailable: {reason}")
        self.resource = resource
        self.reason = reason


class ExampleDataSource(abc.ABC):
    """Provider of example cases and the tasks that belong to them."""

    @abc.abstractmethod
    def cases(self) -> list[CaseDto]:
        """Return the example cases, in load order.

        Raises:
            ExampleDataUnavailableError: If the cases cannot be read.
        """

    @abc.abstractmethod
    def tasks_by_case_number(self) -> dict[str, list[TaskDto]]:
        """Return the example tasks grouped by the case number of their parent.

        The tasks carry no parent id; the loader resolves it from the key.

        Raises:
            ExampleDataUnavailableError: If the tasks cannot be read.
        """
