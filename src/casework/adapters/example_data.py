"""JSON-backed example data for seeding an empty store.

Two documents make up the example data set:

* a cases document: a JSON array of case objects
  (``caseNumber``, ``title``, ``description``, ``status``, ``createdDate``);
* a tasks document: a JSON object mapping a case number to the array of task
  objects belonging to that case.

By default both are read from the packaged ``casework.resources`` files
``example-cases.json`` and ``example-tasks.json``; explicit paths may be given
instead.
"""

from __future__ import annotations

import json
import logging
from importlib.resources import files
from pathlib import Path
from typing import Any

from casework.domain.errors import InvalidArgumentError
from casework.interfaces.dtos import CaseDto, TaskDto
from casework.interfaces.example_data import (
    ExampleDataSource,
    ExampleDataUnavailableError,
)

logger = logging.getLogger(__name__)

RESOURCE_PACKAGE = "casework.resources"  # pragma: no mutate
CASES_RESOURCE = "example-cases.json"  # pragma: no mutate
TASKS_RESOURCE = "example-tasks.json"  # pragma: no mutate


class JsonExampleDataSource(ExampleDataSource):
    """Example-data source reading two JSON documents.

    Args:
        cases_path: Path of the cases document. Defaults to the packaged one.
        tasks_path: Path of the tasks document. Defaults to the packaged one.
    """

    def __init__(
        self,
        cases_path: str | Path | None = None,
        tasks_path: str | Path | None = None,
    ):
        self.cases_path = cases_path
        self.tasks_path = tasks_path

    def cases(self) -> list[CaseDto]:
        name, document = self._read(self.cases_path, CASES_RESOURCE)
        if not isinstance(document, list):
            raise ExampleDataUnavailableError(name, "expected a JSON array of cases")
        try:
            return [CaseDto.from_dict(item) for item in document]
        except (AttributeError, InvalidArgumentError) as e:
            raise ExampleDataUnavailableError(name, str(e)) from e

    def tasks_by_case_number(self) -> dict[str, list[TaskDto]]:
        name, document = self._read(self.tasks_path, TASKS_RESOURCE)
        if not isinstance(document, dict):
            raise ExampleDataUnavailableError(
                name, "expected a JSON object keyed by case number"
            )
        try:
            return {
                str(case_number): [TaskDto.from_dict(item) for item in items]
                for case_number, items in document.items()
            }
        except (AttributeError, TypeError, InvalidArgumentError) as e:
            raise ExampleDataUnavailableError(name, str(e)) from e

    @staticmethod
    def _read(path: str | Path | None, resource: str) -> tuple[str, Any]:
        """Read and decode one JSON document, from `path` or the package."""
        if path is not None:
            name = str(path)
            source = Path(path)
        else:
            name = f"{RESOURCE_PACKAGE}/{resource}"
            source = files(RESOURCE_PACKAGE).joinpath(resource)  # type: ignore[assignment]
        logger.debug("Reading example data from %s", name)
        try:
            return name, json.loads(source.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:  # JSONDecodeError is a ValueError
            raise ExampleDataUnavailableError(name, str(e)) from e
