"""Handlers that seed and clear the example data set."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, replace
from typing import Any

from casework.domain.errors import CaseNumberNotFoundError, DuplicateCaseNumberError
from casework.interfaces.example_data import ExampleDataSource
from casework.interfaces.id_generator import IdGenerator
from casework.interfaces.unit_of_work import AbstractUnitOfWork
from casework.service_layer import commands

from .case_handlers import save_case
from .task_handlers import save_task

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ExampleDataLoadResult:
    """Outcome of loading the example data.

    Attributes:
        cases_loaded: Number of cases created.
        tasks_loaded: Number of tasks created.
        already_loaded: True when a case number was found to be taken. The
            load stops there: `cases_loaded` counts the cases created before
            the clash, and no tasks are added.
    """

    cases_loaded: int
    tasks_loaded: int
    already_loaded: bool = False


def load_example_data(
    cmd: commands.LoadExampleData,  # pylint: disable=unused-argument
    uow: AbstractUnitOfWork,
    id_generator: IdGenerator,
    example_data: ExampleDataSource,
) -> ExampleDataLoadResult:
    """Seed the store with the example cases and then their tasks.

    Both documents are read before anything is written. Loading twice is
    harmless: a case number clash during the case phase is taken to mean the
    data is already there, and the load stops without adding tasks. Cases
    created before the clash stay and are counted in the result.

    Raises:
        ExampleDataUnavailableError: If either document cannot be read.
        CaseNumberNotFoundError: If a task group names a case number that is
            not stored.
    """

    cases = example_data.cases()
    tasks_by_number = example_data.tasks_by_case_number()

    cases_loaded = 0
    for case in cases:
        try:
            save_case(commands.SaveCase(case), uow, id_generator)
        except DuplicateCaseNumberError as e:
            logger.info(
                "Example data already loaded (%s); stopping after %d new case(s)",
                e,
                cases_loaded,
            )
            return ExampleDataLoadResult(
                cases_loaded=cases_loaded, tasks_loaded=0, already_loaded=True
            )
        cases_loaded += 1

    tasks_loaded = 0
    for case_number, tasks in tasks_by_number.items():
        with uow:
            parent = uow.cases.get_by_number(case_number)
        if parent is None:
            raise CaseNumberNotFoundError(case_number)
        for task in tasks:
            save_task(
                commands.SaveTask(replace(task, parent_case=parent.id)),
                uow,
                id_generator,
            )
            tasks_loaded += 1

    logger.info("Loaded %d example cases and %d tasks", cases_loaded, tasks_loaded)
    return ExampleDataLoadResult(cases_loaded=cases_loaded, tasks_loaded=tasks_loaded)


def clear_example_data(
    cmd: commands.ClearExampleData,  # pylint: disable=unused-argument
    uow: AbstractUnitOfWork,
    example_data: ExampleDataSource,
) -> int:
    """Delete every case whose number is in the example set; return how many.

    Their tasks go with them. Cases with other numbers are left alone.
    """

    numbers = {case.case_number for case in example_data.cases()}
    deleted = 0
    with uow:
        for number in numbers:
            if (case := uow.cases.get_by_number(number)) is not None:
                uow.cases.delete(case.id)
                deleted += 1
        uow.commit()

    logger.info("Cleared %d example cases", deleted)
    return deleted


COMMAND_HANDLERS: dict[type, Callable[..., Any]] = {
    commands.LoadExampleData: load_example_data,
    commands.ClearExampleData: clear_example_data,
}
