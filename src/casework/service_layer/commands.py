"""Module defining Commands."""

from dataclasses import dataclass

from casework.interfaces.dtos import CaseDto, TaskDto


@dataclass(frozen=True)
class Command:
    """Base class for all commands."""


@dataclass(frozen=True)
class SaveCase(Command):
    """Command to create a case from its DTO. The DTO must not list tasks."""

    case: CaseDto


@dataclass(frozen=True)
class SaveCases(Command):
    """Command to create several cases, one transaction each, in order."""

    cases: tuple[CaseDto, ...]


@dataclass(frozen=True)
class SaveTask(Command):
    """Command to create a task under the case named by ``task.parent_case``."""

    task: TaskDto


@dataclass(frozen=True)
class SaveTasks(Command):
    """Command to create several tasks, one transaction each, in order."""

    tasks: tuple[TaskDto, ...]


@dataclass(frozen=True)
class DeleteCase(Command):
    """Command to delete a case and its tasks."""

    case_id: str


@dataclass(frozen=True)
class DeleteTask(Command):
    """Command to delete a single task."""

    task_id: str


@dataclass(frozen=True)
class UpdateCaseProperty(Command):
    """Command to set one case property, named by its external field name."""

    case_id: str
    property_name: str
    value: str


@dataclass(frozen=True)
class UpdateTaskProperty(Command):
    """Command to set one task property, named by its external field name."""

    task_id: str
    property_name: str
    value: str


@dataclass(frozen=True)
class LoadExampleData(Command):
    """Command to seed the store with the example cases and tasks."""


@dataclass(frozen=True)
class ClearExampleData(Command):
    """Command to delete the example cases (and so their tasks)."""
