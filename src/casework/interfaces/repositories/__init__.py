"""casework Repository Interface Package"""

from .case_repository import CaseRepository
from .errors import (
    CaseNumberAlreadyExistsError,
    ConstraintViolationError,
    RepositoryError,
    StoreUnavailableError,
)
from .task_repository import TaskRepository

__all__ = [
    "CaseNumberAlreadyExistsError",
    "CaseRepository",
    "ConstraintViolationError",
    "RepositoryError",
    "StoreUnavailableError",
    "TaskRepository",
]
