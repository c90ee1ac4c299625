"""SQLAlchemy Core repositories for cases and tasks.

Both repositories work on a single `Connection` supplied by the unit of work
and never commit on their own.
"""

from .case_repository import SqlAlchemyCaseRepository
from .task_repository import SqlAlchemyTaskRepository

__all__ = [
    "SqlAlchemyCaseRepository",
    "SqlAlchemyTaskRepository",
]
