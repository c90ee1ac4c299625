"""The unit of work port.

A unit of work groups the case and task repositories over one transaction.
Leaving the ``with`` block rolls back whatever was not committed, so handlers
call `commit` explicitly after each successful write.
"""

from __future__ import annotations

import abc

from .repositories import CaseRepository, TaskRepository


class AbstractUnitOfWork(abc.ABC):
    cases: CaseRepository
    tasks: TaskRepository

    def __enter__(self) -> AbstractUnitOfWork:
        return self

    def __exit__(self, *args):
        self.rollback()

    @abc.abstractmethod
    def commit(self):
        """Make the writes since the last commit durable."""

    @abc.abstractmethod
    def rollback(self):
        """Discard the writes since the last commit."""
