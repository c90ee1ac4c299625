"""In-memory case and task repositories.

Suitable for unit tests and prototyping. Both repositories read and write one
shared `InMemoryStoreData`, so referential checks and the case-to-task cascade
behave like the relational store.
"""

from .case_repository import InMemoryCaseRepository
from .store import InMemoryStoreData
from .task_repository import InMemoryTaskRepository

__all__ = ["InMemoryCaseRepository", "InMemoryStoreData", "InMemoryTaskRepository"]
