"""Port for the store's atomic read-modify-write primitive."""

from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable
from typing import TypeVar

T = TypeVar("T")


class TransactionRunner(ABC):
    """Runs a unit of work atomically.

    Either every write made by ``work`` is committed or none is. A write
    conflict detected by the store is raised as TransactionConflictError
    after the rollback.
    """

    @abstractmethod
    async def run(self, work: Callable[[], Awaitable[T]]) -> T:
        ...
