"""Isolation boundary for best-effort side effects."""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager


class UnitOfWork(ABC):
    """Lets a side effect fail without spoiling the surrounding request.

    Work done inside ``isolated()`` is rolled back on its own when it
    raises, leaving earlier writes of the request intact.
    """

    @abstractmethod
    def isolated(self) -> AbstractAsyncContextManager[None]:
        """Open an isolation scope (a savepoint in SQL databases)."""
        pass
