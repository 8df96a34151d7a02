"""In-memory unit of work for testing."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from learnhub.domain.repository.unit_of_work import UnitOfWork


class InMemoryUnitOfWork(UnitOfWork):
    """Runs isolated blocks as-is; in-memory writes are not transactional."""

    @asynccontextmanager
    async def isolated(self) -> AsyncIterator[None]:
        yield
