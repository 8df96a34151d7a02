"""SQLAlchemy unit of work."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import AsyncSession

from learnhub.domain.repository import UnitOfWork


class SessionUnitOfWork(UnitOfWork):
    """Isolates work inside the request transaction with savepoints."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @asynccontextmanager
    async def isolated(self) -> AsyncIterator[None]:
        """Run the block inside a SAVEPOINT, rolled back if it raises."""
        async with self.session.begin_nested():
            yield
