"""Async engine and sessions for PostgreSQL."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from learnhub.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Engine for ``settings.database.url`` (an ``asyncpg`` URL).

    SQL is echoed when ``debug`` is on.
    """
    database = settings.database
    return create_async_engine(
        database.url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=database.pool_size,
        max_overflow=database.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory used once per request.

    Repositories flush their own statements; the request commits.
    Objects stay readable after commit because responses are built from
    domain models after the session closes.
    """
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
