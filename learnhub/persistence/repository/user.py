"""PostgreSQL implementation of User repository."""

from typing import List, Optional, Sequence

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from learnhub.domain.model import User
from learnhub.domain.repository import UserRepository
from learnhub.domain.value import UserId, Username, UserStat
from learnhub.persistence.mappers import row_to_user, user_to_dict
from learnhub.persistence.tables import users_table

STAT_COLUMNS = {
    UserStat.COMMENTS_COUNT: users_table.c.comments_count,
    UserStat.LIKES_GIVEN: users_table.c.likes_given,
    UserStat.POSTS_COUNT: users_table.c.posts_count,
}


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: User ID to look up

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by username.

        Args:
            username: Username to search for

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.username == username.root)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_active_by_usernames(self, usernames: Sequence[str]) -> List[User]:
        """Find active users by username."""
        if not usernames:
            return []
        stmt = (
            select(users_table)
            .where(users_table.c.username.in_(list(usernames)))
            .where(users_table.c.is_active.is_(True))
        )
        result = await self.session.execute(stmt)
        return [row_to_user(dict(row)) for row in result.mappings().all()]

    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Activity counters are never overwritten on update; they only move
        through ``increment_stat``.
        """
        user_dict = user_to_dict(user)
        existing = await self.find_by_id(user.id)

        if existing:
            for column in STAT_COLUMNS.values():
                user_dict.pop(column.name)
            stmt = (
                update(users_table)
                .where(users_table.c.id == user.id)
                .values(**user_dict)
            )
        else:
            stmt = users_table.insert().values(**user_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return await self.find_by_id(user.id) or user

    async def increment_stat(
        self, user_id: UserId, stat: UserStat, amount: int = 1
    ) -> None:
        """Atomically add to an activity counter."""
        column = STAT_COLUMNS[stat]
        stmt = (
            update(users_table)
            .where(users_table.c.id == user_id)
            .values({column: column + amount})
        )
        await self.session.execute(stmt)
        await self.session.flush()
