"""In-memory user repository for testing."""

from typing import Optional, Sequence

from learnhub.domain.model.user import User
from learnhub.domain.repository.user import UserRepository
from learnhub.domain.value import UserId, Username, UserStat


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by username."""
        for user in self._users.values():
            if user.username == username:
                return user
        return None

    async def find_active_by_usernames(self, usernames: Sequence[str]) -> list[User]:
        """Find active users by username."""
        wanted = set(usernames)
        return [
            u
            for u in self._users.values()
            if u.username.root in wanted and u.is_active
        ]

    async def save(self, user: User) -> User:
        """Save or update a user, keeping the stored activity counters."""
        existing = self._users.get(user.id)
        if existing:
            user = user.model_copy(update={"stats": existing.stats})
        self._users[user.id] = user
        return user

    async def increment_stat(
        self, user_id: UserId, stat: UserStat, amount: int = 1
    ) -> None:
        """Add to an activity counter."""
        user = self._users.get(user_id)
        if user:
            current = getattr(user.stats, stat.value)
            stats = user.stats.model_copy(update={stat.value: current + amount})
            self._users[user_id] = user.model_copy(update={"stats": stats})
