"""User repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from learnhub.domain.model.user import User
from learnhub.domain.value import UserId, Username, UserStat


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by username.

        Args:
            username: The user's username

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_active_by_usernames(self, usernames: Sequence[str]) -> List[User]:
        """Find active users whose username is in the given list.

        Used to resolve @mentions. Unknown names are ignored.

        Args:
            usernames: Lower-case usernames

        Returns:
            Matching active users
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: The user to save

        Returns:
            The saved user
        """
        pass

    @abstractmethod
    async def increment_stat(
        self, user_id: UserId, stat: UserStat, amount: int = 1
    ) -> None:
        """Atomically add to one of the user's activity counters.

        Args:
            user_id: The user's unique identifier
            stat: Counter to change
            amount: Value to add
        """
        pass
