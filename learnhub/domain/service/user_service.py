"""User domain service."""

from typing import Any

import logfire

from learnhub.domain.error import NotFoundError
from learnhub.domain.model import User
from learnhub.domain.model.common import utcnow
from learnhub.domain.repository import UserRepository
from learnhub.domain.value import UserId, Username, UserStat

from .base import Service

PROFILE_FIELDS = frozenset({"display_name", "bio", "avatar_url"})


class UserService(Service):
    """Domain service for user operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                raise self.not_found("User", user_id)
            logfire.info(
                "User found", user_id=str(user_id), username=user.username.root
            )
            return user

    async def get_active_by_id(self, user_id: UserId) -> User:
        """Get a user who is allowed to act.

        Raises:
            NotFoundError: If the user doesn't exist or is deactivated
        """
        user = await self.get_by_id(user_id)
        if not user.is_active:
            logfire.warn("Inactive user attempted an action", user_id=str(user_id))
            raise NotFoundError("User", str(user_id))
        return user

    async def get_user_by_username(self, username: Username) -> User | None:
        """Get user by username.

        Args:
            username: Username

        Returns:
            User if found, None otherwise
        """
        with logfire.span(
            "user_service.get_user_by_username", username=username.root
        ):
            user = await self.user_repository.find_by_username(username)
            if user:
                logfire.info("User found", username=username.root, user_id=str(user.id))
            else:
                logfire.warn("User not found", username=username.root)
            return user

    async def find_mentioned_users(
        self, usernames: list[str], exclude: UserId | None = None
    ) -> list[User]:
        """Resolve mentioned usernames to active users.

        Args:
            usernames: Lower-case usernames, unknown names are ignored
            exclude: User to leave out (usually the author)

        Returns:
            Active users matching the names
        """
        if not usernames:
            return []
        users = await self.user_repository.find_active_by_usernames(usernames)
        return [u for u in users if u.id != exclude]

    async def increment_stat(
        self, user_id: UserId, stat: UserStat, amount: int = 1
    ) -> None:
        """Atomically add to one of the user's activity counters.

        Args:
            user_id: User ID
            stat: Counter to change
            amount: Value to add
        """
        with logfire.span(
            "user_service.increment_stat", user_id=str(user_id), stat=stat.value
        ):
            await self.user_repository.increment_stat(user_id, stat, amount)
            logfire.info(
                "User stat incremented",
                user_id=str(user_id),
                stat=stat.value,
                amount=amount,
            )

    async def update_profile(self, user_id: UserId, changes: dict[str, Any]) -> User:
        """Apply profile changes and save the user.

        Only ``display_name``, ``bio`` and ``avatar_url`` can be changed.
        Keys missing from ``changes`` are left alone; an explicit ``None``
        avatar removes it.

        Args:
            user_id: User ID
            changes: Field names mapped to their new values

        Returns:
            Updated user

        Raises:
            NotFoundError: If user not found
            ValueError: If an unknown field is passed
            pydantic.ValidationError: If a new value is invalid
        """
        with logfire.span(
            "user_service.update_profile",
            user_id=str(user_id),
            fields=sorted(changes),
        ):
            unknown = set(changes) - PROFILE_FIELDS
            if unknown:
                raise ValueError(f"Cannot update fields: {sorted(unknown)}")

            user = await self.get_by_id(user_id)
            updated = User.model_validate(
                {**user.model_dump(), **changes, "updated_at": utcnow()}
            )
            saved = await self.user_repository.save(updated)
            logfire.info(
                "User profile updated",
                user_id=str(user_id),
                fields=sorted(changes),
            )
            return saved
