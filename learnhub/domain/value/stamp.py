"""Identity stamps.

A stamp is a read-optimized copy of a user's public identity, embedded in
posts, comments, messages and notifications at write time. The user record
stays the source of truth; stamps are refreshed by the fan-out projector.
"""

from typing import Any

from pydantic import Field

from learnhub.domain.value.common import ValueObject
from learnhub.domain.value.identifiers import UserId
from learnhub.domain.value.types import Role


class IdentityStamp(ValueObject):
    """Snapshot of a user embedded in another entity."""

    user_id: UserId
    username: str
    display_name: str
    avatar_url: str | None = None
    role: Role = Role.STUDENT


class StampPatch(ValueObject):
    """Stamp fields changed by a profile edit.

    Only fields passed explicitly are part of the patch, so
    ``StampPatch(avatar_url=None)`` means "avatar removed" while
    ``StampPatch(display_name="Ada")`` leaves the avatar alone.
    """

    display_name: str | None = Field(default=None, min_length=1, max_length=50)
    avatar_url: str | None = None

    def changes(self) -> dict[str, Any]:
        """Explicitly set fields and their new values."""
        return self.model_dump(include=self.model_fields_set)

    def is_empty(self) -> bool:
        """Whether the patch touches nothing."""
        return not self.model_fields_set

    def apply(self, stamp: IdentityStamp) -> IdentityStamp:
        """Return ``stamp`` with the patched fields replaced."""
        return stamp.model_copy(update=self.changes())

    @classmethod
    def between(cls, before: IdentityStamp, after: IdentityStamp) -> "StampPatch":
        """Patch holding only the stamp fields that differ between two stamps."""
        changed = {
            field: getattr(after, field)
            for field in ("display_name", "avatar_url")
            if getattr(before, field) != getattr(after, field)
        }
        return cls(**changed)
