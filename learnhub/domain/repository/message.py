"""Message and conversation repository interfaces."""

from abc import ABC, abstractmethod
from typing import List, Optional

from learnhub.domain.model.message import Conversation, LastMessage, Message
from learnhub.domain.value import ConversationId, StampPatch, UserId


class ConversationRepository(ABC):
    """Repository for Conversation entity."""

    @abstractmethod
    async def find_by_id(
        self, conversation_id: ConversationId
    ) -> Optional[Conversation]:
        """Find a conversation by ID."""
        pass

    @abstractmethod
    async def save(self, conversation: Conversation) -> Conversation:
        """Save a conversation (create or update)."""
        pass

    @abstractmethod
    async def set_last_message(
        self, conversation_id: ConversationId, last_message: LastMessage
    ) -> None:
        """Replace the last-message snapshot of a conversation."""
        pass

    @abstractmethod
    async def update_last_message_sender_stamp(
        self, user_id: UserId, patch: StampPatch
    ) -> int:
        """Apply a profile change to last-message snapshots sent by a user.

        Returns:
            Number of conversations updated
        """
        pass


class MessageRepository(ABC):
    """Repository for Message entity."""

    @abstractmethod
    async def save(self, message: Message) -> Message:
        """Insert a message."""
        pass

    @abstractmethod
    async def find_by_conversation(
        self, conversation_id: ConversationId, limit: int = 50, offset: int = 0
    ) -> List[Message]:
        """Find non-deleted messages of a conversation, newest first."""
        pass

    @abstractmethod
    async def update_sender_stamp(self, user_id: UserId, patch: StampPatch) -> int:
        """Apply a profile change to every message sent by a user.

        Returns:
            Number of messages updated
        """
        pass
