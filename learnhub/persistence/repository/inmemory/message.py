"""In-memory conversation and message repositories for testing."""

from typing import Optional

from learnhub.domain.model.common import utcnow
from learnhub.domain.model.message import Conversation, LastMessage, Message
from learnhub.domain.repository.message import (
    ConversationRepository,
    MessageRepository,
)
from learnhub.domain.value import ConversationId, MessageId, StampPatch, UserId


class InMemoryConversationRepository(ConversationRepository):
    """In-memory implementation of ConversationRepository for testing."""

    def __init__(self) -> None:
        self._conversations: dict[ConversationId, Conversation] = {}

    async def find_by_id(
        self, conversation_id: ConversationId
    ) -> Optional[Conversation]:
        """Find a conversation by ID."""
        return self._conversations.get(conversation_id)

    async def save(self, conversation: Conversation) -> Conversation:
        """Save or update a conversation."""
        self._conversations[conversation.id] = conversation
        return conversation

    async def set_last_message(
        self, conversation_id: ConversationId, last_message: LastMessage
    ) -> None:
        """Replace the last-message snapshot."""
        conversation = self._conversations.get(conversation_id)
        if conversation:
            self._conversations[conversation_id] = conversation.model_copy(
                update={"last_message": last_message, "updated_at": utcnow()}
            )

    async def update_last_message_sender_stamp(
        self, user_id: UserId, patch: StampPatch
    ) -> int:
        """Apply a profile change to last-message snapshots sent by the user."""
        if patch.is_empty():
            return 0
        updated = 0
        for conversation in list(self._conversations.values()):
            last = conversation.last_message
            if last and last.sender.user_id == user_id:
                last = last.model_copy(update={"sender": patch.apply(last.sender)})
                self._conversations[conversation.id] = conversation.model_copy(
                    update={"last_message": last}
                )
                updated += 1
        return updated


class InMemoryMessageRepository(MessageRepository):
    """In-memory implementation of MessageRepository for testing."""

    def __init__(self) -> None:
        self._messages: dict[MessageId, Message] = {}

    async def save(self, message: Message) -> Message:
        """Save a message."""
        self._messages[message.id] = message
        return message

    async def find_by_conversation(
        self, conversation_id: ConversationId, limit: int = 50, offset: int = 0
    ) -> list[Message]:
        """Find non-deleted messages, newest first."""
        messages = sorted(
            (
                m
                for m in self._messages.values()
                if m.conversation_id == conversation_id and m.deleted_at is None
            ),
            key=lambda m: m.created_at,
            reverse=True,
        )
        return messages[offset : offset + limit]

    async def update_sender_stamp(self, user_id: UserId, patch: StampPatch) -> int:
        """Apply a profile change to every message sent by the user."""
        if patch.is_empty():
            return 0
        updated = 0
        for message in list(self._messages.values()):
            if message.sender.user_id == user_id:
                self._messages[message.id] = message.model_copy(
                    update={"sender": patch.apply(message.sender)}
                )
                updated += 1
        return updated
