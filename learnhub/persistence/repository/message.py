"""PostgreSQL implementations of Conversation and Message repositories."""

from typing import List, Optional

from sqlalchemy import desc, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from learnhub.domain.model import Conversation, LastMessage, Message
from learnhub.domain.model.common import utcnow
from learnhub.domain.repository import ConversationRepository, MessageRepository
from learnhub.domain.value import ConversationId, StampPatch, UserId
from learnhub.persistence.mappers import (
    conversation_to_dict,
    last_message_to_dict,
    message_to_dict,
    row_to_conversation,
    row_to_message,
    stamp_patch_to_dict,
)
from learnhub.persistence.tables import conversations_table, messages_table


class PostgresConversationRepository(ConversationRepository):
    """PostgreSQL implementation of ConversationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(
        self, conversation_id: ConversationId
    ) -> Optional[Conversation]:
        """Find a conversation by ID."""
        stmt = select(conversations_table).where(
            conversations_table.c.id == conversation_id
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_conversation(dict(row)) if row else None

    async def save(self, conversation: Conversation) -> Conversation:
        """Save a conversation (create or update)."""
        values = conversation_to_dict(conversation)
        existing = await self.find_by_id(conversation.id)
        if existing:
            stmt = (
                update(conversations_table)
                .where(conversations_table.c.id == conversation.id)
                .values(**values)
            )
        else:
            stmt = conversations_table.insert().values(**values)
        await self.session.execute(stmt)
        await self.session.flush()
        return conversation

    async def set_last_message(
        self, conversation_id: ConversationId, last_message: LastMessage
    ) -> None:
        """Replace the last-message snapshot."""
        stmt = (
            update(conversations_table)
            .where(conversations_table.c.id == conversation_id)
            .values(**last_message_to_dict(last_message), updated_at=utcnow())
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def update_last_message_sender_stamp(
        self, user_id: UserId, patch: StampPatch
    ) -> int:
        """Apply a profile change to last-message snapshots sent by the user."""
        if patch.is_empty():
            return 0
        stmt = (
            update(conversations_table)
            .where(conversations_table.c.last_message_sender_id == user_id)
            .values(**stamp_patch_to_dict(patch, "last_message_sender"))
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount


class PostgresMessageRepository(MessageRepository):
    """PostgreSQL implementation of MessageRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def save(self, message: Message) -> Message:
        """Insert a message."""
        stmt = messages_table.insert().values(**message_to_dict(message))
        await self.session.execute(stmt)
        await self.session.flush()
        return message

    async def find_by_conversation(
        self, conversation_id: ConversationId, limit: int = 50, offset: int = 0
    ) -> List[Message]:
        """Find non-deleted messages, newest first."""
        stmt = (
            select(messages_table)
            .where(messages_table.c.conversation_id == conversation_id)
            .where(messages_table.c.deleted_at.is_(None))
            .order_by(desc(messages_table.c.created_at))
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_message(dict(row)) for row in result.mappings().all()]

    async def update_sender_stamp(self, user_id: UserId, patch: StampPatch) -> int:
        """Apply a profile change to every message sent by the user."""
        if patch.is_empty():
            return 0
        stmt = (
            update(messages_table)
            .where(messages_table.c.sender_id == user_id)
            .values(**stamp_patch_to_dict(patch, "sender"))
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
