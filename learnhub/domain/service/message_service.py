"""Direct message domain service."""

from uuid import uuid4

import logfire

from learnhub.domain.error import NotAuthorizedError, ValidationError
from learnhub.domain.event import EventBus, MessageSent
from learnhub.domain.model.common import utcnow
from learnhub.domain.model.message import Conversation, LastMessage, Message
from learnhub.domain.repository import ConversationRepository, MessageRepository
from learnhub.domain.value import ConversationId, IdentityStamp, MessageId, UserId

from .base import Service
from .content import sanitize_content

MAX_MESSAGE_LENGTH = 2000


class MessageService(Service):
    """Domain service for conversations and stamped messages."""

    def __init__(
        self,
        conversation_repository: ConversationRepository,
        message_repository: MessageRepository,
        event_bus: EventBus,
    ) -> None:
        """Initialize message service.

        Args:
            conversation_repository: Conversation repository
            message_repository: Message repository
            event_bus: Bus for best-effort side effects
        """
        self.conversation_repository = conversation_repository
        self.message_repository = message_repository
        self.event_bus = event_bus

    async def start_conversation(self, participant_ids: list[UserId]) -> Conversation:
        """Open a conversation between distinct users.

        Raises:
            ValidationError: If fewer than two distinct participants are given
        """
        participants = list(dict.fromkeys(participant_ids))
        if len(participants) < 2:
            raise ValidationError("A conversation needs at least two participants")
        with logfire.span(
            "message_service.start_conversation", participants=len(participants)
        ):
            conversation = Conversation(
                id=ConversationId(uuid4()), participant_ids=participants
            )
            saved = await self.conversation_repository.save(conversation)
            logfire.info("Conversation started", conversation_id=str(saved.id))
            return saved

    async def send_message(
        self,
        conversation_id: ConversationId,
        sender: IdentityStamp,
        content: str,
    ) -> Message:
        """Store a message and refresh the conversation's last-message snapshot.

        Args:
            conversation_id: Conversation ID
            sender: Stamp of the sending user
            content: Raw message text

        Returns:
            Stored message

        Raises:
            NotFoundError: If the conversation doesn't exist
            NotAuthorizedError: If the sender is not a participant
            ValidationError: If the content is empty or too long
        """
        with logfire.span(
            "message_service.send_message",
            conversation_id=str(conversation_id),
            sender_id=str(sender.user_id),
        ):
            conversation = await self.conversation_repository.find_by_id(
                conversation_id
            )
            if conversation is None:
                raise self.not_found("Conversation", conversation_id)
            if sender.user_id not in conversation.participant_ids:
                raise NotAuthorizedError(
                    "conversation",
                    str(conversation_id),
                    str(sender.user_id),
                    action="message",
                )

            message = Message(
                id=MessageId(uuid4()),
                conversation_id=conversation_id,
                sender=sender,
                content=sanitize_content(
                    content, MAX_MESSAGE_LENGTH, "Message content"
                ),
                created_at=utcnow(),
            )
            saved = await self.message_repository.save(message)
            await self.conversation_repository.set_last_message(
                conversation_id,
                LastMessage(
                    content=saved.content,
                    sender=sender,
                    created_at=saved.created_at,
                ),
            )
            logfire.info(
                "Message sent",
                message_id=str(saved.id),
                conversation_id=str(conversation_id),
            )

            recipients = [
                p for p in conversation.participant_ids if p != sender.user_id
            ]
            await self.event_bus.publish(
                MessageSent(message=saved, recipient_ids=recipients)
            )
            return saved

    async def get_messages(
        self, conversation_id: ConversationId, limit: int = 50, offset: int = 0
    ) -> list[Message]:
        """Messages of a conversation, newest first."""
        return await self.message_repository.find_by_conversation(
            conversation_id, limit=limit, offset=offset
        )
