"""Unit tests for MessageService."""

from uuid import uuid4

import pytest

from learnhub.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from learnhub.domain.repository import ConversationRepository, NotificationRepository
from learnhub.domain.service import MessageService
from learnhub.domain.value import ConversationId, NotificationType, ReferenceType
from tests.factories import seed_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestMessageService:
    """Tests for conversations and messages."""

    @pytest.mark.asyncio
    async def test_send_message_updates_snapshot_and_notifies(self, unit_env):
        # Arrange
        message_service = await unit_env.get(MessageService)
        conversation_repo = await unit_env.get(ConversationRepository)
        notification_repo = await unit_env.get(NotificationRepository)
        ada = await seed_user(unit_env, "ada")
        grace = await seed_user(unit_env, "grace")
        conversation = await message_service.start_conversation([ada.id, grace.id])

        # Act
        message = await message_service.send_message(
            conversation.id, ada.stamp(), "<i>Study group</i> tonight?"
        )

        # Assert
        assert message.content == "Study group tonight?"
        stored = await conversation_repo.find_by_id(conversation.id)
        assert stored.last_message.content == message.content
        assert stored.last_message.sender == ada.stamp()

        inbox = await notification_repo.find_by_recipient(grace.id)
        assert len(inbox) == 1
        assert inbox[0].type == NotificationType.DIRECT_MESSAGE
        assert inbox[0].reference.type == ReferenceType.MESSAGE
        assert await notification_repo.find_by_recipient(ada.id) == []

    @pytest.mark.asyncio
    async def test_messages_newest_first(self, unit_env):
        message_service = await unit_env.get(MessageService)
        ada = await seed_user(unit_env, "ada")
        grace = await seed_user(unit_env, "grace")
        conversation = await message_service.start_conversation([ada.id, grace.id])
        first = await message_service.send_message(conversation.id, ada.stamp(), "1")
        second = await message_service.send_message(conversation.id, grace.stamp(), "2")

        messages = await message_service.get_messages(conversation.id)

        assert [m.id for m in messages] == [second.id, first.id]

    @pytest.mark.asyncio
    async def test_conversation_needs_two_people(self, unit_env):
        message_service = await unit_env.get(MessageService)
        ada = await seed_user(unit_env, "ada")

        with pytest.raises(ValidationError):
            await message_service.start_conversation([ada.id, ada.id])

    @pytest.mark.asyncio
    async def test_outsider_cannot_send(self, unit_env):
        message_service = await unit_env.get(MessageService)
        ada = await seed_user(unit_env, "ada")
        grace = await seed_user(unit_env, "grace")
        mallory = await seed_user(unit_env, "mallory")
        conversation = await message_service.start_conversation([ada.id, grace.id])

        with pytest.raises(NotAuthorizedError):
            await message_service.send_message(conversation.id, mallory.stamp(), "hi")

    @pytest.mark.asyncio
    async def test_unknown_conversation(self, unit_env):
        message_service = await unit_env.get(MessageService)
        ada = await seed_user(unit_env, "ada")

        with pytest.raises(NotFoundError):
            await message_service.send_message(
                ConversationId(uuid4()), ada.stamp(), "hi"
            )
