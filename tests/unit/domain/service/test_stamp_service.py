"""Unit tests for identity stamp fan-out."""

import pytest

from learnhub.domain.event import EventBus, ProfileFieldChanged
from learnhub.domain.repository import (
    CommentRepository,
    ConversationRepository,
    MessageRepository,
    NotificationRepository,
    PostRepository,
)
from learnhub.domain.service import (
    CommentService,
    IdentityStampProjector,
    MessageService,
)
from learnhub.domain.value import Role, StampPatch
from tests.factories import seed_post, seed_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestIdentityStampProjector:
    """Tests for refreshing stamps after a profile change."""

    @pytest.mark.asyncio
    async def test_profile_change_reaches_every_collection(self, unit_env):
        """Posts, comments, messages, conversations and notifications all update."""
        # Arrange
        event_bus = await unit_env.get(EventBus)
        comment_service = await unit_env.get(CommentService)
        message_service = await unit_env.get(MessageService)
        teacher = await seed_user(unit_env, "prof_lee", Role.TEACHER)
        student = await seed_user(unit_env, "ada")
        post = await seed_post(unit_env, teacher)

        root = await comment_service.create_comment(post.id, student.stamp(), "Q")
        await comment_service.create_comment(
            post.id, teacher.stamp(), "A", parent_id=root.id
        )
        conversation = await message_service.start_conversation([teacher.id, student.id])
        await message_service.send_message(conversation.id, teacher.stamp(), "See me")

        patch = StampPatch(display_name="Professor Lee", avatar_url="https://cdn/lee.png")

        # Act
        await event_bus.publish(ProfileFieldChanged(user_id=teacher.id, patch=patch))

        # Assert
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        message_repo = await unit_env.get(MessageRepository)
        conversation_repo = await unit_env.get(ConversationRepository)
        notification_repo = await unit_env.get(NotificationRepository)

        stored_post = await post_repo.find_by_id(post.id)
        assert stored_post.author.display_name == "Professor Lee"

        replies = await comment_repo.find_replies(root.id)
        assert replies[0].author.display_name == "Professor Lee"
        assert replies[0].author.avatar_url == "https://cdn/lee.png"
        # Other authors are untouched
        assert (await comment_repo.find_by_id(root.id)).author.display_name == "Ada"

        messages = await message_repo.find_by_conversation(conversation.id)
        assert messages[0].sender.display_name == "Professor Lee"
        stored_conversation = await conversation_repo.find_by_id(conversation.id)
        assert stored_conversation.last_message.sender.display_name == "Professor Lee"

        inbox = await notification_repo.find_by_recipient(student.id)
        assert inbox
        assert all(n.actor.display_name == "Professor Lee" for n in inbox)

    @pytest.mark.asyncio
    async def test_updaters_are_idempotent(self, unit_env):
        projector = await unit_env.get(IdentityStampProjector)
        teacher = await seed_user(unit_env, "prof_lee", Role.TEACHER)
        post = await seed_post(unit_env, teacher)
        event = ProfileFieldChanged(
            user_id=teacher.id, patch=StampPatch(display_name="Lee")
        )

        await projector.update_posts(event)
        await projector.update_posts(event)

        post_repo = await unit_env.get(PostRepository)
        assert (await post_repo.find_by_id(post.id)).author.display_name == "Lee"

    @pytest.mark.asyncio
    async def test_one_failing_updater_leaves_others(self, unit_env):
        """A broken collection does not stop the remaining updaters."""
        # Arrange
        event_bus = await unit_env.get(EventBus)
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        teacher = await seed_user(unit_env, "prof_lee", Role.TEACHER)
        post = await seed_post(unit_env, teacher)
        comment = await comment_service.create_comment(post.id, teacher.stamp(), "Hi")

        async def broken(user_id, patch):
            raise RuntimeError("posts table locked")

        post_repo = await unit_env.get(PostRepository)
        post_repo.update_author_stamp = broken

        # Act
        await event_bus.publish(
            ProfileFieldChanged(user_id=teacher.id, patch=StampPatch(display_name="Lee"))
        )

        # Assert
        assert (await comment_repo.find_by_id(comment.id)).author.display_name == "Lee"
        assert (await post_repo.find_by_id(post.id)).author.display_name == "Prof_Lee"
