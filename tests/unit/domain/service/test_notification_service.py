"""Unit tests for NotificationService and NotificationEmitter."""

from uuid import uuid4

import pytest

from learnhub.domain.error import NotFoundError
from learnhub.domain.repository import NotificationRepository
from learnhub.domain.service import CommentService, NotificationService
from learnhub.domain.value import (
    NotificationId,
    NotificationType,
    ReferenceType,
    Role,
)
from tests.factories import seed_post, seed_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _notify(service: NotificationService, recipient, actor, content="Hello"):
    return await service.notify(
        recipient_id=recipient.id,
        type=NotificationType.COMMENT_REPLY,
        actor=actor.stamp(),
        reference_type=ReferenceType.COMMENT,
        reference_id=uuid4(),
        content=content,
    )


class TestNotificationService:
    """Tests for storing and reading notifications."""

    @pytest.mark.asyncio
    async def test_self_notification_is_suppressed(self, unit_env):
        notification_service = await unit_env.get(NotificationService)
        student = await seed_user(unit_env, "ada")

        result = await _notify(notification_service, student, student)

        assert result is None
        assert await notification_service.unread_count(student.id) == 0

    @pytest.mark.asyncio
    async def test_preview_is_truncated(self, unit_env):
        notification_service = await unit_env.get(NotificationService)
        student = await seed_user(unit_env, "ada")
        teacher = await seed_user(unit_env, "prof_lee", Role.TEACHER)

        notification = await _notify(
            notification_service, student, teacher, content="x" * 250
        )

        assert len(notification.content) == 100
        assert notification.actor == teacher.stamp()

    @pytest.mark.asyncio
    async def test_inbox_newest_first_with_counts(self, unit_env):
        # Arrange
        notification_service = await unit_env.get(NotificationService)
        student = await seed_user(unit_env, "ada")
        teacher = await seed_user(unit_env, "prof_lee", Role.TEACHER)
        first = await _notify(notification_service, student, teacher, "first")
        second = await _notify(notification_service, student, teacher, "second")

        # Act
        notifications, total = await notification_service.list_notifications(
            student.id
        )

        # Assert
        assert total == 2
        assert [n.id for n in notifications] == [second.id, first.id]
        assert await notification_service.unread_count(student.id) == 2

    @pytest.mark.asyncio
    async def test_mark_read_and_mark_all_read(self, unit_env):
        # Arrange
        notification_service = await unit_env.get(NotificationService)
        student = await seed_user(unit_env, "ada")
        teacher = await seed_user(unit_env, "prof_lee", Role.TEACHER)
        first = await _notify(notification_service, student, teacher)
        await _notify(notification_service, student, teacher)
        await _notify(notification_service, student, teacher)

        # Act
        read = await notification_service.mark_read(first.id, student.id)
        modified = await notification_service.mark_all_read(student.id)

        # Assert
        assert read.is_read
        assert read.read_at is not None
        assert modified == 2
        assert await notification_service.unread_count(student.id) == 0
        assert await notification_service.mark_all_read(student.id) == 0

    @pytest.mark.asyncio
    async def test_cannot_touch_someone_elses_notification(self, unit_env):
        notification_service = await unit_env.get(NotificationService)
        student = await seed_user(unit_env, "ada")
        teacher = await seed_user(unit_env, "prof_lee", Role.TEACHER)
        notification = await _notify(notification_service, student, teacher)

        with pytest.raises(NotFoundError):
            await notification_service.mark_read(notification.id, teacher.id)
        with pytest.raises(NotFoundError):
            await notification_service.delete_notification(notification.id, teacher.id)

    @pytest.mark.asyncio
    async def test_delete_notification(self, unit_env):
        notification_service = await unit_env.get(NotificationService)
        student = await seed_user(unit_env, "ada")
        teacher = await seed_user(unit_env, "prof_lee", Role.TEACHER)
        notification = await _notify(notification_service, student, teacher)

        await notification_service.delete_notification(notification.id, student.id)

        _, total = await notification_service.list_notifications(student.id)
        assert total == 0
        with pytest.raises(NotFoundError):
            await notification_service.delete_notification(
                NotificationId(uuid4()), student.id
            )


class TestNotificationEmitter:
    """Tests for notifications created from comment events."""

    @pytest.mark.asyncio
    async def test_reply_notifies_parent_author(self, unit_env):
        # Arrange
        comment_service = await unit_env.get(CommentService)
        notification_repo = await unit_env.get(NotificationRepository)
        teacher = await seed_user(unit_env, "prof_lee", Role.TEACHER)
        student = await seed_user(unit_env, "ada")
        post = await seed_post(unit_env, teacher)
        root = await comment_service.create_comment(post.id, student.stamp(), "Q")

        # Act
        reply = await comment_service.create_comment(
            post.id, teacher.stamp(), "Good question", parent_id=root.id
        )

        # Assert
        inbox = await notification_repo.find_by_recipient(student.id)
        assert len(inbox) == 1
        assert inbox[0].type == NotificationType.COMMENT_REPLY
        assert inbox[0].reference.id == reply.id
        assert inbox[0].reference.post_id == post.id

    @pytest.mark.asyncio
    async def test_replying_to_self_does_not_notify(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        notification_repo = await unit_env.get(NotificationRepository)
        teacher = await seed_user(unit_env, "prof_lee", Role.TEACHER)
        student = await seed_user(unit_env, "ada")
        post = await seed_post(unit_env, teacher)
        root = await comment_service.create_comment(post.id, student.stamp(), "Q")

        await comment_service.create_comment(
            post.id, student.stamp(), "Never mind", parent_id=root.id
        )

        assert await notification_repo.find_by_recipient(student.id) == []

    @pytest.mark.asyncio
    async def test_mentions_notify_known_active_users(self, unit_env):
        """Unknown usernames and the author's own mention are skipped."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        notification_repo = await unit_env.get(NotificationRepository)
        teacher = await seed_user(unit_env, "prof_lee", Role.TEACHER)
        student = await seed_user(unit_env, "ada")
        grace = await seed_user(unit_env, "grace")
        post = await seed_post(unit_env, teacher)

        # Act
        await comment_service.create_comment(
            post.id, student.stamp(), "@grace @nobody @ada @Prof_Lee see this"
        )

        # Assert
        grace_inbox = await notification_repo.find_by_recipient(grace.id)
        teacher_inbox = await notification_repo.find_by_recipient(teacher.id)
        assert [n.type for n in grace_inbox] == [NotificationType.MENTION]
        assert [n.type for n in teacher_inbox] == [NotificationType.MENTION]
        assert await notification_repo.find_by_recipient(student.id) == []

    @pytest.mark.asyncio
    async def test_like_and_pin_notify_comment_author(self, unit_env):
        # Arrange
        comment_service = await unit_env.get(CommentService)
        notification_repo = await unit_env.get(NotificationRepository)
        teacher = await seed_user(unit_env, "prof_lee", Role.TEACHER)
        student = await seed_user(unit_env, "ada")
        post = await seed_post(unit_env, teacher)
        comment = await comment_service.create_comment(post.id, student.stamp(), "Q")

        # Act
        await comment_service.like_comment(comment.id, teacher.stamp())
        await comment_service.like_comment(comment.id, teacher.stamp())
        await comment_service.pin_comment(comment.id, teacher.stamp())

        # Assert
        inbox = await notification_repo.find_by_recipient(student.id)
        assert sorted(n.type.value for n in inbox) == [
            NotificationType.COMMENT_LIKE.value,
            NotificationType.PINNED_COMMENT.value,
        ]

    @pytest.mark.asyncio
    async def test_failed_notification_does_not_fail_comment(self, unit_env):
        # Arrange
        comment_service = await unit_env.get(CommentService)
        notification_repo = await unit_env.get(NotificationRepository)
        teacher = await seed_user(unit_env, "prof_lee", Role.TEACHER)
        student = await seed_user(unit_env, "ada")
        post = await seed_post(unit_env, teacher)
        root = await comment_service.create_comment(post.id, student.stamp(), "Q")

        async def broken(notification):
            raise RuntimeError("inbox unavailable")

        notification_repo.save = broken

        # Act
        reply = await comment_service.create_comment(
            post.id, teacher.stamp(), "A", parent_id=root.id
        )

        # Assert
        assert (await comment_service.get_comment(reply.id)).content == "A"
