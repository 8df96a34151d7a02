"""Unit tests for profile use cases."""

from uuid import UUID

import pytest

from learnhub.application.usecase.comment import CreateCommentRequest, CreateCommentUseCase
from learnhub.application.usecase.user import (
    GetUserProfileRequest,
    GetUserProfileUseCase,
    RemoveAvatarRequest,
    RemoveAvatarUseCase,
    UpdateUserProfileRequest,
    UpdateUserProfileUseCase,
)
from learnhub.domain.event import EventBus, ProfileFieldChanged
from learnhub.domain.repository import CommentRepository, PostRepository
from learnhub.domain.value import CommentId, Role, Username
from tests.factories import seed_post, seed_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestUpdateUserProfileUseCase:
    """Tests for UpdateUserProfileUseCase."""

    @pytest.mark.asyncio
    async def test_update_bio_only(self, unit_env):
        """Fields left out of the request keep their values."""
        # Arrange
        user = await seed_user(unit_env, "ada", avatar_url="https://cdn/ada.png")
        use_case = await unit_env.get(UpdateUserProfileUseCase)

        # Act
        response = await use_case.execute(
            UpdateUserProfileRequest(user_id=str(user.id), bio="I like proofs")
        )

        # Assert
        assert response.bio == "I like proofs"
        assert response.display_name == "Ada"
        assert response.avatar_url == "https://cdn/ada.png"

    @pytest.mark.asyncio
    async def test_display_name_change_refreshes_stamps(self, unit_env):
        """Stamps are rewritten when the deferred profile event is flushed."""
        # Arrange
        teacher = await seed_user(unit_env, "prof_lee", Role.TEACHER)
        post = await seed_post(unit_env, teacher)
        create_comment = await unit_env.get(CreateCommentUseCase)
        comment = (
            await create_comment.execute(
                CreateCommentRequest(
                    post_id=str(post.id), content="Welcome", author_id=str(teacher.id)
                )
            )
        ).comment
        use_case = await unit_env.get(UpdateUserProfileUseCase)
        event_bus = await unit_env.get(EventBus)
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)

        # Act
        await use_case.execute(
            UpdateUserProfileRequest(user_id=str(teacher.id), display_name="Dr. Lee")
        )
        before_flush = await post_repo.find_by_id(post.id)
        await event_bus.flush()

        # Assert
        assert before_flush.author.display_name == "Prof_Lee"
        assert event_bus.pending == []
        stored_post = await post_repo.find_by_id(post.id)
        stored_comment = await comment_repo.find_by_id(CommentId(UUID(comment.comment_id)))
        assert stored_post.author.display_name == "Dr. Lee"
        assert stored_comment.author.display_name == "Dr. Lee"

    @pytest.mark.asyncio
    async def test_none_display_name_is_ignored(self, unit_env):
        user = await seed_user(unit_env, "ada")
        use_case = await unit_env.get(UpdateUserProfileUseCase)

        response = await use_case.execute(
            UpdateUserProfileRequest(user_id=str(user.id), display_name=None)
        )

        assert response.display_name == "Ada"


class TestRemoveAvatarUseCase:
    """Tests for RemoveAvatarUseCase."""

    @pytest.mark.asyncio
    async def test_remove_avatar_clears_stamps(self, unit_env):
        # Arrange
        teacher = await seed_user(
            unit_env, "prof_lee", Role.TEACHER, avatar_url="https://cdn/lee.png"
        )
        post = await seed_post(unit_env, teacher)
        use_case = await unit_env.get(RemoveAvatarUseCase)
        event_bus = await unit_env.get(EventBus)

        # Act
        response = await use_case.execute(RemoveAvatarRequest(user_id=str(teacher.id)))
        await event_bus.flush()

        # Assert
        assert response.avatar_url is None
        post_repo = await unit_env.get(PostRepository)
        assert (await post_repo.find_by_id(post.id)).author.avatar_url is None


class TestGetUserProfileUseCase:
    """Tests for GetUserProfileUseCase."""

    @pytest.mark.asyncio
    async def test_profile_with_stats(self, unit_env):
        teacher = await seed_user(unit_env, "prof_lee", Role.TEACHER)
        post = await seed_post(unit_env, teacher)
        create_comment = await unit_env.get(CreateCommentUseCase)
        await create_comment.execute(
            CreateCommentRequest(
                post_id=str(post.id), content="Hi", author_id=str(teacher.id)
            )
        )
        use_case = await unit_env.get(GetUserProfileUseCase)

        profile = await use_case.execute(
            GetUserProfileRequest(username=Username("Prof_Lee"))
        )

        assert profile.username == "prof_lee"
        assert profile.role == Role.TEACHER
        assert profile.stats.comments_count == 1

    @pytest.mark.asyncio
    async def test_unknown_user_returns_none(self, unit_env):
        use_case = await unit_env.get(GetUserProfileUseCase)

        assert (
            await use_case.execute(GetUserProfileRequest(username=Username("nobody")))
            is None
        )


class TestProfileEventDelivery:
    """Profile changes are queued, not delivered inline."""

    @pytest.mark.asyncio
    async def test_stamp_patch_waits_for_flush(self, unit_env):
        # Arrange
        user = await seed_user(unit_env, "ada")
        use_case = await unit_env.get(UpdateUserProfileUseCase)
        event_bus = await unit_env.get(EventBus)

        # Act
        await use_case.execute(
            UpdateUserProfileRequest(user_id=str(user.id), display_name="Ada L.")
        )

        # Assert
        [event] = event_bus.pending
        assert isinstance(event, ProfileFieldChanged)
        assert event.patch.changes() == {"display_name": "Ada L."}

    @pytest.mark.asyncio
    async def test_bio_change_queues_nothing(self, unit_env):
        user = await seed_user(unit_env, "ada")
        use_case = await unit_env.get(UpdateUserProfileUseCase)
        event_bus = await unit_env.get(EventBus)

        await use_case.execute(
            UpdateUserProfileRequest(user_id=str(user.id), bio="Maths")
        )

        assert event_bus.pending == []
