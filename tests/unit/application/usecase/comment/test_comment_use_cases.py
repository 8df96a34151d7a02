"""Unit tests for comment use cases."""

from datetime import timedelta
from uuid import UUID, uuid4

import pytest

from learnhub.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    GetCommentRequest,
    GetCommentUseCase,
    GetCommentsRequest,
    GetCommentsUseCase,
    GetRepliesRequest,
    GetRepliesUseCase,
    LikeCommentRequest,
    LikeCommentUseCase,
    UnlikeCommentUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from learnhub.domain.error import EditWindowExpiredError, NotFoundError
from learnhub.domain.model.common import utcnow
from learnhub.domain.repository import CommentRepository
from learnhub.domain.value import CommentId, CommentSort, Role
from tests.factories import seed_post, seed_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _comment(env, post, author, content="Question", parent_id=None):
    use_case = await env.get(CreateCommentUseCase)
    response = await use_case.execute(
        CreateCommentRequest(
            post_id=str(post.id),
            content=content,
            author_id=str(author.id),
            parent_id=parent_id,
        )
    )
    return response.comment


class TestCreateCommentUseCase:
    """Tests for CreateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_comment_carries_current_author_stamp(self, unit_env):
        # Arrange
        teacher = await seed_user(unit_env, "prof_lee", Role.TEACHER)
        student = await seed_user(
            unit_env, "ada", display_name="Ada L.", avatar_url="https://cdn/ada.png"
        )
        post = await seed_post(unit_env, teacher)

        # Act
        comment = await _comment(unit_env, post, student)

        # Assert
        assert comment.author.user_id == str(student.id)
        assert comment.author.display_name == "Ada L."
        assert comment.author.avatar_url == "https://cdn/ada.png"
        assert comment.author.role == Role.STUDENT
        assert comment.root_id == comment.comment_id
        assert comment.path == comment.comment_id
        assert not comment.is_liked

    @pytest.mark.asyncio
    async def test_reply_response(self, unit_env):
        teacher = await seed_user(unit_env, "prof_lee", Role.TEACHER)
        student = await seed_user(unit_env, "ada")
        post = await seed_post(unit_env, teacher)
        root = await _comment(unit_env, post, student)

        reply = await _comment(
            unit_env, post, teacher, "Answer", parent_id=root.comment_id
        )

        assert reply.parent_id == root.comment_id
        assert reply.depth == 1
        assert reply.path == f"{root.comment_id}/{reply.comment_id}"

    @pytest.mark.asyncio
    async def test_malformed_post_id_raises_value_error(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)
        student = await seed_user(unit_env, "ada")

        with pytest.raises(ValueError):
            await use_case.execute(
                CreateCommentRequest(
                    post_id="not-a-uuid", content="Hi", author_id=str(student.id)
                )
            )

    @pytest.mark.asyncio
    async def test_unknown_author_raises_not_found(self, unit_env):
        teacher = await seed_user(unit_env, "prof_lee", Role.TEACHER)
        post = await seed_post(unit_env, teacher)
        use_case = await unit_env.get(CreateCommentUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                CreateCommentRequest(
                    post_id=str(post.id), content="Hi", author_id=str(uuid4())
                )
            )


class TestUpdateCommentUseCase:
    """Tests for UpdateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_edit_window_uses_stored_role(self, unit_env):
        """The editor's role comes from their user record."""
        # Arrange
        teacher = await seed_user(unit_env, "prof_lee", Role.TEACHER)
        student = await seed_user(unit_env, "ada")
        post = await seed_post(unit_env, teacher)
        student_comment = await _comment(unit_env, post, student)
        teacher_comment = await _comment(unit_env, post, teacher)

        comment_repo = await unit_env.get(CommentRepository)
        for view in (student_comment, teacher_comment):
            stored = await comment_repo.find_by_id(CommentId(UUID(view.comment_id)))
            await comment_repo.save(
                stored.model_copy(
                    update={"created_at": utcnow() - timedelta(minutes=16)}
                )
            )
        use_case = await unit_env.get(UpdateCommentUseCase)

        # Act
        response = await use_case.execute(
            UpdateCommentRequest(
                comment_id=teacher_comment.comment_id,
                user_id=str(teacher.id),
                content="Updated",
            )
        )

        # Assert
        assert response.comment.content == "Updated"
        assert response.comment.is_edited
        with pytest.raises(EditWindowExpiredError):
            await use_case.execute(
                UpdateCommentRequest(
                    comment_id=student_comment.comment_id,
                    user_id=str(student.id),
                    content="Updated",
                )
            )


class TestListingUseCases:
    """Tests for GetCommentsUseCase, GetRepliesUseCase and GetCommentUseCase."""

    @pytest.mark.asyncio
    async def test_is_liked_reflects_viewer(self, unit_env):
        # Arrange
        teacher = await seed_user(unit_env, "prof_lee", Role.TEACHER)
        student = await seed_user(unit_env, "ada")
        post = await seed_post(unit_env, teacher)
        comment = await _comment(unit_env, post, student)
        like = await unit_env.get(LikeCommentUseCase)
        await like.execute(
            LikeCommentRequest(comment_id=comment.comment_id, user_id=str(teacher.id))
        )
        get_comments = await unit_env.get(GetCommentsUseCase)

        # Act
        as_teacher = await get_comments.execute(
            GetCommentsRequest(post_id=str(post.id), viewer_id=str(teacher.id))
        )
        anonymous = await get_comments.execute(GetCommentsRequest(post_id=str(post.id)))

        # Assert
        assert as_teacher.comments[0].is_liked
        assert as_teacher.comments[0].like_count == 1
        assert not anonymous.comments[0].is_liked

    @pytest.mark.asyncio
    async def test_pagination_metadata(self, unit_env):
        teacher = await seed_user(unit_env, "prof_lee", Role.TEACHER)
        student = await seed_user(unit_env, "ada")
        post = await seed_post(unit_env, teacher)
        for i in range(5):
            await _comment(unit_env, post, student, f"c{i}")
        get_comments = await unit_env.get(GetCommentsUseCase)

        response = await get_comments.execute(
            GetCommentsRequest(
                post_id=str(post.id), page=2, limit=2, sort=CommentSort.OLDEST
            )
        )

        assert [c.content for c in response.comments] == ["c2", "c3"]
        assert response.pagination.total == 5
        assert response.pagination.total_pages == 3
        assert response.pagination.has_more
        assert response.pinned_comment is None

    @pytest.mark.asyncio
    async def test_replies_and_context(self, unit_env):
        # Arrange
        teacher = await seed_user(unit_env, "prof_lee", Role.TEACHER)
        student = await seed_user(unit_env, "ada")
        post = await seed_post(unit_env, teacher)
        root = await _comment(unit_env, post, student)
        reply = await _comment(unit_env, post, teacher, "A", root.comment_id)
        get_replies = await unit_env.get(GetRepliesUseCase)
        get_comment = await unit_env.get(GetCommentUseCase)

        # Act
        replies = await get_replies.execute(
            GetRepliesRequest(post_id=str(post.id), comment_id=root.comment_id)
        )
        context = await get_comment.execute(GetCommentRequest(comment_id=reply.comment_id))

        # Assert
        assert [r.comment_id for r in replies.replies] == [reply.comment_id]
        assert replies.pagination.total == 1
        assert context.comment.comment_id == reply.comment_id
        assert [a.comment_id for a in context.ancestors] == [root.comment_id]


class TestLikeAndDeleteUseCases:
    """Tests for like, unlike and delete use cases."""

    @pytest.mark.asyncio
    async def test_like_unlike_round(self, unit_env):
        teacher = await seed_user(unit_env, "prof_lee", Role.TEACHER)
        student = await seed_user(unit_env, "ada")
        post = await seed_post(unit_env, teacher)
        comment = await _comment(unit_env, post, student)
        like = await unit_env.get(LikeCommentUseCase)
        unlike = await unit_env.get(UnlikeCommentUseCase)
        request = LikeCommentRequest(
            comment_id=comment.comment_id, user_id=str(teacher.id)
        )

        liked = await like.execute(request)
        unliked = await unlike.execute(request)

        assert (liked.like_count, liked.is_liked) == (1, True)
        assert (unliked.like_count, unliked.is_liked) == (0, False)

    @pytest.mark.asyncio
    async def test_delete(self, unit_env):
        teacher = await seed_user(unit_env, "prof_lee", Role.TEACHER)
        student = await seed_user(unit_env, "ada")
        post = await seed_post(unit_env, teacher)
        comment = await _comment(unit_env, post, student)
        delete = await unit_env.get(DeleteCommentUseCase)

        response = await delete.execute(
            DeleteCommentRequest(comment_id=comment.comment_id, user_id=str(student.id))
        )

        assert response.deleted
        assert response.comment_id == comment.comment_id
