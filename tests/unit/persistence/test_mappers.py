"""Tests for row/model mapping of identity stamps and comment threads."""

from uuid import uuid4

from learnhub.domain.model import Comment
from learnhub.domain.value import CommentId, MaterializedPath, PostId, Role, StampPatch
from learnhub.persistence.mappers import (
    comment_to_dict,
    row_to_comment,
    stamp_patch_to_dict,
    stamp_to_dict,
)

from tests.factories import make_user


class TestStampColumns:
    """Stamps are flattened into prefixed columns."""

    def test_stamp_uses_column_prefix(self):
        user = make_user("prof_lee", Role.TEACHER, avatar_url="https://cdn/lee.png")

        columns = stamp_to_dict(user.stamp(), "actor")

        assert columns == {
            "actor_id": user.id,
            "actor_username": "prof_lee",
            "actor_display_name": "Prof_Lee",
            "actor_avatar_url": "https://cdn/lee.png",
            "actor_role": "teacher",
        }

    def test_patch_only_touches_changed_columns(self):
        """A removed avatar becomes NULL; the display name is left alone."""
        columns = stamp_patch_to_dict(StampPatch(avatar_url=None), "sender")

        assert columns == {"sender_avatar_url": None}


class TestCommentRows:
    def test_reply_survives_a_round_trip(self):
        # Arrange
        author = make_user()
        liker = make_user("grace")
        root_id = CommentId(uuid4())
        reply_id = CommentId(uuid4())
        reply = Comment(
            id=reply_id,
            post_id=PostId(uuid4()),
            author=author.stamp(),
            content="Nested answer @grace",
            mentions=["grace"],
            parent_id=root_id,
            root_id=root_id,
            path=MaterializedPath.top_level(root_id).child(reply_id),
            depth=1,
            liked_by=frozenset({liker.id}),
            like_count=1,
        )

        # Act
        row = comment_to_dict(reply)
        restored = row_to_comment(row)

        # Assert
        assert row["path"] == f"{root_id}/{reply_id}"
        assert row["author_username"] == "ada"
        assert restored == reply
