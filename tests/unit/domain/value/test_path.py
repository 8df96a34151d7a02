"""Unit tests for MaterializedPath."""

from uuid import uuid4

import pytest
from pydantic import ValidationError

from learnhub.domain.value import CommentId, MaterializedPath


def _id() -> CommentId:
    return CommentId(uuid4())


class TestMaterializedPath:
    """Tests for building and reading comment paths."""

    def test_top_level_path_has_depth_zero(self):
        """A top-level path holds only the comment's own id."""
        comment_id = _id()

        path = MaterializedPath.top_level(comment_id)

        assert path.root == str(comment_id)
        assert path.depth == 0
        assert path.leaf == comment_id
        assert path.thread_root == comment_id
        assert path.ancestors == []

    def test_child_appends_segment(self):
        """Each reply level adds one segment and one level of depth."""
        root_id, child_id, grandchild_id = _id(), _id(), _id()

        path = MaterializedPath.top_level(root_id).child(child_id).child(grandchild_id)

        assert path.root == f"{root_id}/{child_id}/{grandchild_id}"
        assert path.depth == 2
        assert len(path.segments) == path.depth + 1
        assert path.ancestors == [root_id, child_id]
        assert path.leaf == grandchild_id
        assert path.thread_root == root_id

    def test_parse_round_trips_stored_value(self):
        stored = f"{uuid4()}/{uuid4()}"

        assert MaterializedPath.parse(stored).root == stored

    @pytest.mark.parametrize(
        "value",
        [
            "",
            "/",
            f"{uuid4()}//{uuid4()}",
            f"{uuid4()}/",
            "not-a-uuid",
            f"{uuid4()}/abc",
        ],
    )
    def test_parse_rejects_malformed_paths(self, value):
        """Empty and non-id segments are rejected."""
        with pytest.raises(ValidationError):
            MaterializedPath.parse(value)
