"""Materialized path for threaded comments.

A path lists every ancestor id of a comment from the thread root down,
followed by the comment's own id, joined by ``/``::

    <root-id>/<child-id>/<grandchild-id>

The number of segments is always ``depth + 1``.
"""

from uuid import UUID

from pydantic import field_validator

from learnhub.domain.value.common import RootValueObject
from learnhub.domain.value.identifiers import CommentId

SEPARATOR = "/"


class MaterializedPath(RootValueObject[str]):
    """Ancestry chain of a comment."""

    @field_validator("root")
    @classmethod
    def validate_segments(cls, v: str) -> str:
        """Every segment must be a non-empty UUID."""
        segments = v.split(SEPARATOR)
        for segment in segments:
            if not segment:
                raise ValueError(f"Path contains an empty segment: {v!r}")
            try:
                UUID(segment)
            except ValueError:
                raise ValueError(f"Path segment is not a comment id: {segment!r}")
        return v

    @classmethod
    def top_level(cls, comment_id: CommentId) -> "MaterializedPath":
        """Path of a top-level comment."""
        return cls(str(comment_id))

    @classmethod
    def parse(cls, value: str) -> "MaterializedPath":
        """Parse a stored path string."""
        return cls(value)

    def child(self, comment_id: CommentId) -> "MaterializedPath":
        """Path of a direct reply with the given id."""
        return MaterializedPath(f"{self.root}{SEPARATOR}{comment_id}")

    @property
    def segments(self) -> list[CommentId]:
        """All ids on the path, root first."""
        return [CommentId(UUID(s)) for s in self.root.split(SEPARATOR)]

    @property
    def ancestors(self) -> list[CommentId]:
        """Ids above the leaf, root first."""
        return self.segments[:-1]

    @property
    def leaf(self) -> CommentId:
        """Id of the comment the path belongs to."""
        return self.segments[-1]

    @property
    def thread_root(self) -> CommentId:
        """Id of the top-level comment of the thread."""
        return self.segments[0]

    @property
    def depth(self) -> int:
        """Nesting level encoded by the path (0 for top-level comments)."""
        return self.root.count(SEPARATOR)
