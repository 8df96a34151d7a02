"""Comment domain service."""

from collections import defaultdict
from dataclasses import dataclass, field
from datetime import timedelta
from uuid import uuid4

import logfire

from learnhub.config import CommentSettings
from learnhub.domain.error import (
    ContentDeletedException,
    EditWindowExpiredError,
    MaxDepthExceededError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from learnhub.domain.event import (
    CommentLiked,
    CommentMentioned,
    CommentPinned,
    CommentReplied,
    EventBus,
)
from learnhub.domain.model.comment import Comment
from learnhub.domain.model.common import utcnow
from learnhub.domain.repository import CommentRepository
from learnhub.domain.value import (
    CommentId,
    CommentSort,
    IdentityStamp,
    MaterializedPath,
    PostId,
    Role,
    UserId,
    UserStat,
)

from .base import Service
from .content import extract_mentions, sanitize_content
from .post_service import PostService
from .user_service import UserService


@dataclass
class CommentThread:
    """A root comment with the first few of its direct replies."""

    comment: Comment
    replies: list[Comment] = field(default_factory=list)
    has_more_replies: bool = False


@dataclass
class RootCommentPage:
    """One page of root comments plus the post's pinned comment."""

    threads: list[CommentThread]
    pinned: Comment | None
    total: int


@dataclass
class ReplyPage:
    """One page of direct replies to a comment."""

    replies: list[Comment]
    total: int


@dataclass
class CommentContext:
    """A comment and the chain of comments above it, root first."""

    comment: Comment
    ancestors: list[Comment]


class CommentService(Service):
    """Domain service for threaded comment operations.

    Side effects (notifications) are published as events after the primary
    write and never fail the operation.
    """

    def __init__(
        self,
        comment_repository: CommentRepository,
        post_service: PostService,
        user_service: UserService,
        event_bus: EventBus,
        settings: CommentSettings,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            post_service: Post service (existence checks and counters)
            user_service: User service (activity counters)
            event_bus: Bus for best-effort side effects
            settings: Comment rules (depth, length, edit window, paging)
        """
        self.comment_repository = comment_repository
        self.post_service = post_service
        self.user_service = user_service
        self.event_bus = event_bus
        self.settings = settings

    async def create_comment(
        self,
        post_id: PostId,
        author: IdentityStamp,
        content: str,
        parent_id: CommentId | None = None,
    ) -> Comment:
        """Create a comment on a post or reply to another comment.

        The id is generated up front so the materialized path is complete
        on insert.

        Args:
            post_id: Post ID
            author: Stamp of the authenticated author
            content: Raw comment text
            parent_id: Parent comment ID for replies (None for top-level)

        Returns:
            Created comment

        Raises:
            ValidationError: If content is invalid or parent is on another post
            MaxDepthExceededError: If the reply would nest too deep
            NotFoundError: If the post or parent comment doesn't exist
        """
        with logfire.span(
            "comment_service.create_comment",
            post_id=str(post_id),
            author_id=str(author.user_id),
            parent_id=str(parent_id) if parent_id else None,
        ):
            text = sanitize_content(
                content, self.settings.max_length, "Comment content"
            )
            await self.post_service.get_active_post(post_id)

            comment_id = CommentId(uuid4())
            parent: Comment | None = None
            if parent_id:
                parent = await self.comment_repository.find_by_id(parent_id)
                if not parent:
                    logfire.warn(
                        "Parent comment not found",
                        parent_id=str(parent_id),
                        post_id=str(post_id),
                    )
                    raise NotFoundError("Parent comment", str(parent_id))
                if parent.post_id != post_id:
                    logfire.warn(
                        "Parent comment does not belong to post",
                        parent_id=str(parent_id),
                        parent_post_id=str(parent.post_id),
                        target_post_id=str(post_id),
                    )
                    raise ValidationError("Parent comment does not belong to this post")
                depth = parent.depth + 1
                if depth > self.settings.max_depth:
                    logfire.warn(
                        "Maximum comment depth exceeded",
                        parent_id=str(parent_id),
                        depth=depth,
                    )
                    raise MaxDepthExceededError(self.settings.max_depth)
                root_id = parent.root_id
                path = parent.path.child(comment_id)
            else:
                depth = 0
                root_id = comment_id
                path = MaterializedPath.top_level(comment_id)

            mentions = extract_mentions(text)
            now = utcnow()
            comment = Comment(
                id=comment_id,
                post_id=post_id,
                author=author,
                content=text,
                mentions=mentions,
                parent_id=parent_id if parent else None,
                root_id=root_id,
                path=path,
                depth=depth,
                created_at=now,
                updated_at=now,
            )
            saved = await self.comment_repository.save(comment)

            await self.post_service.increment_comment_count(post_id)
            await self.user_service.increment_stat(
                author.user_id, UserStat.COMMENTS_COUNT
            )
            if parent:
                await self.comment_repository.increment_reply_count(parent.id)
                if root_id != parent.id:
                    await self.comment_repository.increment_total_reply_count(root_id)

            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                post_id=str(post_id),
                depth=depth,
                mentions=len(mentions),
            )

            if parent:
                await self.event_bus.publish(
                    CommentReplied(reply=saved, parent_author_id=parent.author.user_id)
                )
            if mentions:
                await self.event_bus.publish(
                    CommentMentioned(comment=saved, usernames=mentions)
                )
            return saved

    async def edit_comment(
        self,
        comment_id: CommentId,
        editor_id: UserId,
        editor_role: Role,
        content: str,
    ) -> Comment:
        """Replace the content of a comment.

        Students may only edit within the edit window; teachers any time.
        Depth, path and root never change.

        Args:
            comment_id: Comment ID
            editor_id: User attempting the edit
            editor_role: Current role of that user
            content: Raw replacement text

        Returns:
            Updated comment

        Raises:
            ValidationError: If content is invalid
            NotFoundError: If the comment doesn't exist
            ContentDeletedException: If the comment is deleted
            NotAuthorizedError: If the editor is not the author
            EditWindowExpiredError: If a student edits after the window
        """
        with logfire.span(
            "comment_service.edit_comment",
            comment_id=str(comment_id),
            editor_id=str(editor_id),
        ):
            text = sanitize_content(
                content, self.settings.max_length, "Comment content"
            )
            comment = await self.get_comment(comment_id)
            if comment.is_deleted:
                raise ContentDeletedException("comment", str(comment_id))
            if comment.author.user_id != editor_id:
                logfire.warn(
                    "Unauthorized comment edit attempt",
                    comment_id=str(comment_id),
                    editor_id=str(editor_id),
                )
                raise NotAuthorizedError("comment", str(comment_id), str(editor_id))

            window = timedelta(minutes=self.settings.edit_window_minutes)
            if not editor_role.is_elevated and utcnow() - comment.created_at > window:
                logfire.warn(
                    "Comment edit window expired",
                    comment_id=str(comment_id),
                    created_at=comment.created_at.isoformat(),
                )
                raise EditWindowExpiredError(self.settings.edit_window_minutes)

            updated = await self.comment_repository.update_content(
                comment_id, text, extract_mentions(text), utcnow()
            )
            if updated is None:
                # Deleted between the read and the update
                raise ContentDeletedException("comment", str(comment_id))

            logfire.info(
                "Comment edited",
                comment_id=str(comment_id),
                content_length=len(text),
            )
            return updated

    async def delete_comment(self, comment_id: CommentId, user_id: UserId) -> Comment:
        """Soft-delete a comment. Deleting twice is a no-op.

        Args:
            comment_id: Comment ID
            user_id: User attempting the delete

        Returns:
            The comment after deletion

        Raises:
            NotFoundError: If the comment doesn't exist
            NotAuthorizedError: If the user is not the author
        """
        with logfire.span(
            "comment_service.delete_comment",
            comment_id=str(comment_id),
            user_id=str(user_id),
        ):
            comment = await self.get_comment(comment_id)
            if comment.author.user_id != user_id:
                logfire.warn(
                    "Unauthorized comment delete attempt",
                    comment_id=str(comment_id),
                    user_id=str(user_id),
                )
                raise NotAuthorizedError(
                    "comment", str(comment_id), str(user_id), action="delete"
                )
            if comment.is_deleted:
                logfire.info("Comment already deleted", comment_id=str(comment_id))
                return comment

            deleted = await self.comment_repository.soft_delete(comment_id, utcnow())
            if deleted is None:
                raise NotFoundError("Comment", str(comment_id))
            logfire.info("Comment deleted", comment_id=str(comment_id))
            return deleted

    async def like_comment(self, comment_id: CommentId, liker: IdentityStamp) -> int:
        """Like a comment once per user.

        Args:
            comment_id: Comment ID
            liker: Stamp of the liking user

        Returns:
            Like count after the call (unchanged if already liked)

        Raises:
            NotFoundError: If the comment doesn't exist or is deleted
        """
        with logfire.span(
            "comment_service.like_comment",
            comment_id=str(comment_id),
            user_id=str(liker.user_id),
        ):
            like_count = await self.comment_repository.add_like(
                comment_id, liker.user_id
            )
            if like_count is None:
                current = await self._get_live_comment(comment_id)
                logfire.info("Comment already liked", comment_id=str(comment_id))
                return current.like_count

            await self.user_service.increment_stat(
                liker.user_id, UserStat.LIKES_GIVEN
            )
            logfire.info(
                "Comment liked", comment_id=str(comment_id), like_count=like_count
            )

            comment = await self.comment_repository.find_by_id(comment_id)
            if comment:
                await self.event_bus.publish(CommentLiked(comment=comment, liker=liker))
            return like_count

    async def unlike_comment(self, comment_id: CommentId, user_id: UserId) -> int:
        """Remove a user's like from a comment.

        Args:
            comment_id: Comment ID
            user_id: User removing the like

        Returns:
            Like count after the call (unchanged if not liked)

        Raises:
            NotFoundError: If the comment doesn't exist or is deleted
        """
        with logfire.span(
            "comment_service.unlike_comment",
            comment_id=str(comment_id),
            user_id=str(user_id),
        ):
            like_count = await self.comment_repository.remove_like(comment_id, user_id)
            if like_count is None:
                current = await self._get_live_comment(comment_id)
                logfire.info("Comment was not liked", comment_id=str(comment_id))
                return current.like_count

            logfire.info(
                "Comment unliked", comment_id=str(comment_id), like_count=like_count
            )
            return like_count

    async def pin_comment(self, comment_id: CommentId, actor: IdentityStamp) -> Comment:
        """Pin a comment, unpinning any other comment on the same post.

        Args:
            comment_id: Comment ID
            actor: Stamp of the user pinning

        Returns:
            The pinned comment

        Raises:
            NotAuthorizedError: If the actor is not a teacher or not the post author
            NotFoundError: If the comment or its post doesn't exist
        """
        with logfire.span(
            "comment_service.pin_comment",
            comment_id=str(comment_id),
            user_id=str(actor.user_id),
        ):
            comment = await self._authorize_pin(comment_id, actor)

            await self.comment_repository.unpin_all(comment.post_id)
            pinned = await self.comment_repository.set_pinned(comment_id, True)
            if pinned is None:
                raise NotFoundError("Comment", str(comment_id))
            logfire.info(
                "Comment pinned",
                comment_id=str(comment_id),
                post_id=str(comment.post_id),
            )

            await self.event_bus.publish(CommentPinned(comment=pinned, pinned_by=actor))
            return pinned

    async def unpin_comment(
        self, comment_id: CommentId, actor: IdentityStamp
    ) -> Comment:
        """Unpin a comment.

        Raises:
            NotAuthorizedError: If the actor is not a teacher or not the post author
            NotFoundError: If the comment or its post doesn't exist
        """
        with logfire.span(
            "comment_service.unpin_comment",
            comment_id=str(comment_id),
            user_id=str(actor.user_id),
        ):
            await self._authorize_pin(comment_id, actor)
            unpinned = await self.comment_repository.set_pinned(comment_id, False)
            if unpinned is None:
                raise NotFoundError("Comment", str(comment_id))
            logfire.info("Comment unpinned", comment_id=str(comment_id))
            return unpinned

    async def list_root_comments(
        self,
        post_id: PostId,
        page: int = 1,
        limit: int | None = None,
        sort: CommentSort = CommentSort.NEWEST,
    ) -> RootCommentPage:
        """List one page of top-level comments with reply previews.

        Replies for the whole page are fetched in a single batch and the
        first few (in creation order) are attached to each root.

        Args:
            post_id: Post ID
            page: 1-based page number
            limit: Page size (capped by settings)
            sort: Sort order

        Returns:
            Page of comment threads, the pinned comment and the total count
        """
        page, limit = self.page_bounds(page, limit)
        with logfire.span(
            "comment_service.list_root_comments",
            post_id=str(post_id),
            page=page,
            limit=limit,
            sort=sort.value,
        ):
            roots = await self.comment_repository.find_roots(
                post_id, sort=sort, limit=limit, offset=(page - 1) * limit
            )
            total = await self.comment_repository.count_roots(post_id)
            pinned = await self.comment_repository.find_pinned(post_id)

            replies_by_parent: dict[CommentId, list[Comment]] = defaultdict(list)
            if roots:
                replies = await self.comment_repository.find_replies_to(
                    post_id,
                    [root.id for root in roots],
                    limit=self.settings.reply_batch_limit,
                )
                for reply in replies:
                    if reply.parent_id is not None:
                        replies_by_parent[reply.parent_id].append(reply)

            threads = []
            for root in roots:
                attached = replies_by_parent[root.id][: self.settings.preview_replies]
                threads.append(
                    CommentThread(
                        comment=root,
                        replies=attached,
                        has_more_replies=root.reply_count > len(attached),
                    )
                )

            logfire.info(
                "Root comments listed",
                post_id=str(post_id),
                count=len(threads),
                total=total,
                has_pinned=pinned is not None,
            )
            return RootCommentPage(threads=threads, pinned=pinned, total=total)

    async def list_replies(
        self,
        post_id: PostId,
        comment_id: CommentId,
        page: int = 1,
        limit: int | None = None,
    ) -> ReplyPage:
        """List one page of direct replies to a comment, oldest first.

        Raises:
            NotFoundError: If the parent comment doesn't exist or belongs to
                another post
        """
        page, limit = self.page_bounds(page, limit)
        with logfire.span(
            "comment_service.list_replies",
            post_id=str(post_id),
            comment_id=str(comment_id),
            page=page,
            limit=limit,
        ):
            parent = await self.get_comment(comment_id)
            if parent.post_id != post_id:
                logfire.warn(
                    "Comment does not belong to post",
                    comment_id=str(comment_id),
                    post_id=str(post_id),
                )
                raise NotFoundError("Comment", str(comment_id))

            replies = await self.comment_repository.find_replies(
                comment_id, limit=limit, offset=(page - 1) * limit
            )
            total = await self.comment_repository.count_replies(comment_id)
            logfire.info(
                "Replies listed",
                comment_id=str(comment_id),
                count=len(replies),
                total=total,
            )
            return ReplyPage(replies=replies, total=total)

    async def get_comment(self, comment_id: CommentId) -> Comment:
        """Get a comment by ID, deleted or not.

        Raises:
            NotFoundError: If the comment doesn't exist
        """
        with logfire.span(
            "comment_service.get_comment", comment_id=str(comment_id)
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment is None:
                raise self.not_found("Comment", comment_id)
            return comment

    async def get_comment_with_context(
        self, comment_id: CommentId, with_context: bool = True
    ) -> CommentContext:
        """Resolve a deep link: the comment and its ancestors, root first.

        Ancestors are fetched in one batch from the comment's path.

        Args:
            comment_id: Comment ID
            with_context: Whether to load the ancestor chain

        Returns:
            The comment and its ancestors (empty without context)

        Raises:
            NotFoundError: If the comment doesn't exist
        """
        with logfire.span(
            "comment_service.get_comment_with_context",
            comment_id=str(comment_id),
            with_context=with_context,
        ):
            comment = await self.get_comment(comment_id)
            ancestors: list[Comment] = []
            ancestor_ids = comment.path.ancestors
            if with_context and ancestor_ids:
                found = await self.comment_repository.find_by_ids(ancestor_ids)
                by_id = {c.id: c for c in found}
                # Ancestors missing from storage are skipped
                ancestors = [by_id[i] for i in ancestor_ids if i in by_id]
            logfire.info(
                "Comment context resolved",
                comment_id=str(comment_id),
                ancestors=len(ancestors),
            )
            return CommentContext(comment=comment, ancestors=ancestors)

    def page_bounds(self, page: int, limit: int | None) -> tuple[int, int]:
        """Clamp page and page size to the configured bounds."""
        page = max(page, 1)
        if not limit or limit < 1:
            limit = self.settings.default_page_size
        return page, min(limit, self.settings.max_page_size)

    async def _get_live_comment(self, comment_id: CommentId) -> Comment:
        comment = await self.comment_repository.find_by_id(comment_id)
        if comment is None or comment.is_deleted:
            raise self.not_found("Comment", comment_id)
        return comment

    async def _authorize_pin(
        self, comment_id: CommentId, actor: IdentityStamp
    ) -> Comment:
        if not actor.role.is_elevated:
            logfire.warn(
                "Pin attempt by non-teacher",
                comment_id=str(comment_id),
                user_id=str(actor.user_id),
            )
            raise NotAuthorizedError(
                "comment", str(comment_id), str(actor.user_id), action="pin"
            )
        comment = await self._get_live_comment(comment_id)
        post = await self.post_service.get_post_by_id(comment.post_id)
        if post is None:
            raise NotFoundError("Post", str(comment.post_id))
        if post.author.user_id != actor.user_id:
            logfire.warn(
                "Pin attempt by someone other than the post author",
                comment_id=str(comment_id),
                user_id=str(actor.user_id),
            )
            raise NotAuthorizedError(
                "comment", str(comment_id), str(actor.user_id), action="pin"
            )
        return comment
