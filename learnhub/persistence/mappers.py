"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict, Optional
from uuid import UUID

from learnhub.domain.model import (
    Comment,
    Conversation,
    LastMessage,
    Message,
    Notification,
    NotificationReference,
    Post,
    User,
    UserStats,
)
from learnhub.domain.value import (
    CommentId,
    ConversationId,
    IdentityStamp,
    MaterializedPath,
    MessageId,
    NotificationId,
    NotificationType,
    PostId,
    ReferenceType,
    Role,
    StampPatch,
    UserId,
    Username,
)


def _uuid(value: Any) -> Optional[UUID]:
    if value is None:
        return None
    return value if isinstance(value, UUID) else UUID(str(value))


def row_to_stamp(row: Dict[str, Any], prefix: str) -> IdentityStamp:
    """Read an identity stamp stored under ``<prefix>_*`` columns."""
    return IdentityStamp(
        user_id=UserId(_uuid(row[f"{prefix}_id"])),
        username=row[f"{prefix}_username"],
        display_name=row[f"{prefix}_display_name"],
        avatar_url=row.get(f"{prefix}_avatar_url"),
        role=Role(row[f"{prefix}_role"]),
    )


def stamp_to_dict(stamp: IdentityStamp, prefix: str) -> Dict[str, Any]:
    """Flatten an identity stamp into ``<prefix>_*`` columns."""
    return {
        f"{prefix}_id": stamp.user_id,
        f"{prefix}_username": stamp.username,
        f"{prefix}_display_name": stamp.display_name,
        f"{prefix}_avatar_url": stamp.avatar_url,
        f"{prefix}_role": stamp.role.value,
    }


def stamp_patch_to_dict(patch: StampPatch, prefix: str) -> Dict[str, Any]:
    """Column values for the fields a stamp patch touches."""
    return {f"{prefix}_{name}": value for name, value in patch.changes().items()}


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        username=Username(row["username"]),
        email=row["email"],
        display_name=row["display_name"],
        role=Role(row["role"]),
        avatar_url=row.get("avatar_url"),
        bio=row.get("bio") or "",
        stats=UserStats(
            comments_count=row["comments_count"],
            likes_given=row["likes_given"],
            posts_count=row["posts_count"],
        ),
        is_active=row["is_active"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return {
        "id": user.id,
        "username": user.username.root,
        "email": user.email,
        "display_name": user.display_name,
        "role": user.role.value,
        "avatar_url": user.avatar_url,
        "bio": user.bio,
        "comments_count": user.stats.comments_count,
        "likes_given": user.stats.likes_given,
        "posts_count": user.stats.posts_count,
        "is_active": user.is_active,
        "created_at": user.created_at,
        "updated_at": user.updated_at,
    }


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model."""
    return Post(
        id=PostId(_uuid(row["id"])),
        author=row_to_stamp(row, "author"),
        content=row["content"],
        comment_count=row["comment_count"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        deleted_at=row.get("deleted_at"),
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict."""
    return {
        "id": post.id,
        **stamp_to_dict(post.author, "author"),
        "content": post.content,
        "comment_count": post.comment_count,
        "created_at": post.created_at,
        "updated_at": post.updated_at,
        "deleted_at": post.deleted_at,
    }


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model."""
    parent_id = _uuid(row.get("parent_id"))
    return Comment(
        id=CommentId(_uuid(row["id"])),
        post_id=PostId(_uuid(row["post_id"])),
        author=row_to_stamp(row, "author"),
        content=row["content"],
        mentions=list(row.get("mentions") or []),
        parent_id=CommentId(parent_id) if parent_id else None,
        root_id=CommentId(_uuid(row["root_id"])),
        path=MaterializedPath.parse(row["path"]),
        depth=row["depth"],
        liked_by=frozenset(UserId(_uuid(u)) for u in row.get("liked_by") or []),
        like_count=row["like_count"],
        reply_count=row["reply_count"],
        total_reply_count=row["total_reply_count"],
        is_pinned=row["is_pinned"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        edited_at=row.get("edited_at"),
        deleted_at=row.get("deleted_at"),
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    return {
        "id": comment.id,
        "post_id": comment.post_id,
        **stamp_to_dict(comment.author, "author"),
        "content": comment.content,
        "mentions": list(comment.mentions),
        "parent_id": comment.parent_id,
        "root_id": comment.root_id,
        "path": comment.path.root,
        "depth": comment.depth,
        "liked_by": sorted(comment.liked_by),
        "like_count": comment.like_count,
        "reply_count": comment.reply_count,
        "total_reply_count": comment.total_reply_count,
        "is_pinned": comment.is_pinned,
        "created_at": comment.created_at,
        "updated_at": comment.updated_at,
        "edited_at": comment.edited_at,
        "deleted_at": comment.deleted_at,
    }


def row_to_notification(row: Dict[str, Any]) -> Notification:
    """Convert database row to Notification domain model."""
    post_id = _uuid(row.get("reference_post_id"))
    return Notification(
        id=NotificationId(_uuid(row["id"])),
        recipient_id=UserId(_uuid(row["recipient_id"])),
        type=NotificationType(row["type"]),
        actor=row_to_stamp(row, "actor"),
        reference=NotificationReference(
            type=ReferenceType(row["reference_type"]),
            id=_uuid(row["reference_id"]),
            post_id=PostId(post_id) if post_id else None,
        ),
        content=row.get("content") or "",
        is_read=row["is_read"],
        read_at=row.get("read_at"),
        created_at=row["created_at"],
    )


def notification_to_dict(notification: Notification) -> Dict[str, Any]:
    """Convert Notification domain model to database dict."""
    return {
        "id": notification.id,
        "recipient_id": notification.recipient_id,
        "type": notification.type.value,
        **stamp_to_dict(notification.actor, "actor"),
        "reference_type": notification.reference.type.value,
        "reference_id": notification.reference.id,
        "reference_post_id": notification.reference.post_id,
        "content": notification.content,
        "is_read": notification.is_read,
        "read_at": notification.read_at,
        "created_at": notification.created_at,
    }


def last_message_to_dict(last_message: LastMessage) -> Dict[str, Any]:
    """Flatten a last-message snapshot into conversation columns."""
    return {
        "last_message_content": last_message.content,
        **stamp_to_dict(last_message.sender, "last_message_sender"),
        "last_message_created_at": last_message.created_at,
    }


def row_to_conversation(row: Dict[str, Any]) -> Conversation:
    """Convert database row to Conversation domain model."""
    last_message = None
    if row.get("last_message_sender_id") is not None:
        last_message = LastMessage(
            content=row["last_message_content"],
            sender=row_to_stamp(row, "last_message_sender"),
            created_at=row["last_message_created_at"],
        )
    return Conversation(
        id=ConversationId(_uuid(row["id"])),
        participant_ids=[UserId(_uuid(p)) for p in row["participant_ids"]],
        last_message=last_message,
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def conversation_to_dict(conversation: Conversation) -> Dict[str, Any]:
    """Convert Conversation domain model to database dict."""
    values: Dict[str, Any] = {
        "id": conversation.id,
        "participant_ids": list(conversation.participant_ids),
        "created_at": conversation.created_at,
        "updated_at": conversation.updated_at,
    }
    if conversation.last_message:
        values.update(last_message_to_dict(conversation.last_message))
    return values


def row_to_message(row: Dict[str, Any]) -> Message:
    """Convert database row to Message domain model."""
    return Message(
        id=MessageId(_uuid(row["id"])),
        conversation_id=ConversationId(_uuid(row["conversation_id"])),
        sender=row_to_stamp(row, "sender"),
        content=row["content"],
        created_at=row["created_at"],
        deleted_at=row.get("deleted_at"),
    )


def message_to_dict(message: Message) -> Dict[str, Any]:
    """Convert Message domain model to database dict."""
    return {
        "id": message.id,
        "conversation_id": message.conversation_id,
        **stamp_to_dict(message.sender, "sender"),
        "content": message.content,
        "created_at": message.created_at,
        "deleted_at": message.deleted_at,
    }
