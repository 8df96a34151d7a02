"""SQLAlchemy table definitions for LearnHub.

These table definitions are used with manual row mappers.
They match the schema defined in Alembic migrations.

Identity stamps are stored as prefixed columns (``author_*``, ``actor_*``,
``sender_*``) so a profile change can be fanned out with one UPDATE per
table.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects import postgresql
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

ROLE_ENUM = postgresql.ENUM("student", "teacher", name="user_role", create_type=False)


def stamp_columns(prefix: str, nullable: bool = False) -> list[Column]:
    """Columns holding an identity stamp under the given prefix."""
    return [
        Column(f"{prefix}_id", UUID, nullable=nullable),
        Column(f"{prefix}_username", String(30), nullable=nullable),
        Column(f"{prefix}_display_name", String(50), nullable=nullable),
        Column(f"{prefix}_avatar_url", Text, nullable=True),
        Column(
            f"{prefix}_role",
            ROLE_ENUM,
            nullable=nullable,
            server_default=None if nullable else "student",
        ),
    ]


# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("username", String(30), nullable=False, unique=True),
    Column("email", String(255), nullable=False, unique=True),
    Column("display_name", String(50), nullable=False),
    Column("role", ROLE_ENUM, nullable=False, server_default="student"),
    Column("avatar_url", Text, nullable=True),
    Column("bio", String(500), nullable=False, server_default=""),
    Column("comments_count", Integer, nullable=False, server_default="0"),
    Column("likes_given", Integer, nullable=False, server_default="0"),
    Column("posts_count", Integer, nullable=False, server_default="0"),
    Column("is_active", Boolean, nullable=False, server_default="true"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID, primary_key=True),
    *stamp_columns("author"),
    Column("content", Text, nullable=False),
    Column("comment_count", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("deleted_at", TIMESTAMP(timezone=True), nullable=True),
)

Index("idx_posts_created_at", posts_table.c.created_at.desc())
Index("idx_posts_author_id", posts_table.c.author_id)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("post_id", UUID, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False),
    *stamp_columns("author"),
    Column("content", Text, nullable=False),
    Column(
        "mentions",
        postgresql.ARRAY(String(30)),
        nullable=False,
        server_default="{}",
    ),
    Column("parent_id", UUID, ForeignKey("comments.id"), nullable=True),
    Column("root_id", UUID, nullable=False),
    Column("path", Text, nullable=False),
    Column("depth", Integer, nullable=False, server_default="0"),
    Column("liked_by", postgresql.ARRAY(UUID), nullable=False, server_default="{}"),
    Column("like_count", Integer, nullable=False, server_default="0"),
    Column("reply_count", Integer, nullable=False, server_default="0"),
    Column("total_reply_count", Integer, nullable=False, server_default="0"),
    Column("is_pinned", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("edited_at", TIMESTAMP(timezone=True), nullable=True),
    Column("deleted_at", TIMESTAMP(timezone=True), nullable=True),
    CheckConstraint("depth >= 0", name="depth_non_negative"),
    CheckConstraint("like_count >= 0", name="like_count_non_negative"),
)

Index("idx_comments_post_roots", comments_table.c.post_id, comments_table.c.parent_id)
Index("idx_comments_parent_id", comments_table.c.parent_id)
Index("idx_comments_root_id", comments_table.c.root_id)
Index("idx_comments_author_id", comments_table.c.author_id)
Index("idx_comments_post_pinned", comments_table.c.post_id, comments_table.c.is_pinned)

# ============================================================================
# NOTIFICATIONS TABLE
# ============================================================================
notifications_table = Table(
    "notifications",
    metadata,
    Column("id", UUID, primary_key=True),
    Column(
        "recipient_id",
        UUID,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("type", String(30), nullable=False),
    *stamp_columns("actor"),
    Column("reference_type", String(20), nullable=False),
    Column("reference_id", UUID, nullable=False),
    Column("reference_post_id", UUID, nullable=True),
    Column("content", Text, nullable=False, server_default=""),
    Column("is_read", Boolean, nullable=False, server_default="false"),
    Column("read_at", TIMESTAMP(timezone=True), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index(
    "idx_notifications_recipient_created",
    notifications_table.c.recipient_id,
    notifications_table.c.created_at.desc(),
)
Index("idx_notifications_actor_id", notifications_table.c.actor_id)

# ============================================================================
# CONVERSATIONS TABLE
# ============================================================================
conversations_table = Table(
    "conversations",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("participant_ids", postgresql.ARRAY(UUID), nullable=False),
    Column("last_message_content", Text, nullable=True),
    *stamp_columns("last_message_sender", nullable=True),
    Column("last_message_created_at", TIMESTAMP(timezone=True), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index(
    "idx_conversations_last_sender",
    conversations_table.c.last_message_sender_id,
)

# ============================================================================
# MESSAGES TABLE
# ============================================================================
messages_table = Table(
    "messages",
    metadata,
    Column("id", UUID, primary_key=True),
    Column(
        "conversation_id",
        UUID,
        ForeignKey("conversations.id", ondelete="CASCADE"),
        nullable=False,
    ),
    *stamp_columns("sender"),
    Column("content", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("deleted_at", TIMESTAMP(timezone=True), nullable=True),
)

Index(
    "idx_messages_conversation_created",
    messages_table.c.conversation_id,
    messages_table.c.created_at.desc(),
)
Index("idx_messages_sender_id", messages_table.c.sender_id)
