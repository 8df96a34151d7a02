"""initial_schema

Create the LearnHub schema:
- Users (role, profile, activity counters)
- Posts and threaded comments (materialized path, denormalized counters)
- Notifications, conversations and messages

Posts, comments, notifications, conversations and messages carry identity
stamps as prefixed columns, refreshed by UPDATE when a profile changes.

Revision ID: 3c5e9a1d7f20
Revises:
Create Date: 2026-10-12 09:14:03.512204

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c5e9a1d7f20"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

ROLE = postgresql.ENUM("student", "teacher", name="user_role", create_type=False)


def _stamp(prefix: str, nullable: bool = False) -> list[sa.Column]:
    return [
        sa.Column(f"{prefix}_id", sa.UUID(), nullable=nullable),
        sa.Column(f"{prefix}_username", sa.String(30), nullable=nullable),
        sa.Column(f"{prefix}_display_name", sa.String(50), nullable=nullable),
        sa.Column(f"{prefix}_avatar_url", sa.Text(), nullable=True),
        sa.Column(
            f"{prefix}_role",
            ROLE,
            nullable=nullable,
            server_default=None if nullable else "student",
        ),
    ]


def _timestamps(*names: str) -> list[sa.Column]:
    return [
        sa.Column(
            name,
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        )
        for name in names
    ]


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    op.execute("""
        DO $$ BEGIN
            CREATE TYPE user_role AS ENUM ('student', 'teacher');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    # ========================================================================
    # USERS
    # ========================================================================
    op.create_table(
        "users",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("username", sa.String(30), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("display_name", sa.String(50), nullable=False),
        sa.Column("role", ROLE, nullable=False, server_default="student"),
        sa.Column("avatar_url", sa.Text(), nullable=True),
        sa.Column("bio", sa.String(500), nullable=False, server_default=""),
        sa.Column("comments_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("likes_given", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("posts_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default="true"),
        *_timestamps("created_at", "updated_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("username"),
        sa.UniqueConstraint("email"),
    )

    # ========================================================================
    # POSTS
    # ========================================================================
    op.create_table(
        "posts",
        sa.Column("id", sa.UUID(), nullable=False),
        *_stamp("author"),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("comment_count", sa.Integer(), nullable=False, server_default="0"),
        *_timestamps("created_at", "updated_at"),
        sa.Column("deleted_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_posts_created_at", "posts", [sa.text("created_at DESC")])
    op.create_index("idx_posts_author_id", "posts", ["author_id"])

    # ========================================================================
    # COMMENTS (threaded via parent_id + materialized path)
    # ========================================================================
    op.create_table(
        "comments",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("post_id", sa.UUID(), nullable=False),
        *_stamp("author"),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column(
            "mentions",
            postgresql.ARRAY(sa.String(30)),
            nullable=False,
            server_default="{}",
        ),
        sa.Column("parent_id", sa.UUID(), nullable=True),
        sa.Column("root_id", sa.UUID(), nullable=False),
        sa.Column("path", sa.Text(), nullable=False),
        sa.Column("depth", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "liked_by", postgresql.ARRAY(sa.UUID()), nullable=False, server_default="{}"
        ),
        sa.Column("like_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("reply_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "total_reply_count", sa.Integer(), nullable=False, server_default="0"
        ),
        sa.Column("is_pinned", sa.Boolean(), nullable=False, server_default="false"),
        *_timestamps("created_at", "updated_at"),
        sa.Column("edited_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column("deleted_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(["post_id"], ["posts.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["parent_id"], ["comments.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("depth >= 0", name="depth_non_negative"),
        sa.CheckConstraint("like_count >= 0", name="like_count_non_negative"),
    )
    op.create_index("idx_comments_post_roots", "comments", ["post_id", "parent_id"])
    op.create_index("idx_comments_parent_id", "comments", ["parent_id"])
    op.create_index("idx_comments_root_id", "comments", ["root_id"])
    op.create_index("idx_comments_author_id", "comments", ["author_id"])
    op.create_index("idx_comments_post_pinned", "comments", ["post_id", "is_pinned"])

    # ========================================================================
    # NOTIFICATIONS
    # ========================================================================
    op.create_table(
        "notifications",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("recipient_id", sa.UUID(), nullable=False),
        sa.Column("type", sa.String(30), nullable=False),
        *_stamp("actor"),
        sa.Column("reference_type", sa.String(20), nullable=False),
        sa.Column("reference_id", sa.UUID(), nullable=False),
        sa.Column("reference_post_id", sa.UUID(), nullable=True),
        sa.Column("content", sa.Text(), nullable=False, server_default=""),
        sa.Column("is_read", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("read_at", sa.TIMESTAMP(timezone=True), nullable=True),
        *_timestamps("created_at"),
        sa.ForeignKeyConstraint(["recipient_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_notifications_recipient_created",
        "notifications",
        ["recipient_id", sa.text("created_at DESC")],
    )
    op.create_index("idx_notifications_actor_id", "notifications", ["actor_id"])

    # ========================================================================
    # CONVERSATIONS AND MESSAGES
    # ========================================================================
    op.create_table(
        "conversations",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("participant_ids", postgresql.ARRAY(sa.UUID()), nullable=False),
        sa.Column("last_message_content", sa.Text(), nullable=True),
        *_stamp("last_message_sender", nullable=True),
        sa.Column(
            "last_message_created_at", sa.TIMESTAMP(timezone=True), nullable=True
        ),
        *_timestamps("created_at", "updated_at"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_conversations_last_sender", "conversations", ["last_message_sender_id"]
    )

    op.create_table(
        "messages",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("conversation_id", sa.UUID(), nullable=False),
        *_stamp("sender"),
        sa.Column("content", sa.Text(), nullable=False),
        *_timestamps("created_at"),
        sa.Column("deleted_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(
            ["conversation_id"], ["conversations.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_messages_conversation_created",
        "messages",
        ["conversation_id", sa.text("created_at DESC")],
    )
    op.create_index("idx_messages_sender_id", "messages", ["sender_id"])


def downgrade() -> None:
    """Downgrade schema."""
    # Drop tables (in reverse order of dependencies)
    op.drop_table("messages")
    op.drop_table("conversations")
    op.drop_table("notifications")
    op.drop_table("comments")
    op.drop_table("posts")
    op.drop_table("users")

    op.execute("DROP TYPE IF EXISTS user_role")
