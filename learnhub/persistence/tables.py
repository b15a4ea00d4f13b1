"""SQLAlchemy table definitions for LearnHub.

Repositories use SQLAlchemy Core against these tables and map rows to the
immutable domain models. They match the schema defined in Alembic
migrations. Users live in the external identity service, so user ids are
plain UUID columns without a foreign key.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    PrimaryKeyConstraint,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import ARRAY, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("title", String(300), nullable=False),
    Column("content", Text, nullable=True),
    Column("author_id", UUID(as_uuid=True), nullable=False),
    Column("tag_names", ARRAY(String(50)), nullable=False, server_default="{}"),
    Column("file_url", Text, nullable=True),  # Reference into the file service
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("hidden", Boolean, nullable=False, server_default="false"),
)

Index("idx_posts_created_at_id", posts_table.c.created_at.desc(), posts_table.c.id)
Index("idx_posts_author_id", posts_table.c.author_id)
Index("idx_posts_tag_names", posts_table.c.tag_names, postgresql_using="gin")

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column(
        "post_id",
        UUID(as_uuid=True),
        ForeignKey("posts.id", ondelete="CASCADE"),
        nullable=False,
    ),
    # Always a top-level comment; replies go with their parent
    Column(
        "parent_id",
        Integer,
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=True,
    ),
    Column("author_id", UUID(as_uuid=True), nullable=False),
    Column("mentioned_user_id", UUID(as_uuid=True), nullable=True),
    Column("content", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("hidden", Boolean, nullable=False, server_default="false"),
)

Index(
    "idx_comments_post_top_level",
    comments_table.c.post_id,
    comments_table.c.created_at.desc(),
    postgresql_where=comments_table.c.parent_id.is_(None),
)
Index("idx_comments_parent_id", comments_table.c.parent_id, comments_table.c.created_at)
Index("idx_comments_author_id", comments_table.c.author_id, comments_table.c.id.desc())

# ============================================================================
# LIKES / BOOKMARKS TABLES (user-to-post relations)
# ============================================================================
likes_table = Table(
    "likes",
    metadata,
    Column("user_id", UUID(as_uuid=True), nullable=False),
    Column(
        "post_id",
        UUID(as_uuid=True),
        ForeignKey("posts.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    PrimaryKeyConstraint("user_id", "post_id", name="pk_likes"),
)

Index("idx_likes_user_created", likes_table.c.user_id, likes_table.c.created_at.desc())

bookmarks_table = Table(
    "bookmarks",
    metadata,
    Column("user_id", UUID(as_uuid=True), nullable=False),
    Column(
        "post_id",
        UUID(as_uuid=True),
        ForeignKey("posts.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    PrimaryKeyConstraint("user_id", "post_id", name="pk_bookmarks"),
)

Index(
    "idx_bookmarks_user_created",
    bookmarks_table.c.user_id,
    bookmarks_table.c.created_at.desc(),
)

# ============================================================================
# REPORTS TABLE
# ============================================================================
reports_table = Table(
    "reports",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("reporter_id", UUID(as_uuid=True), nullable=False),
    Column("reason", String(50), nullable=False),
    Column(
        "post_id",
        UUID(as_uuid=True),
        ForeignKey("posts.id", ondelete="CASCADE"),
        nullable=True,
    ),
    Column(
        "comment_id",
        Integer,
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=True,
    ),
    Column("status", String(20), nullable=False, server_default="pending"),
    Column("moderator_notes", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "(post_id IS NULL) <> (comment_id IS NULL)", name="ck_reports_single_target"
    ),
)

Index(
    "idx_reports_created_at_id",
    reports_table.c.created_at.desc(),
    reports_table.c.id.desc(),
)
Index("idx_reports_status", reports_table.c.status)
