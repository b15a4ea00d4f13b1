"""initial_schema

Create the LearnHub schema:
- Posts (with tags and a reference to an uploaded file)
- Comments (two-level threads: top-level comments and their replies)
- Likes and bookmarks (user-to-post relations keyed by user and post)

Users live in the external identity service; user ids are plain UUIDs.

Revision ID: 3c1d2f6a9b40
Revises:
Create Date: 2026-10-17 10:12:44.318201

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1d2f6a9b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # POSTS table
    # ========================================================================
    op.create_table(
        "posts",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column("content", sa.Text(), nullable=True),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column(
            "tag_names",
            postgresql.ARRAY(sa.String(50)),
            nullable=False,
            server_default="{}",
        ),
        sa.Column("file_url", sa.Text(), nullable=True),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("hidden", sa.Boolean(), nullable=False, server_default="false"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_posts_created_at_id",
        "posts",
        [sa.text("created_at DESC"), "id"],
    )
    op.create_index("idx_posts_author_id", "posts", ["author_id"])
    op.create_index(
        "idx_posts_tag_names", "posts", ["tag_names"], postgresql_using="gin"
    )

    # ========================================================================
    # COMMENTS table (two levels: parent_id always points at a top-level comment)
    # ========================================================================
    op.create_table(
        "comments",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("post_id", sa.UUID(), nullable=False),
        sa.Column("parent_id", sa.Integer(), nullable=True),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("mentioned_user_id", sa.UUID(), nullable=True),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("hidden", sa.Boolean(), nullable=False, server_default="false"),
        sa.ForeignKeyConstraint(["post_id"], ["posts.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["parent_id"], ["comments.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_comments_post_top_level",
        "comments",
        ["post_id", sa.text("created_at DESC")],
        postgresql_where=sa.text("parent_id IS NULL"),
    )
    op.create_index("idx_comments_parent_id", "comments", ["parent_id", "created_at"])
    op.create_index(
        "idx_comments_author_id", "comments", ["author_id", sa.text("id DESC")]
    )

    # ========================================================================
    # LIKES / BOOKMARKS tables
    # ========================================================================
    for table in ("likes", "bookmarks"):
        op.create_table(
            table,
            sa.Column("user_id", sa.UUID(), nullable=False),
            sa.Column("post_id", sa.UUID(), nullable=False),
            sa.Column(
                "created_at",
                sa.TIMESTAMP(timezone=True),
                nullable=False,
                server_default=sa.text("NOW()"),
            ),
            sa.ForeignKeyConstraint(["post_id"], ["posts.id"], ondelete="CASCADE"),
            sa.PrimaryKeyConstraint("user_id", "post_id", name=f"pk_{table}"),
        )
        op.create_index(
            f"idx_{table}_user_created",
            table,
            ["user_id", sa.text("created_at DESC")],
        )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("bookmarks")
    op.drop_table("likes")
    op.drop_table("comments")
    op.drop_table("posts")
