"""add_reports

Moderation reports against a post or a comment, with a review status and
moderator notes.

Revision ID: 8e4b7a21c5d3
Revises: 3c1d2f6a9b40
Create Date: 2026-10-17 15:40:02.731904

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "8e4b7a21c5d3"
down_revision: Union[str, Sequence[str], None] = "3c1d2f6a9b40"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "reports",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("reporter_id", sa.UUID(), nullable=False),
        sa.Column("reason", sa.String(50), nullable=False),
        sa.Column("post_id", sa.UUID(), nullable=True),
        sa.Column("comment_id", sa.Integer(), nullable=True),
        sa.Column(
            "status", sa.String(20), nullable=False, server_default="pending"
        ),
        sa.Column("moderator_notes", sa.Text(), nullable=True),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["post_id"], ["posts.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["comment_id"], ["comments.id"], ondelete="CASCADE"),
        sa.CheckConstraint(
            "(post_id IS NULL) <> (comment_id IS NULL)",
            name="ck_reports_single_target",
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_reports_created_at_id",
        "reports",
        [sa.text("created_at DESC"), sa.text("id DESC")],
    )
    op.create_index("idx_reports_status", "reports", ["status"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("reports")
