"""initial schema

Revision ID: 5c1e0a9f3b21
Revises:
Create Date: 2026-10-18 09:12:40.118204

"""
from __future__ import annotations

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "5c1e0a9f3b21"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create identity, post and reply tables."""
    op.create_table(
        "identity",
        sa.Column("key", sa.String(length=32), nullable=False),
        sa.Column("points", sa.Integer(), nullable=False),
        sa.Column("banned", sa.Boolean(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("key"),
    )
    op.create_table(
        "post",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("mood", sa.String(length=64), nullable=False),
        sa.Column("text", sa.Text(), nullable=False),
        sa.Column("room", sa.String(length=32), nullable=False),
        sa.Column("author_key", sa.String(length=32), nullable=False),
        sa.Column("status", sa.String(length=16), nullable=False),
        sa.Column("report_count", sa.Integer(), nullable=False),
        sa.Column("reply_count", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_post_room", "post", ["room"])
    op.create_index("ix_post_author_key", "post", ["author_key"])
    op.create_index(
        "ix_post_status_room_reply_count",
        "post",
        ["status", "room", "reply_count"],
    )
    op.create_table(
        "reply",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("post_id", sa.Integer(), nullable=False),
        sa.Column("text", sa.Text(), nullable=False),
        sa.Column("responder_key", sa.String(length=32), nullable=False),
        sa.Column("is_author_reply", sa.Boolean(), nullable=False),
        sa.Column("status", sa.String(length=16), nullable=False),
        sa.Column("report_count", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["post_id"], ["post.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_reply_post_id", "reply", ["post_id"])
    op.create_index("ix_reply_responder_key", "reply", ["responder_key"])


def downgrade() -> None:
    """Drop all tables."""
    op.drop_index("ix_reply_responder_key", table_name="reply")
    op.drop_index("ix_reply_post_id", table_name="reply")
    op.drop_table("reply")
    op.drop_index("ix_post_status_room_reply_count", table_name="post")
    op.drop_index("ix_post_author_key", table_name="post")
    op.drop_index("ix_post_room", table_name="post")
    op.drop_table("post")
    op.drop_table("identity")
