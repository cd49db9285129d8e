"""SQLAlchemy model for replies to whispers."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from void_board.db.session import Base
from void_board.db.time import utcnow

REPLY_STATUS_VISIBLE = "visible"
REPLY_STATUS_HIDDEN = "hidden"
REPLY_STATUS_DELETED = "deleted"


class Reply(Base):
    """A response attached to a post.

    Deletion is soft on both sides, so no cascade is configured.
    """

    __tablename__ = "reply"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    post_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("post.id"),
        nullable=False,
        index=True,
    )
    text: Mapped[str] = mapped_column(Text, nullable=False)
    responder_key: Mapped[str] = mapped_column(String(32), nullable=False, index=True)
    # Fixed at creation: the post author answering their own whisper.
    is_author_reply: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    status: Mapped[str] = mapped_column(
        String(16),
        nullable=False,
        default=REPLY_STATUS_VISIBLE,
    )
    report_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )
