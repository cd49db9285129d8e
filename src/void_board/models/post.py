"""SQLAlchemy model for whispers (posts) and the closed room set."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from void_board.db.session import Base
from void_board.db.time import utcnow

POST_STATUS_ACTIVE = "active"
POST_STATUS_HIDDEN = "hidden"
POST_STATUS_DELETED = "deleted"

DEFAULT_ROOM = "general"
ROOMS: tuple[str, ...] = ("general", "love", "work", "family", "life")
ALL_ROOMS = "all"


def coerce_room(value: str | None) -> str:
    """Map any incoming room value onto the closed room set.

    Unknown or missing values silently become the default room.
    """
    if value in ROOMS:
        return value
    return DEFAULT_ROOM


class Post(Base):
    """A whisper: short anonymous text tagged with a mood and a room."""

    __tablename__ = "post"
    __table_args__ = (
        # Matches the matching-engine query: filter, then order by replies.
        Index("ix_post_status_room_reply_count", "status", "room", "reply_count"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    mood: Mapped[str] = mapped_column(String(64), nullable=False)
    text: Mapped[str] = mapped_column(Text, nullable=False)
    room: Mapped[str] = mapped_column(
        String(32),
        nullable=False,
        default=DEFAULT_ROOM,
        index=True,
    )
    # Plain reference, not a foreign key: posts belong to nobody.
    author_key: Mapped[str] = mapped_column(String(32), nullable=False, index=True)

    # active -> hidden (report threshold) | deleted (admin ban)
    status: Mapped[str] = mapped_column(
        String(16),
        nullable=False,
        default=POST_STATUS_ACTIVE,
    )
    report_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    # Counts every reply ever created; used only to throttle matching.
    reply_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )
