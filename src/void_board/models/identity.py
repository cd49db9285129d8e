"""SQLAlchemy model for anonymous identities."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import Boolean, DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from void_board.db.session import Base
from void_board.db.time import utcnow


class Identity(Base):
    """Anonymous traveler keyed by a client-generated access key.

    There are no sessions or passwords: whoever holds the key is the
    identity. Rows are created lazily the first time a well-formed key is
    seen.
    """

    __tablename__ = "identity"

    key: Mapped[str] = mapped_column(String(32), primary_key=True)
    # Light points only ever grow; there is nothing to spend them on.
    points: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    # One-way flag, never cleared once set.
    banned: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )
