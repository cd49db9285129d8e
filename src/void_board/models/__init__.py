# src/void_board/models/__init__.py
"""SQLAlchemy models for the VOID board."""

from .identity import Identity
from .post import Post
from .reply import Reply

__all__ = [
    "Identity",
    "Post",
    "Reply",
]
