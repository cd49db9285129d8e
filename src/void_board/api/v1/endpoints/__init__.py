# src/void_board/api/v1/endpoints/__init__.py
"""API endpoint modules for version 1."""

from .admin import router as admin_router
from .identity import router as identity_router
from .posts import router as posts_router
from .replies import router as replies_router
from .reports import router as reports_router
from .system import router as system_router

__all__ = [
    "admin_router",
    "identity_router",
    "posts_router",
    "replies_router",
    "reports_router",
    "system_router",
]
