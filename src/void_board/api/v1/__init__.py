"""Version 1 API endpoints."""

from .endpoints import (
    admin_router,
    identity_router,
    posts_router,
    replies_router,
    reports_router,
    system_router,
)

__all__ = [
    "admin_router",
    "identity_router",
    "posts_router",
    "replies_router",
    "reports_router",
    "system_router",
]
