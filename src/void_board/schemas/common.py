"""Shared Pydantic schemas for common API elements."""
from __future__ import annotations

from pydantic import BaseModel


class StatusResponse(BaseModel):
    """Generic acknowledgement returned by mutating endpoints."""

    success: bool = True
    message: str | None = None
    shadow_banned: bool | None = None
