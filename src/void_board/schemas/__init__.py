"""
Pydantic schemas for API request/response models.

These schemas define the structure of API data for serialization and validation.
"""

from .admin import BanRequest, DashboardResponse
from .common import StatusResponse
from .identity import ProfileResponse
from .post import PostCreate, PostResponse, PostThreadResponse, RoomResponse
from .reply import ReplyCreate, ReplyResponse
from .report import ReportCreate

__all__ = [
    "BanRequest", "DashboardResponse",
    "StatusResponse",
    "ProfileResponse",
    "PostCreate", "PostResponse", "PostThreadResponse", "RoomResponse",
    "ReplyCreate", "ReplyResponse",
    "ReportCreate",
]
