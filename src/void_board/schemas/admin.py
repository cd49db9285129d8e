"""Admin-related Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class FlaggedPost(BaseModel):
    """Reported post as seen by administrators, author key included."""

    id: int
    mood: str
    text: str
    room: str
    author_key: str
    status: str
    report_count: int
    reply_count: int
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class FlaggedReply(BaseModel):
    """Reported reply as seen by administrators."""

    id: int
    post_id: int
    text: str
    responder_key: str
    status: str
    report_count: int
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class DashboardResponse(BaseModel):
    flagged_posts: list[FlaggedPost]
    flagged_replies: list[FlaggedReply]

    model_config = ConfigDict(from_attributes=True)


class BanRequest(BaseModel):
    """Schema for banning an identity."""

    token: str = Field(..., min_length=1, description="Access key to ban")
    delete_content: bool = Field(False, description="Also soft-delete everything they wrote")
