"""Reply-related Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ReplyCreate(BaseModel):
    """Schema for answering a whisper."""

    post_id: int | None = Field(None, description="Post being answered")
    text: str | None = Field(None, max_length=5000, description="Reply body")


class ReplyResponse(BaseModel):
    """Schema for a reply returned by the API."""

    id: int
    post_id: int
    text: str
    is_author_reply: bool
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
