# src/void_board/schemas/post.py
"""Post-related Pydantic schemas."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .reply import ReplyResponse


class PostCreate(BaseModel):
    """Schema for publishing a whisper.

    Unknown rooms are accepted here and coerced to the default room later.
    """

    mood: str | None = Field(None, max_length=64, description="Short mood label")
    text: str | None = Field(None, max_length=5000, description="Whisper body")
    room: str | None = Field(None, description="Room tag")

    @field_validator("room", mode="before")
    @classmethod
    def room_as_text(cls, value: Any) -> str | None:
        # Anything but text counts as an unknown room.
        return value if isinstance(value, str) else None


class PostResponse(BaseModel):
    """Schema for a whisper returned by the API.

    The author key is never exposed.
    """

    id: int
    mood: str
    text: str
    room: str
    status: str
    reply_count: int
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class PostThreadResponse(BaseModel):
    """A whisper with its visible replies."""

    post: PostResponse
    replies: list[ReplyResponse]

    model_config = ConfigDict(from_attributes=True)


class RoomResponse(BaseModel):
    """The traveler's personal room."""

    my_posts: list[PostThreadResponse]
    my_interactions: list[PostThreadResponse]

    model_config = ConfigDict(from_attributes=True)
