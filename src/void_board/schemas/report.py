"""Report-related Pydantic schemas."""

from typing import Literal

from pydantic import BaseModel, Field


class ReportCreate(BaseModel):
    """Schema for reporting a post or a reply."""

    type: Literal["post", "reply"] = Field(..., description="Kind of content reported")
    id: int = Field(..., description="Identifier of the reported content")
