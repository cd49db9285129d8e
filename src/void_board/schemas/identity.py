"""Identity-related Pydantic schemas."""

from pydantic import BaseModel


class ProfileResponse(BaseModel):
    """What a traveler may learn about themselves."""

    light_points: int
