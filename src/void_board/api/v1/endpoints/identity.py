# src/void_board/api/v1/endpoints/identity.py
"""Endpoints describing the calling traveler."""

from fastapi import APIRouter

from void_board.api.v1.dependencies import CurrentIdentityDep, WhisperServiceDep
from void_board.schemas.identity import ProfileResponse
from void_board.schemas.post import RoomResponse

router = APIRouter(tags=["identity"])


@router.get("/me", response_model=ProfileResponse)
async def get_profile(current_identity: CurrentIdentityDep) -> ProfileResponse:
    """Return the caller's light points."""
    return ProfileResponse(light_points=current_identity.points)


@router.get("/my-room", response_model=RoomResponse)
async def get_my_room(
    current_identity: CurrentIdentityDep,
    whispers: WhisperServiceDep,
) -> RoomResponse:
    """Return the caller's whispers and the whispers they answered.

    Each entry carries only the replies that are still visible.
    """
    view = whispers.my_room(current_identity)
    return RoomResponse.model_validate(view, from_attributes=True)
