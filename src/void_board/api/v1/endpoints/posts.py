# src/void_board/api/v1/endpoints/posts.py
"""Whisper endpoints: publishing and random matching."""

from fastapi import APIRouter, Query, Response, status

from void_board.api.v1.dependencies import (
    CurrentIdentityDep,
    MatchingServiceDep,
    SessionDep,
    WhisperServiceDep,
)
from void_board.models import Post
from void_board.schemas.post import PostCreate, PostResponse

router = APIRouter(prefix="/post", tags=["posts"])


@router.post("",
          response_model=PostResponse,
          status_code=status.HTTP_201_CREATED)
async def create_post(
    post_data: PostCreate,
    current_identity: CurrentIdentityDep,
    whispers: WhisperServiceDep,
    db: SessionDep,
) -> Post:
    """Publish a whisper; the author earns one light point.

    Args:
        post_data: Mood, text and optional room
        current_identity: Author of the whisper
        whispers: Whisper service
        db: Database session

    Returns:
        Created Post object

    Raises:
        ValidationFailure: If fields are missing or the text is prohibited
    """
    post = whispers.create_post(
        current_identity,
        mood=post_data.mood,
        text=post_data.text,
        room=post_data.room,
    )
    db.commit()
    db.refresh(post)
    return post


@router.get(
    "/random",
    response_model=PostResponse,
    responses={status.HTTP_204_NO_CONTENT: {"description": "No whisper to show"}},
)
async def get_random_post(
    current_identity: CurrentIdentityDep,
    matching: MatchingServiceDep,
    room: str | None = Query(None, description="Room filter; 'all' or absent for every room"),
) -> Post | Response:
    """Match the caller with a lonely, fresh whisper written by someone else."""
    post = matching.select_post(current_identity.key, room)
    if post is None:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return post
