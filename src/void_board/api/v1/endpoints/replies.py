# src/void_board/api/v1/endpoints/replies.py
"""Reply endpoints."""

from fastapi import APIRouter

from void_board.api.v1.dependencies import CurrentIdentityDep, SessionDep, WhisperServiceDep
from void_board.schemas.common import StatusResponse
from void_board.schemas.reply import ReplyCreate

router = APIRouter(prefix="/reply", tags=["replies"])


@router.post("", response_model=StatusResponse, response_model_exclude_none=True)
async def create_reply(
    reply_data: ReplyCreate,
    current_identity: CurrentIdentityDep,
    whispers: WhisperServiceDep,
    db: SessionDep,
) -> StatusResponse:
    """Answer a whisper; the responder earns five light points."""
    whispers.create_reply(
        current_identity,
        post_id=reply_data.post_id,
        text=reply_data.text,
    )
    db.commit()
    return StatusResponse(success=True)
