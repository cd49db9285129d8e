# src/void_board/api/v1/endpoints/reports.py
"""Content reporting endpoints."""

from fastapi import APIRouter

from void_board.api.v1.dependencies import CurrentIdentityDep, SessionDep, WhisperServiceDep
from void_board.schemas.common import StatusResponse
from void_board.schemas.report import ReportCreate

router = APIRouter(prefix="/report", tags=["moderation"])


@router.post("", response_model=StatusResponse, response_model_exclude_none=True)
async def report_content(
    report_data: ReportCreate,
    current_identity: CurrentIdentityDep,
    whispers: WhisperServiceDep,
    db: SessionDep,
) -> StatusResponse:
    """Report a post or reply; three reports hide it."""
    whispers.report(report_data.type, report_data.id)
    db.commit()
    return StatusResponse(success=True, message="Reported.")
