# src/void_board/api/v1/endpoints/admin.py
"""Administrative endpoints guarded by the admin key."""

from fastapi import APIRouter, Depends

from void_board.api.v1.dependencies import AdminServiceDep, SessionDep, require_admin
from void_board.schemas.admin import BanRequest, DashboardResponse
from void_board.schemas.common import StatusResponse

router = APIRouter(
    prefix="/admin",
    tags=["admin"],
    dependencies=[Depends(require_admin)],
)


@router.get("/dashboard", response_model=DashboardResponse)
async def get_dashboard(admin: AdminServiceDep) -> DashboardResponse:
    """List every reported post and reply, most-reported first."""
    return DashboardResponse.model_validate(admin.dashboard(), from_attributes=True)


@router.delete("/ban", response_model=StatusResponse, response_model_exclude_none=True)
async def ban_identity(
    ban_data: BanRequest,
    admin: AdminServiceDep,
    db: SessionDep,
) -> StatusResponse:
    """Ban a traveler, optionally soft-deleting everything they wrote."""
    admin.ban(ban_data.token, delete_content=ban_data.delete_content)
    db.commit()
    return StatusResponse(success=True, message="User banished.")
