"""Translate service-level error kinds into HTTP responses."""
from __future__ import annotations

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from void_board.core.errors import (
    AccessDenied,
    NotFound,
    ShadowBanned,
    ValidationFailure,
    VoidError,
)
from void_board.schemas.common import StatusResponse

_STATUS_BY_ERROR: dict[type[VoidError], int] = {
    ValidationFailure: status.HTTP_400_BAD_REQUEST,
    NotFound: status.HTTP_404_NOT_FOUND,
    AccessDenied: status.HTTP_403_FORBIDDEN,
}


async def _void_error_handler(request: Request, exc: VoidError) -> JSONResponse:
    for error_type, status_code in _STATUS_BY_ERROR.items():
        if isinstance(exc, error_type):
            return JSONResponse(status_code=status_code, content={"detail": exc.detail})
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal error"},
    )


async def _shadow_banned_handler(request: Request, exc: ShadowBanned) -> JSONResponse:
    # Looks like success to the client; nothing was performed.
    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content=StatusResponse(success=True, shadow_banned=True).model_dump(exclude_none=True),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install handlers for every service error kind."""
    app.add_exception_handler(ShadowBanned, _shadow_banned_handler)
    app.add_exception_handler(VoidError, _void_error_handler)
