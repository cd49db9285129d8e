# src/void_board/main.py
"""Main entry point for the VOID application."""

from __future__ import annotations

import logging
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.staticfiles import StaticFiles

from void_board.api.errors import register_exception_handlers
from void_board.api.v1 import (
    admin_router,
    identity_router,
    posts_router,
    replies_router,
    reports_router,
    system_router,
)
from void_board.core.logging import configure_logging
from void_board.core.settings import settings
from void_board.db.session import create_tables

logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title="VOID API",
    description="Anonymous whisper board",
    version=settings.app_version,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)

# Add GZip middleware for compression
app.add_middleware(GZipMiddleware)

register_exception_handlers(app)

# Include API routers
app.include_router(identity_router, prefix="/api/v1")
app.include_router(posts_router, prefix="/api/v1")
app.include_router(replies_router, prefix="/api/v1")
app.include_router(reports_router, prefix="/api/v1")
app.include_router(admin_router, prefix="/api/v1")
app.include_router(system_router, prefix="/api/v1")


def _frontend_dir() -> Path | None:
    if not settings.frontend_dir:
        return None
    path = Path(settings.frontend_dir).resolve()
    return path if path.is_dir() else None


@app.on_event("startup")
async def on_startup() -> None:
    configure_logging(settings.log_level)
    if settings.auto_create_tables:
        create_tables()
    logger.info("%s online", settings.app_name)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint to verify the service is running."""
    return {"status": "ok"}


_FRONTEND = _frontend_dir()

if _FRONTEND is None:
    @app.get("/")
    async def root() -> dict[str, str]:
        """Root endpoint with basic information about the API."""
        return {
            "name": "VOID API",
            "version": settings.app_version,
            "description": "Anonymous whisper board",
            "docs": "/docs",
            "redoc": "/redoc",
        }
else:
    # Mounted last so API routes take precedence.
    app.mount("/", StaticFiles(directory=_FRONTEND, html=True), name="frontend")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("void_board.main:app", host="0.0.0.0", port=8000, reload=settings.debug)
