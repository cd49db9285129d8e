"""System and transparency endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from void_board.core.settings import settings
from void_board.models.post import DEFAULT_ROOM, ROOMS
from void_board.services.identity import REWARDS
from void_board.services.matching import MATCH_POOL_SIZE
from void_board.services.moderation import REPORT_HIDE_THRESHOLD

router = APIRouter(prefix="/system", tags=["system", "transparency"])


@router.get("/config")
async def get_public_config() -> dict[str, object]:
    """Return a sanitized snapshot of the public policy constants.

    Excludes secrets and connection strings; suitable for client UIs.
    """
    return {
        "app": {
            "name": settings.app_name,
            "version": settings.app_version,
        },
        "rooms": {
            "available": list(ROOMS),
            "default": DEFAULT_ROOM,
        },
        "matching": {"pool_size": MATCH_POOL_SIZE},
        "moderation": {"report_hide_threshold": REPORT_HIDE_THRESHOLD},
        "rewards": {action.value: points for action, points in REWARDS.items()},
    }
