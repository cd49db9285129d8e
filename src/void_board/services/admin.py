"""Administrative moderation: flagged-content dashboard and bans."""
from __future__ import annotations

import logging
import secrets
from dataclasses import dataclass

from void_board.core.errors import AccessDenied, NotFound
from void_board.core.logging import redact_key
from void_board.models import Identity, Post, Reply
from void_board.repositories.base import ContentStore, IdentityStore

logger = logging.getLogger(__name__)


def check_admin_key(provided: str | None, expected: str | None) -> None:
    """Refuse unless ``provided`` matches the configured admin key.

    An unset admin key refuses everyone.

    Raises:
        AccessDenied: With a generic message on any mismatch.
    """
    if not expected or not provided:
        raise AccessDenied()
    if not secrets.compare_digest(provided.encode("utf-8"), expected.encode("utf-8")):
        raise AccessDenied()


@dataclass
class Dashboard:
    """Reported content, most-reported first."""

    flagged_posts: list[Post]
    flagged_replies: list[Reply]


@dataclass
class BanResult:
    identity: Identity
    deleted_posts: int = 0
    deleted_replies: int = 0


class AdminService:
    """Operations reserved for holders of the admin key."""

    def __init__(self, content: ContentStore, identities: IdentityStore) -> None:
        self.content = content
        self.identities = identities

    def dashboard(self) -> Dashboard:
        return Dashboard(
            flagged_posts=self.content.flagged_posts(),
            flagged_replies=self.content.flagged_replies(),
        )

    def ban(self, key: str, *, delete_content: bool = False) -> BanResult:
        """Ban an identity and optionally soft-delete everything it wrote.

        Raises:
            NotFound: If no identity holds ``key``.
        """
        identity = self.identities.ban(key)
        if identity is None:
            raise NotFound("Identity not found")

        result = BanResult(identity=identity)
        if delete_content:
            result.deleted_posts, result.deleted_replies = self.content.delete_content_by(key)
        logger.info(
            "Banned %s (deleted %d posts, %d replies)",
            redact_key(key),
            result.deleted_posts,
            result.deleted_replies,
        )
        return result
