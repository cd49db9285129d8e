"""Store interfaces consumed by the service layer.

Every counter change goes through an increment method so implementations
can apply it atomically; callers never read a counter, add to it and write
it back.
"""
from __future__ import annotations

from typing import Protocol

from void_board.models import Identity, Post, Reply

__all__ = ["ContentStore", "IdentityStore"]


class IdentityStore(Protocol):
    """Key -> identity record store with insert-on-first-sight semantics."""

    def get(self, key: str) -> Identity | None:
        """Return the identity for ``key`` or ``None``."""
        ...

    def get_or_create(self, key: str) -> tuple[Identity, bool]:
        """Return ``(identity, created)``, inserting a zero-point identity if unseen."""
        ...

    def add_points(self, key: str, delta: int) -> None:
        """Atomically add ``delta`` light points."""
        ...

    def ban(self, key: str) -> Identity | None:
        """Set the ban flag; ``None`` when the key is unknown."""
        ...


class ContentStore(Protocol):
    """Posts and replies with their moderation counters."""

    def add_post(self, *, mood: str, text: str, room: str, author_key: str) -> Post:
        ...

    def get_post(self, post_id: int) -> Post | None:
        ...

    def add_reply(
        self,
        *,
        post_id: int,
        text: str,
        responder_key: str,
        is_author_reply: bool,
    ) -> Reply:
        ...

    def increment_reply_count(self, post_id: int) -> None:
        ...

    def report_post(self, post_id: int) -> Post | None:
        """Count one report and hide the post once the threshold is reached."""
        ...

    def report_reply(self, reply_id: int) -> Reply | None:
        """Count one report and hide the reply once the threshold is reached."""
        ...

    def candidate_pool(
        self,
        *,
        requester_key: str,
        room: str | None,
        limit: int,
    ) -> list[Post]:
        """Return up to ``limit`` eligible posts, fewest replies first, newest first on ties."""
        ...

    def posts_by_author(self, author_key: str) -> list[Post]:
        ...

    def visible_replies(self, post_id: int) -> list[Reply]:
        ...

    def replied_post_ids(self, responder_key: str) -> list[int]:
        """Distinct ids of posts the key answered as a non-author."""
        ...

    def flagged_posts(self) -> list[Post]:
        ...

    def flagged_replies(self) -> list[Reply]:
        ...

    def delete_content_by(self, key: str) -> tuple[int, int]:
        """Soft-delete every post and reply by ``key``; return both counts."""
        ...
