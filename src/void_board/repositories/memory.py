"""In-memory stores honoring the same contracts as the SQL stores.

Handy for unit tests and local experiments; nothing is persisted. A single
lock guards every read and write, so increments are never lost and readers
never iterate a dict while another thread grows it.
"""
from __future__ import annotations

import threading
from itertools import count

from void_board.db.time import utcnow
from void_board.models import Identity, Post, Reply
from void_board.models.post import POST_STATUS_ACTIVE, POST_STATUS_DELETED
from void_board.models.reply import REPLY_STATUS_DELETED, REPLY_STATUS_VISIBLE
from void_board.services.matching import build_pool
from void_board.services.moderation import apply_report

__all__ = ["MemoryContentStore", "MemoryIdentityStore"]


class MemoryIdentityStore:
    """Dictionary-backed identity store."""

    def __init__(self) -> None:
        self._identities: dict[str, Identity] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Identity | None:
        with self._lock:
            return self._identities.get(key)

    def get_or_create(self, key: str) -> tuple[Identity, bool]:
        with self._lock:
            identity = self._identities.get(key)
            if identity is not None:
                return identity, False
            identity = Identity(key=key, points=0, banned=False, created_at=utcnow())
            self._identities[key] = identity
            return identity, True

    def add_points(self, key: str, delta: int) -> None:
        with self._lock:
            identity = self._identities.get(key)
            if identity is not None:
                identity.points += delta

    def ban(self, key: str) -> Identity | None:
        with self._lock:
            identity = self._identities.get(key)
            if identity is not None:
                identity.banned = True
            return identity


class MemoryContentStore:
    """List-backed post and reply store."""

    def __init__(self) -> None:
        self.posts: dict[int, Post] = {}
        self.replies: dict[int, Reply] = {}
        self._post_ids = count(1)
        self._reply_ids = count(1)
        self._lock = threading.Lock()

    def add_post(self, *, mood: str, text: str, room: str, author_key: str) -> Post:
        with self._lock:
            post = Post(
                id=next(self._post_ids),
                mood=mood,
                text=text,
                room=room,
                author_key=author_key,
                status=POST_STATUS_ACTIVE,
                report_count=0,
                reply_count=0,
                created_at=utcnow(),
            )
            self.posts[post.id] = post
            return post

    def get_post(self, post_id: int) -> Post | None:
        with self._lock:
            return self.posts.get(post_id)

    def _post_snapshot(self) -> list[Post]:
        with self._lock:
            return list(self.posts.values())

    def _reply_snapshot(self) -> list[Reply]:
        with self._lock:
            return list(self.replies.values())

    def add_reply(
        self,
        *,
        post_id: int,
        text: str,
        responder_key: str,
        is_author_reply: bool,
    ) -> Reply:
        with self._lock:
            reply = Reply(
                id=next(self._reply_ids),
                post_id=post_id,
                text=text,
                responder_key=responder_key,
                is_author_reply=is_author_reply,
                status=REPLY_STATUS_VISIBLE,
                report_count=0,
                created_at=utcnow(),
            )
            self.replies[reply.id] = reply
            return reply

    def increment_reply_count(self, post_id: int) -> None:
        with self._lock:
            post = self.posts.get(post_id)
            if post is not None:
                post.reply_count += 1

    def report_post(self, post_id: int) -> Post | None:
        with self._lock:
            post = self.posts.get(post_id)
            return apply_report(post) if post is not None else None

    def report_reply(self, reply_id: int) -> Reply | None:
        with self._lock:
            reply = self.replies.get(reply_id)
            return apply_report(reply) if reply is not None else None

    def candidate_pool(
        self,
        *,
        requester_key: str,
        room: str | None,
        limit: int,
    ) -> list[Post]:
        return build_pool(self._post_snapshot(), requester_key, room, limit)

    def posts_by_author(self, author_key: str) -> list[Post]:
        posts = [post for post in self._post_snapshot() if post.author_key == author_key]
        return sorted(posts, key=lambda post: (post.created_at, post.id), reverse=True)

    def visible_replies(self, post_id: int) -> list[Reply]:
        return [
            reply
            for reply in self._reply_snapshot()
            if reply.post_id == post_id and reply.status == REPLY_STATUS_VISIBLE
        ]

    def replied_post_ids(self, responder_key: str) -> list[int]:
        ids = {
            reply.post_id
            for reply in self._reply_snapshot()
            if reply.responder_key == responder_key and not reply.is_author_reply
        }
        return sorted(ids, reverse=True)

    def flagged_posts(self) -> list[Post]:
        flagged = [post for post in self._post_snapshot() if post.report_count > 0]
        return sorted(flagged, key=lambda post: (post.report_count, post.id), reverse=True)

    def flagged_replies(self) -> list[Reply]:
        flagged = [reply for reply in self._reply_snapshot() if reply.report_count > 0]
        return sorted(flagged, key=lambda reply: (reply.report_count, reply.id), reverse=True)

    def delete_content_by(self, key: str) -> tuple[int, int]:
        with self._lock:
            posts = [post for post in self.posts.values() if post.author_key == key]
            replies = [reply for reply in self.replies.values() if reply.responder_key == key]
            for post in posts:
                post.status = POST_STATUS_DELETED
            for reply in replies:
                reply.status = REPLY_STATUS_DELETED
            return len(posts), len(replies)
