"""SQLAlchemy-backed stores.

Counters are changed with ``UPDATE ... SET col = col + n`` so concurrent
requests never lose an increment, and the hide transition is a conditional
UPDATE evaluated by the database against the post-increment value.
"""
from __future__ import annotations

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from void_board.models import Identity, Post, Reply
from void_board.models.post import POST_STATUS_ACTIVE, POST_STATUS_DELETED, POST_STATUS_HIDDEN
from void_board.models.reply import (
    REPLY_STATUS_DELETED,
    REPLY_STATUS_HIDDEN,
    REPLY_STATUS_VISIBLE,
)
from void_board.services.moderation import REPORT_HIDE_THRESHOLD

__all__ = ["SqlContentStore", "SqlIdentityStore"]

_NO_SYNC = {"synchronize_session": False}


class SqlIdentityStore:
    """Identity persistence on a request-scoped session."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, key: str) -> Identity | None:
        return self.session.get(Identity, key, populate_existing=True)

    def get_or_create(self, key: str) -> tuple[Identity, bool]:
        identity = self.get(key)
        if identity is not None:
            return identity, False

        try:
            with self.session.begin_nested():
                identity = Identity(key=key, points=0, banned=False)
                self.session.add(identity)
        except IntegrityError:
            # A concurrent first request inserted the same key.
            identity = self.get(key)
            if identity is None:
                raise
            return identity, False
        return identity, True

    def add_points(self, key: str, delta: int) -> None:
        self.session.execute(
            update(Identity)
            .where(Identity.key == key)
            .values(points=Identity.points + delta)
            .execution_options(**_NO_SYNC)
        )

    def ban(self, key: str) -> Identity | None:
        result = self.session.execute(
            update(Identity)
            .where(Identity.key == key)
            .values(banned=True)
            .execution_options(**_NO_SYNC)
        )
        if result.rowcount == 0:
            return None
        return self.get(key)


class SqlContentStore:
    """Post and reply persistence on a request-scoped session."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def add_post(self, *, mood: str, text: str, room: str, author_key: str) -> Post:
        post = Post(
            mood=mood,
            text=text,
            room=room,
            author_key=author_key,
            status=POST_STATUS_ACTIVE,
            report_count=0,
            reply_count=0,
        )
        self.session.add(post)
        self.session.flush()
        return post

    def get_post(self, post_id: int) -> Post | None:
        return self.session.get(Post, post_id, populate_existing=True)

    def add_reply(
        self,
        *,
        post_id: int,
        text: str,
        responder_key: str,
        is_author_reply: bool,
    ) -> Reply:
        reply = Reply(
            post_id=post_id,
            text=text,
            responder_key=responder_key,
            is_author_reply=is_author_reply,
            status=REPLY_STATUS_VISIBLE,
            report_count=0,
        )
        self.session.add(reply)
        self.session.flush()
        return reply

    def increment_reply_count(self, post_id: int) -> None:
        self.session.execute(
            update(Post)
            .where(Post.id == post_id)
            .values(reply_count=Post.reply_count + 1)
            .execution_options(**_NO_SYNC)
        )

    def report_post(self, post_id: int) -> Post | None:
        result = self.session.execute(
            update(Post)
            .where(Post.id == post_id)
            .values(report_count=Post.report_count + 1)
            .execution_options(**_NO_SYNC)
        )
        if result.rowcount == 0:
            return None
        self.session.execute(
            update(Post)
            .where(
                Post.id == post_id,
                Post.report_count >= REPORT_HIDE_THRESHOLD,
                Post.status != POST_STATUS_DELETED,
            )
            .values(status=POST_STATUS_HIDDEN)
            .execution_options(**_NO_SYNC)
        )
        return self.get_post(post_id)

    def report_reply(self, reply_id: int) -> Reply | None:
        result = self.session.execute(
            update(Reply)
            .where(Reply.id == reply_id)
            .values(report_count=Reply.report_count + 1)
            .execution_options(**_NO_SYNC)
        )
        if result.rowcount == 0:
            return None
        self.session.execute(
            update(Reply)
            .where(
                Reply.id == reply_id,
                Reply.report_count >= REPORT_HIDE_THRESHOLD,
                Reply.status != REPLY_STATUS_DELETED,
            )
            .values(status=REPLY_STATUS_HIDDEN)
            .execution_options(**_NO_SYNC)
        )
        return self.session.get(Reply, reply_id, populate_existing=True)

    def candidate_pool(
        self,
        *,
        requester_key: str,
        room: str | None,
        limit: int,
    ) -> list[Post]:
        stmt = select(Post).where(
            Post.status == POST_STATUS_ACTIVE,
            Post.report_count < REPORT_HIDE_THRESHOLD,
            Post.author_key != requester_key,
        )
        if room is not None:
            stmt = stmt.where(Post.room == room)
        stmt = stmt.order_by(
            Post.reply_count.asc(),
            Post.created_at.desc(),
            Post.id.desc(),
        ).limit(limit)
        return list(self.session.scalars(stmt))

    def posts_by_author(self, author_key: str) -> list[Post]:
        stmt = (
            select(Post)
            .where(Post.author_key == author_key)
            .order_by(Post.created_at.desc(), Post.id.desc())
        )
        return list(self.session.scalars(stmt))

    def visible_replies(self, post_id: int) -> list[Reply]:
        stmt = (
            select(Reply)
            .where(Reply.post_id == post_id, Reply.status == REPLY_STATUS_VISIBLE)
            .order_by(Reply.created_at.asc(), Reply.id.asc())
        )
        return list(self.session.scalars(stmt))

    def replied_post_ids(self, responder_key: str) -> list[int]:
        stmt = (
            select(Reply.post_id)
            .where(
                Reply.responder_key == responder_key,
                Reply.is_author_reply.is_(False),
            )
            .distinct()
            .order_by(Reply.post_id.desc())
        )
        return list(self.session.scalars(stmt))

    def flagged_posts(self) -> list[Post]:
        stmt = (
            select(Post)
            .where(Post.report_count > 0)
            .order_by(Post.report_count.desc(), Post.id.desc())
        )
        return list(self.session.scalars(stmt))

    def flagged_replies(self) -> list[Reply]:
        stmt = (
            select(Reply)
            .where(Reply.report_count > 0)
            .order_by(Reply.report_count.desc(), Reply.id.desc())
        )
        return list(self.session.scalars(stmt))

    def delete_content_by(self, key: str) -> tuple[int, int]:
        posts = self.session.execute(
            update(Post)
            .where(Post.author_key == key)
            .values(status=POST_STATUS_DELETED)
            .execution_options(**_NO_SYNC)
        )
        replies = self.session.execute(
            update(Reply)
            .where(Reply.responder_key == key)
            .values(status=REPLY_STATUS_DELETED)
            .execution_options(**_NO_SYNC)
        )
        return posts.rowcount, replies.rowcount
