"""Whisper lifecycle: posting, replying, reporting and the personal room."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

from void_board.core.errors import NotFound, ValidationFailure
from void_board.models import Identity, Post, Reply
from void_board.models.post import POST_STATUS_HIDDEN, coerce_room
from void_board.models.reply import REPLY_STATUS_HIDDEN
from void_board.repositories.base import ContentStore, IdentityStore
from void_board.services.identity import RewardAction, reward_for
from void_board.services.moderation import REPORT_HIDE_THRESHOLD, is_text_admissible

logger = logging.getLogger(__name__)

_HIDDEN_STATUSES = frozenset({POST_STATUS_HIDDEN, REPLY_STATUS_HIDDEN})


class ReportTarget(str, Enum):
    """Kinds of content that can be reported."""

    POST = "post"
    REPLY = "reply"


@dataclass
class PostThread:
    """A post together with its currently visible replies."""

    post: Post
    replies: list[Reply] = field(default_factory=list)


@dataclass
class RoomView:
    """Everything shown in a traveler's personal room."""

    my_posts: list[PostThread]
    my_interactions: list[PostThread]


def _require_text(value: str | None, detail: str) -> str:
    if value is None or not value.strip():
        raise ValidationFailure(detail)
    return value


class WhisperService:
    """Coordinates the content and identity stores for mutating operations.

    Every check runs before the first write, so a rejected request leaves
    both stores untouched. Callers commit the unit of work afterwards.
    """

    def __init__(self, content: ContentStore, identities: IdentityStore) -> None:
        self.content = content
        self.identities = identities

    def create_post(
        self,
        identity: Identity,
        *,
        mood: str | None,
        text: str | None,
        room: str | None = None,
    ) -> Post:
        """Publish a whisper and reward its author.

        Raises:
            ValidationFailure: On missing fields or prohibited content.
        """
        mood = _require_text(mood, "Empty fields")
        text = _require_text(text, "Empty fields")
        if not is_text_admissible(text):
            raise ValidationFailure("Harmful content detected")

        post = self.content.add_post(
            mood=mood,
            text=text,
            room=coerce_room(room),
            author_key=identity.key,
        )
        self.identities.add_points(identity.key, reward_for(RewardAction.POST))
        return post

    def create_reply(
        self,
        identity: Identity,
        *,
        post_id: int | None,
        text: str | None,
    ) -> Reply:
        """Answer a whisper, making it less likely to be matched again.

        Raises:
            ValidationFailure: On missing fields or prohibited content.
            NotFound: If the post does not exist.
        """
        if post_id is None:
            raise ValidationFailure("Missing data")
        text = _require_text(text, "Missing data")
        if not is_text_admissible(text):
            raise ValidationFailure("Harmful content detected")

        post = self.content.get_post(post_id)
        if post is None:
            raise NotFound("Post not found")

        reply = self.content.add_reply(
            post_id=post.id,
            text=text,
            responder_key=identity.key,
            is_author_reply=post.author_key == identity.key,
        )
        self.content.increment_reply_count(post.id)
        self.identities.add_points(identity.key, reward_for(RewardAction.REPLY))
        return reply

    def report(self, target: ReportTarget | str, entity_id: int) -> Post | Reply:
        """Count a report against a post or reply.

        Raises:
            ValidationFailure: If ``target`` is not a reportable kind.
            NotFound: If the entity does not exist.
        """
        try:
            target = ReportTarget(target)
        except ValueError as exc:
            raise ValidationFailure("Unknown report type") from exc

        if target is ReportTarget.POST:
            entity: Post | Reply | None = self.content.report_post(entity_id)
        else:
            entity = self.content.report_reply(entity_id)

        if entity is None:
            raise NotFound(f"{target.value.capitalize()} not found")
        if entity.report_count == REPORT_HIDE_THRESHOLD and entity.status in _HIDDEN_STATUSES:
            logger.info("Hid %s %s after %d reports", target.value, entity_id, entity.report_count)
        return entity

    def my_room(self, identity: Identity) -> RoomView:
        """Return the traveler's own whispers and the ones they answered."""
        my_posts = [
            PostThread(post=post, replies=self.content.visible_replies(post.id))
            for post in self.content.posts_by_author(identity.key)
        ]

        interactions: list[PostThread] = []
        for post_id in self.content.replied_post_ids(identity.key):
            post = self.content.get_post(post_id)
            if post is None:
                continue
            interactions.append(
                PostThread(post=post, replies=self.content.visible_replies(post_id))
            )

        return RoomView(my_posts=my_posts, my_interactions=interactions)
