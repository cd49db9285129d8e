"""Random post matching.

A request gets one post drawn from a small pool of the loneliest, freshest
candidates:

1. keep only eligible posts (active, under the report threshold, not
   written by the requester, in the requested room);
2. order them by reply count ascending, newest first among equals;
3. keep the first ``MATCH_POOL_SIZE`` as the pool;
4. pick one uniformly at random from the pool.

Always serving the single least-replied post would send every concurrent
reader to the same whisper, while sampling across all eligible posts would
bury unanswered ones under traffic. Sampling from the head of the ordering
spreads readers over the top candidates and still favours lonely posts.
Replies increment ``reply_count``, which pushes answered posts back in the
ordering, so the policy balances itself without any scheduler.
"""

from __future__ import annotations

import random
from collections.abc import Iterable, Sequence
from datetime import datetime
from typing import TYPE_CHECKING

from void_board.db.time import as_utc
from void_board.models import Post
from void_board.models.post import ALL_ROOMS, POST_STATUS_ACTIVE
from void_board.services.moderation import REPORT_HIDE_THRESHOLD

if TYPE_CHECKING:
    from void_board.repositories.base import ContentStore

MATCH_POOL_SIZE = 50


def normalize_room_filter(room: str | None) -> str | None:
    """Return ``None`` for "no filter" (missing, empty or ``"all"``)."""
    if not room or room == ALL_ROOMS:
        return None
    return room


def is_eligible(post: Post, requester_key: str, room: str | None = None) -> bool:
    """Return whether ``post`` may be served to ``requester_key``."""
    if post.status != POST_STATUS_ACTIVE:
        return False
    if post.report_count >= REPORT_HIDE_THRESHOLD:
        return False
    if post.author_key == requester_key:
        return False
    room = normalize_room_filter(room)
    return room is None or post.room == room


def _timestamp(value: datetime) -> float:
    return as_utc(value).timestamp()


def match_order_key(post: Post) -> tuple[int, float, int]:
    """Sort key: fewest replies first, then newest, then highest id."""
    return (post.reply_count, -_timestamp(post.created_at), -(post.id or 0))


def build_pool(
    posts: Iterable[Post],
    requester_key: str,
    room: str | None = None,
    limit: int = MATCH_POOL_SIZE,
) -> list[Post]:
    """Filter, order and truncate ``posts`` in memory."""
    eligible = [post for post in posts if is_eligible(post, requester_key, room)]
    eligible.sort(key=match_order_key)
    return eligible[:limit]


def pick_from_pool(pool: Sequence[Post], rng: random.Random | None = None) -> Post | None:
    """Uniformly pick one post from ``pool``; ``None`` when it is empty."""
    if not pool:
        return None
    return (rng or random).choice(pool)


class MatchingService:
    """Selects the next whisper to surface to a reader. Read-only."""

    def __init__(self, store: ContentStore, rng: random.Random | None = None) -> None:
        self.store = store
        self.rng = rng or random.Random()

    def candidate_pool(self, requester_key: str, room: str | None = None) -> list[Post]:
        """Return the bounded, ordered pool the random pick is made from."""
        return self.store.candidate_pool(
            requester_key=requester_key,
            room=normalize_room_filter(room),
            limit=MATCH_POOL_SIZE,
        )

    def select_post(self, requester_key: str, room: str | None = None) -> Post | None:
        """Return one eligible post, or ``None`` when nothing is eligible.

        An empty result is a normal state, not an error. Unknown rooms simply
        match nothing.
        """
        return pick_from_pool(self.candidate_pool(requester_key, room), self.rng)
