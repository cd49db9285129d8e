# tests/test_matching.py
"""Tests for the random post-matching engine."""

from __future__ import annotations

import random
from datetime import UTC, datetime, timedelta

import pytest

from void_board.models import Post
from void_board.repositories import MemoryContentStore
from void_board.services.matching import (
    MATCH_POOL_SIZE,
    MatchingService,
    build_pool,
    is_eligible,
    match_order_key,
    normalize_room_filter,
    pick_from_pool,
)
from void_board.services.moderation import apply_report

AUTHOR = "VOID-AUTH-AUTH-AUTH"
READER = "VOID-READ-READ-READ"
BASE = datetime(2026, 3, 1, tzinfo=UTC)


def _seed(
    store: MemoryContentStore,
    count: int,
    *,
    author: str = AUTHOR,
    room: str = "general",
) -> list[Post]:
    posts = []
    for index in range(count):
        post = store.add_post(mood="sad", text=f"whisper {index}", room=room, author_key=author)
        post.reply_count = (index * 7) % 4
        post.created_at = BASE + timedelta(minutes=index)
        posts.append(post)
    return posts


def _expected_pool(posts: list[Post]) -> list[Post]:
    ordered = sorted(posts, key=lambda p: (p.reply_count, -p.created_at.timestamp()))
    return ordered[:MATCH_POOL_SIZE]


def test_normalize_room_filter() -> None:
    assert normalize_room_filter(None) is None
    assert normalize_room_filter("") is None
    assert normalize_room_filter("all") is None
    assert normalize_room_filter("love") == "love"
    assert normalize_room_filter("nonexistent") == "nonexistent"


def test_order_prefers_fewest_replies_then_newest(memory_content: MemoryContentStore) -> None:
    old_lonely, new_lonely, answered = _seed(memory_content, 3)
    old_lonely.reply_count = 0
    new_lonely.reply_count = 0
    answered.reply_count = 1
    answered.created_at = BASE + timedelta(days=1)

    pool = build_pool(memory_content.posts.values(), READER)

    assert pool == [new_lonely, old_lonely, answered]
    assert sorted([answered, old_lonely, new_lonely], key=match_order_key) == pool


@pytest.mark.parametrize("room", [None, "all", "general", "love", "nonexistent"])
def test_own_posts_are_never_selected(memory_content: MemoryContentStore, room: str | None) -> None:
    _seed(memory_content, 10, author=READER)
    _seed(memory_content, 5, author=READER, room="love")
    service = MatchingService(memory_content, rng=random.Random(7))

    for _ in range(50):
        assert service.select_post(READER, room) is None


def test_own_posts_are_skipped_among_others(memory_content: MemoryContentStore) -> None:
    mine = _seed(memory_content, 20, author=READER)
    others = _seed(memory_content, 20)
    service = MatchingService(memory_content, rng=random.Random(11))

    for _ in range(200):
        picked = service.select_post(READER)
        assert picked is not None
        assert picked not in mine
        assert picked in others


@pytest.mark.parametrize("total", [1, 49, 50, 200])
def test_pick_is_always_inside_pool(memory_content: MemoryContentStore, total: int) -> None:
    posts = _seed(memory_content, total)
    expected = _expected_pool(posts)
    service = MatchingService(memory_content, rng=random.Random(total))

    pool = service.candidate_pool(READER)
    assert pool == expected
    assert len(pool) == min(total, MATCH_POOL_SIZE)

    allowed = {post.id for post in expected}
    for _ in range(300):
        picked = service.select_post(READER)
        assert picked is not None
        assert picked.id in allowed


def test_every_pool_member_can_be_picked(memory_content: MemoryContentStore) -> None:
    _seed(memory_content, 10)
    service = MatchingService(memory_content, rng=random.Random(3))

    seen = {service.select_post(READER).id for _ in range(500)}

    assert seen == {post.id for post in memory_content.posts.values()}


def test_empty_room_returns_no_content(memory_content: MemoryContentStore) -> None:
    _seed(memory_content, 5, author=READER, room="work")
    _seed(memory_content, 5, room="life")
    service = MatchingService(memory_content)

    assert service.select_post(READER, "work") is None
    assert service.select_post(READER, "life") is not None


def test_unknown_room_matches_nothing(memory_content: MemoryContentStore) -> None:
    _seed(memory_content, 5)
    assert MatchingService(memory_content).select_post(READER, "nonexistent") is None


def test_room_filter_restricts_candidates(memory_content: MemoryContentStore) -> None:
    _seed(memory_content, 5, room="general")
    love = _seed(memory_content, 5, room="love")
    service = MatchingService(memory_content, rng=random.Random(5))

    for _ in range(100):
        assert service.select_post(READER, "love") in love


def test_hidden_deleted_and_reported_posts_are_ineligible(
    memory_content: MemoryContentStore,
) -> None:
    hidden, deleted, reported, fine = _seed(memory_content, 4)
    hidden.status = "hidden"
    deleted.status = "deleted"
    reported.report_count = 3

    assert not is_eligible(hidden, READER)
    assert not is_eligible(deleted, READER)
    assert not is_eligible(reported, READER)
    assert is_eligible(fine, READER)
    assert MatchingService(memory_content).candidate_pool(READER) == [fine]


def test_third_report_removes_post_from_matching(memory_content: MemoryContentStore) -> None:
    (post,) = _seed(memory_content, 1)
    service = MatchingService(memory_content)

    memory_content.report_post(post.id)
    memory_content.report_post(post.id)
    assert service.select_post(READER) is post

    memory_content.report_post(post.id)
    assert service.select_post(READER) is None


def test_selection_is_read_only(memory_content: MemoryContentStore) -> None:
    posts = _seed(memory_content, 5)
    before = [(p.reply_count, p.report_count, p.status) for p in posts]

    for _ in range(20):
        MatchingService(memory_content).select_post(READER)

    assert [(p.reply_count, p.report_count, p.status) for p in posts] == before


def test_replies_push_posts_out_of_the_pool(memory_content: MemoryContentStore) -> None:
    posts = _seed(memory_content, MATCH_POOL_SIZE + 1)
    for post in posts:
        post.reply_count = 0
    oldest = posts[0]
    assert oldest not in MatchingService(memory_content).candidate_pool(READER)

    # Answer every other post once; the untouched oldest one moves to the front.
    for post in posts[1:]:
        memory_content.increment_reply_count(post.id)

    pool = MatchingService(memory_content).candidate_pool(READER)
    assert pool[0] is oldest


def test_pick_from_empty_pool() -> None:
    assert pick_from_pool([]) is None


def test_apply_report_is_the_memory_store_policy(memory_content: MemoryContentStore) -> None:
    (post,) = _seed(memory_content, 1)
    twin = Post(report_count=0, status="active")
    for _ in range(3):
        memory_content.report_post(post.id)
        apply_report(twin)
    assert (post.report_count, post.status) == (twin.report_count, twin.status)


def test_order_key_treats_naive_timestamps_as_utc() -> None:
    aware = Post(id=1, reply_count=0, created_at=BASE)
    naive = Post(id=2, reply_count=0, created_at=(BASE + timedelta(hours=1)).replace(tzinfo=None))

    assert sorted([aware, naive], key=match_order_key) == [naive, aware]
