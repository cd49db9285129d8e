"""Tests for the sample data script."""

import random

from sqlalchemy.orm import Session

from void_board.models import Identity, Post
from void_board.scripts.seed import SEED_WHISPERS, seed


def test_seed_inserts_samples_and_extras(db_session: Session) -> None:
    created = seed(db_session, extras=5, rng=random.Random(7))

    assert created == len(SEED_WHISPERS) + 5
    assert db_session.query(Post).count() == created
    assert db_session.query(Identity).count() == 1


def test_seed_coerces_unknown_rooms(db_session: Session) -> None:
    seed(db_session, extras=0)

    rooms = {post.room for post in db_session.query(Post)}
    assert "career" not in rooms
    assert rooms <= {"general", "love", "work", "family", "life"}
    degree = db_session.query(Post).filter(Post.text.contains("degree")).one()
    assert degree.room == "general"
