# tests/conftest.py
from __future__ import annotations

import os
from collections.abc import Callable, Generator, Iterator
from datetime import UTC, datetime, timedelta
from itertools import count
from typing import Any

import pytest

os.environ.setdefault("PYTEST_RUNNING", "true")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("AUTO_CREATE_TABLES", "false")

from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from void_board.core.settings import settings
from void_board.db.session import Base
from void_board.db.session import get_db as app_get_session
from void_board.main import app as fastapi_app
from void_board.models import Identity, Post, Reply
from void_board.models.post import POST_STATUS_ACTIVE
from void_board.models.reply import REPLY_STATUS_VISIBLE
from void_board.repositories import MemoryContentStore, MemoryIdentityStore
from void_board.services.identity import generate_key

TEST_DB_URL = "sqlite://"
TEST_ADMIN_KEY = "test-admin-key"

_BASE_TIME = datetime(2026, 1, 1, tzinfo=UTC)
_TICKS = count(1)


def next_timestamp() -> datetime:
    """Return strictly increasing creation times for fixtures."""
    return _BASE_TIME + timedelta(seconds=next(_TICKS))


@pytest.fixture()
def engine() -> Generator[Engine, None, None]:
    engine = create_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(
        bind=engine,
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
    )


@pytest.fixture()
def db_session(session_factory: sessionmaker[Session]) -> Iterator[Session]:
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="session")
def app() -> FastAPI:
    return fastapi_app


@pytest.fixture(autouse=True)
def override_session_dependency(app: FastAPI, db_session: Session) -> Iterator[None]:
    def _get_session_override() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[app_get_session] = _get_session_override
    try:
        yield
    finally:
        app.dependency_overrides.pop(app_get_session, None)


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test") as test_client:
        yield test_client


@pytest.fixture()
def admin_key(monkeypatch: pytest.MonkeyPatch) -> str:
    """Configure a known admin key for the duration of a test."""
    monkeypatch.setattr(settings, "admin_key", TEST_ADMIN_KEY)
    return TEST_ADMIN_KEY


@pytest.fixture()
def void_key() -> str:
    """Return a fresh, well-formed access key for the primary traveler."""
    return generate_key()


@pytest.fixture()
def other_key() -> str:
    """Return a fresh, well-formed access key for a second traveler."""
    return generate_key()


@pytest.fixture()
def auth_headers(void_key: str) -> dict[str, str]:
    return {"x-void-key": void_key}


@pytest.fixture()
def other_auth_headers(other_key: str) -> dict[str, str]:
    return {"x-void-key": other_key}


@pytest.fixture()
def identity(db_session: Session, void_key: str) -> Identity:
    """Persist the primary traveler."""
    record = Identity(key=void_key, points=0, banned=False)
    db_session.add(record)
    db_session.commit()
    return record


@pytest.fixture()
def make_post(db_session: Session) -> Callable[..., Post]:
    """Return a factory inserting posts with explicit counters and timestamps."""

    def _make_post(**overrides: Any) -> Post:
        values: dict[str, Any] = {
            "mood": "sad",
            "text": "Sometimes I just want a hug.",
            "room": "general",
            "author_key": "VOID-SEED-SEED-SEED",
            "status": POST_STATUS_ACTIVE,
            "report_count": 0,
            "reply_count": 0,
            "created_at": next_timestamp(),
        }
        values.update(overrides)
        post = Post(**values)
        db_session.add(post)
        db_session.commit()
        return post

    return _make_post


@pytest.fixture()
def make_reply(db_session: Session) -> Callable[..., Reply]:
    """Return a factory inserting replies directly."""

    def _make_reply(post: Post, **overrides: Any) -> Reply:
        values: dict[str, Any] = {
            "post_id": post.id,
            "text": "You are not alone.",
            "responder_key": "VOID-RESP-RESP-RESP",
            "is_author_reply": False,
            "status": REPLY_STATUS_VISIBLE,
            "report_count": 0,
            "created_at": next_timestamp(),
        }
        values.update(overrides)
        reply = Reply(**values)
        db_session.add(reply)
        db_session.commit()
        return reply

    return _make_reply


@pytest.fixture()
def memory_content() -> MemoryContentStore:
    return MemoryContentStore()


@pytest.fixture()
def memory_identities() -> MemoryIdentityStore:
    return MemoryIdentityStore()
