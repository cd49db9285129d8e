# mypy: ignore-errors
# tests/v1/test_admin.py
"""Tests for administrative endpoints."""

from fastapi import status

from void_board.models import Identity, Post, Reply


def test_dashboard_requires_admin_key(client, admin_key) -> None:
    for params in (None, {"key": "wrong"}):
        response = client.get("/api/v1/admin/dashboard", params=params)
        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert response.json() == {"detail": "Forbidden"}


def test_dashboard_denied_when_admin_key_unset(client, monkeypatch) -> None:
    from void_board.core.settings import settings

    monkeypatch.setattr(settings, "admin_key", None)
    response = client.get("/api/v1/admin/dashboard", params={"key": ""})
    assert response.status_code == status.HTTP_403_FORBIDDEN


def test_dashboard_lists_flagged_content(client, admin_key, make_post, make_reply) -> None:
    quiet = make_post()
    flagged = make_post(report_count=4, status="hidden")
    mild = make_post(report_count=1)
    reply = make_reply(quiet, report_count=2)

    response = client.get("/api/v1/admin/dashboard", params={"key": admin_key})

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert [post["id"] for post in data["flagged_posts"]] == [flagged.id, mild.id]
    assert data["flagged_posts"][0]["author_key"] == flagged.author_key
    assert [r["id"] for r in data["flagged_replies"]] == [reply.id]


def test_ban_identity(client, db_session, admin_key, identity, make_post, make_reply) -> None:
    post = make_post(author_key=identity.key)
    reply = make_reply(make_post(), responder_key=identity.key)

    response = client.request(
        "DELETE",
        "/api/v1/admin/ban",
        params={"key": admin_key},
        json={"token": identity.key, "delete_content": True},
    )

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"success": True, "message": "User banished."}
    assert db_session.get(Identity, identity.key, populate_existing=True).banned is True
    assert db_session.get(Post, post.id, populate_existing=True).status == "deleted"
    assert db_session.get(Reply, reply.id, populate_existing=True).status == "deleted"


def test_ban_keeps_content_by_default(client, db_session, admin_key, identity, make_post) -> None:
    post = make_post(author_key=identity.key)

    client.request(
        "DELETE",
        "/api/v1/admin/ban",
        params={"key": admin_key},
        json={"token": identity.key},
    )

    assert db_session.get(Post, post.id, populate_existing=True).status == "active"


def test_ban_unknown_identity(client, admin_key) -> None:
    response = client.request(
        "DELETE",
        "/api/v1/admin/ban",
        params={"key": admin_key},
        json={"token": "VOID-NONE-NONE-NONE"},
    )
    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_ban_requires_admin_key(client, db_session, identity) -> None:
    response = client.request(
        "DELETE",
        "/api/v1/admin/ban",
        params={"key": "guess"},
        json={"token": identity.key},
    )

    assert response.status_code == status.HTTP_403_FORBIDDEN
    assert db_session.get(Identity, identity.key, populate_existing=True).banned is False
