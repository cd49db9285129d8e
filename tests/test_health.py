# mypy: ignore-errors
# tests/test_health.py
from fastapi import status


def test_health(client) -> None:
    response = client.get("/health")
    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"status": "ok"}


def test_root_describes_api(client) -> None:
    response = client.get("/")
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["name"] == "VOID API"


def test_public_config_exposes_policy_only(client) -> None:
    response = client.get("/api/v1/system/config")

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["rooms"]["available"] == ["general", "love", "work", "family", "life"]
    assert data["rooms"]["default"] == "general"
    assert data["matching"]["pool_size"] == 50
    assert data["moderation"]["report_hide_threshold"] == 3
    assert data["rewards"] == {"post": 1, "reply": 5}
    assert "database_url" not in str(data)
    assert "admin_key" not in str(data)
