"""Tests for admin authentication and maintenance endpoints."""

from fastapi.testclient import TestClient

from proof_of_vibes.api.app import create_app
from proof_of_vibes.containers import AppContainer
from tests.conftest import fabricate_one


def test_admin_health_requires_token(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.get("/admin/health")

    assert response.status_code == 401


def test_admin_health_accepts_valid_token(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.get("/admin/health", headers={"X-Admin-Token": "admin-token"})

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_admin_summary_counts_records(container: AppContainer) -> None:
    client = TestClient(create_app(container))
    master = fabricate_one(container.store)
    container.fanout_service.fanout([master.id], edition_count=2)
    container.photo_service.save("AAA", session_id="booth")

    response = client.get("/admin/summary", headers={"X-Admin-Token": "admin-token"})

    assert response.status_code == 200
    assert response.json() == {
        "collectibles": 2,
        "claimed": 0,
        "collections": 1,
        "photos": 1,
    }


def test_admin_reset_rejects_wrong_token(container: AppContainer) -> None:
    client = TestClient(create_app(container))
    fabricate_one(container.store)

    response = client.post("/admin/reset", headers={"X-Admin-Token": "wrong"})

    assert response.status_code == 401
    assert len(container.store.all_collectibles()) == 1


def test_admin_reset_removes_user_data(container: AppContainer) -> None:
    client = TestClient(create_app(container))
    fabricate_one(container.store)
    container.photo_service.save("AAA", session_id="booth")

    response = client.post("/admin/reset", headers={"X-Admin-Token": "admin-token"})

    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "removed_collectibles": 1,
        "removed_photos": 1,
    }
    assert container.store.all_collectibles() == []
