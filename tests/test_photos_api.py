"""Tests for the photobooth session photo endpoints."""

from fastapi.testclient import TestClient

from proof_of_vibes.api.app import create_app
from proof_of_vibes.containers import AppContainer


def test_photo_session_round_trip(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    created = client.post("/photos", json={"imageData": "data:image/jpeg;base64,AA"})
    assert created.status_code == 200
    session_id = created.json()["sessionId"]
    client.post("/photos", json={"imageData": "BB", "sessionId": session_id})

    listed = client.get("/photos", params={"sessionId": session_id})
    assert [photo["imageData"] for photo in listed.json()["items"]] == [
        "data:image/jpeg;base64,AA",
        "BB",
    ]

    deleted = client.delete("/photos", params={"sessionId": session_id})
    assert deleted.json() == {"deleted": 2}
    assert client.get("/photos", params={"sessionId": session_id}).json() == {
        "items": []
    }


def test_photo_requires_image_data(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.post("/photos", json={"imageData": "", "sessionId": "booth"})

    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "imageData"


def test_list_photos_requires_session_id(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.get("/photos")

    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "sessionId"
