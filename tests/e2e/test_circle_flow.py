"""End-to-end tests for circle endpoints."""

import pytest
from fastapi.testclient import TestClient

from linkbio.interface.api.app import create_app
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client with test container."""
    return TestClient(create_app(container=build_test_container()))


@pytest.fixture
def connected(client):
    """Create alice and bob and connect them."""
    users = {}
    for username in ("alice", "bob"):
        response = client.post(
            "/users", json={"email": f"{username}@example.com", "username": username}
        )
        users[username] = response.json()
    body = {"from_user_id": users["alice"]["id"], "to_user_id": users["bob"]["id"]}
    client.post("/users/circle/request", json=body)
    client.post("/users/circle/accept", json=body)
    return users["alice"], users["bob"]


class TestCircleFlow:
    """End-to-end tests for creating and curating circles."""

    def test_inner_circle_add_and_remove(self, client, connected):
        """Should add alice to bob's circle and remove her again."""
        # Arrange
        alice, bob = connected
        base = f"/users/{bob['id']}/circles"

        # Act
        created = client.post(base, json={"name": "Inner Circle"})
        added = client.post(f"{base}/0/members", json={"member_id": alice["id"]})
        removed = client.delete(f"{base}/0/members/{alice['id']}")

        # Assert
        assert created.status_code == 201
        assert created.json()["circles"][0]["name"] == "Inner Circle"
        assert added.json()["members"] == [alice["id"]]
        assert added.json()["order"] == [alice["id"]]
        assert removed.status_code == 200
        assert removed.json()["members"] == []
        assert removed.json()["order"] == []

        # The connection itself survives
        bob_after = client.get("/users/bob").json()
        assert bob_after["circle_members"] == [alice["id"]]

    def test_add_stranger_conflicts(self, client, connected):
        _, bob = connected
        carol = client.post(
            "/users", json={"email": "carol@example.com", "username": "carol"}
        ).json()
        base = f"/users/{bob['id']}/circles"
        client.post(base, json={"name": "Lab"})

        response = client.post(f"{base}/0/members", json={"member_id": carol["id"]})

        assert response.status_code == 409
        assert response.json()["error"] == "NotConnectedError"

    def test_rename_and_reorder_by_id(self, client, connected):
        alice, bob = connected
        base = f"/users/{bob['id']}/circles"
        circle_id = client.post(base, json={"name": "Lab"}).json()["circles"][0]["id"]
        client.post(f"{base}/{circle_id}/members", json={"member_id": alice["id"]})

        response = client.patch(
            f"{base}/{circle_id}", json={"name": "Colleagues", "order": [alice["id"]]}
        )

        assert response.status_code == 200
        assert response.json()["name"] == "Colleagues"
        assert response.json()["id"] == circle_id

    def test_invalid_order_rejected(self, client, connected):
        alice, bob = connected
        base = f"/users/{bob['id']}/circles"
        client.post(base, json={"name": "Lab"})
        client.post(f"{base}/0/members", json={"member_id": alice["id"]})

        response = client.patch(f"{base}/0", json={"order": []})

        assert response.status_code == 400
        assert response.json()["error"] == "InvalidCircleOrderError"

    def test_delete_shifts_indices(self, client, connected):
        _, bob = connected
        base = f"/users/{bob['id']}/circles"
        for name in ("A", "B", "C"):
            client.post(base, json={"name": name})

        deleted = client.delete(f"{base}/1")
        missing = client.delete(f"{base}/2")

        assert [c["name"] for c in deleted.json()["circles"]] == ["A", "C"]
        assert missing.status_code == 404
        assert missing.json()["error"] == "CircleNotFoundError"

    def test_blank_name_rejected(self, client, connected):
        _, bob = connected

        response = client.post(f"/users/{bob['id']}/circles", json={"name": " "})

        assert response.status_code == 400
        assert response.json()["error"] == "MissingFieldError"
