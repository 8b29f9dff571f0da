"""End-to-end tests for user account routes."""

import pytest
from fastapi.testclient import TestClient

from social.interface.api.app import create_app
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client backed by in-memory persistence."""
    with TestClient(create_app(build_test_container())) as test_client:
        yield test_client


def signup(client: TestClient, username: str) -> tuple[str, dict]:
    """Register and log in; return the user id and a token pair."""
    response = client.post("/users", json={"username": username, "password": "password0"})
    assert response.status_code == 201
    pair = client.post(
        "/auth/token", json={"username": username, "password": "password0"}
    ).json()
    return response.json(), pair


def bearer(pair: dict) -> dict:
    return {"Authorization": f"Bearer {pair['access']}"}


class TestRegister:
    """POST /users."""

    def test_register_returns_id(self, client):
        response = client.post("/users", json={"username": "qwerty0", "password": "password0"})

        assert response.status_code == 201
        user_id = response.json()
        assert client.get(f"/users/{user_id}").json() == {
            "id": user_id,
            "username": "qwerty0",
            "headline": None,
            "likes": 0,
        }

    def test_username_is_trimmed(self, client):
        response = client.post(
            "/users", json={"username": "  qwerty0  ", "password": "password0"}
        )

        assert client.get(f"/users/{response.json()}").json()["username"] == "qwerty0"

    def test_duplicate_username(self, client):
        signup(client, "qwerty0")

        response = client.post("/users", json={"username": "qwerty0", "password": "password1"})

        assert response.status_code == 400
        assert response.json() == {"username": "Username already taken by someone else."}

    @pytest.mark.parametrize(
        ("body", "field", "message"),
        [
            ({"password": "password0"}, "username", "Username is required."),
            ({"username": "qwerty0"}, "password", "Password is required."),
            (
                {"username": "short", "password": "password0"},
                "username",
                "Username must be at least 6 and at most 20 characters long.",
            ),
            (
                {"username": "qwerty0", "password": "x" * 21},
                "password",
                "Password must be at least 6 and at most 20 characters long.",
            ),
        ],
    )
    def test_invalid_body(self, client, body, field, message):
        response = client.post("/users", json=body)

        assert response.status_code == 400
        assert response.json()[field] == message


class TestRead:
    """GET /users and GET /users/{id}."""

    def test_list(self, client):
        signup(client, "qwerty0")
        signup(client, "qwerty1")

        response = client.get("/users")

        assert response.status_code == 200
        assert [u["username"] for u in response.json()] == ["qwerty0", "qwerty1"]

    def test_unknown_id(self, client):
        response = client.get("/users/00000000-0000-0000-0000-000000000000")

        assert response.status_code == 404
        assert response.json() == "User with provided id does not exist."

    def test_malformed_id(self, client):
        response = client.get("/users/not-a-uuid")

        assert response.status_code == 400
        assert response.json() == {"user_id": "Invalid user id."}


class TestUpdate:
    """PUT /users/{id}."""

    def test_credential_change_revokes_refresh_tokens(self, client):
        # Arrange
        user_id, pair = signup(client, "qwerty0")

        # Act
        response = client.put(
            f"/users/{user_id}",
            json={"username": "qwerty9", "password": "password9"},
            headers=bearer(pair),
        )

        # Assert
        assert response.status_code == 200
        assert client.post("/auth/refresh", json={"refresh": pair["refresh"]}).status_code == 401
        login = client.post(
            "/auth/token", json={"username": "qwerty9", "password": "password9"}
        )
        assert login.status_code == 200

    def test_update_other_account(self, client):
        owner_id, _ = signup(client, "qwerty0")
        _, intruder = signup(client, "qwerty1")

        response = client.put(
            f"/users/{owner_id}",
            json={"username": "qwerty2", "password": "password2"},
            headers=bearer(intruder),
        )

        assert response.status_code == 403
        assert response.content == b""

    def test_update_requires_auth(self, client):
        user_id, _ = signup(client, "qwerty0")

        response = client.put(
            f"/users/{user_id}", json={"username": "qwerty2", "password": "password2"}
        )

        assert response.status_code == 401


class TestDelete:
    """DELETE /users/{id}."""

    def test_delete_cleans_up_likes_and_tokens(self, client):
        # Arrange
        alice_id, alice = signup(client, "alice00")
        bob_id, bob = signup(client, "bob000")
        client.post(f"/users/{bob_id}/like", headers=bearer(alice))
        client.post(f"/users/{alice_id}/like", headers=bearer(bob))

        # Act
        response = client.delete(f"/users/{alice_id}", headers=bearer(alice))

        # Assert
        assert response.status_code == 200
        assert client.get(f"/users/{alice_id}").status_code == 404
        assert client.get(f"/users/{bob_id}/profile/fans").json() == []
        assert client.get(f"/users/{bob_id}/profile/favorites").json() == []
        assert client.get(f"/users/{bob_id}").json()["likes"] == 0
        assert client.post("/auth/refresh", json={"refresh": alice["refresh"]}).status_code == 401
        assert client.get("/auth/me", headers=bearer(alice)).status_code == 401

    def test_delete_other_account(self, client):
        alice_id, _ = signup(client, "alice00")
        _, bob = signup(client, "bob000")

        assert client.delete(f"/users/{alice_id}", headers=bearer(bob)).status_code == 403
