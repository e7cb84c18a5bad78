"""Tests for the login and passcode HTTP endpoints."""

from .conftest import ADMIN_PASS, PLAYER_PASS


class TestLogin:

    def test_admin_login(self, client):
        response = client.post("/api/login", json={"pass": ADMIN_PASS})

        assert response.status_code == 200
        assert response.json() == {"ok": True, "role": "admin"}

    def test_player_login_trims_input(self, client):
        response = client.post("/api/login", json={"pass": f"  {PLAYER_PASS} "})
        assert response.json() == {"ok": True, "role": "player"}

    def test_bad_login(self, client):
        response = client.post("/api/login", json={"pass": "nope"})

        assert response.status_code == 401
        assert response.json() == {"ok": False}

    def test_missing_pass_is_unauthorized(self, client):
        assert client.post("/api/login", json={}).status_code == 401

    def test_null_pass_is_unauthorized(self, client):
        response = client.post("/api/login", json={"pass": None})

        assert response.status_code == 401
        assert response.json() == {"ok": False}


class TestPasswordChange:

    def test_requires_admin_pass(self, client):
        response = client.post(
            "/api/password", json={"adminPass": PLAYER_PASS, "newAdminPass": "x"}
        )

        assert response.status_code == 401
        assert response.json() == {"ok": False, "reason": "unauthorized"}

    def test_rotates_admin_pass(self, client):
        response = client.post(
            "/api/password", json={"adminPass": ADMIN_PASS, "newAdminPass": "fresh"}
        )

        assert response.json() == {"ok": True}
        assert client.post("/api/login", json={"pass": ADMIN_PASS}).status_code == 401
        assert client.post("/api/login", json={"pass": "fresh"}).json()["role"] == "admin"
        assert client.post("/api/login", json={"pass": PLAYER_PASS}).json()["role"] == "player"

    def test_null_fields_are_unauthorized_not_invalid(self, client):
        response = client.post(
            "/api/password", json={"adminPass": None, "newAdminPass": None, "newPlayerPass": None}
        )

        assert response.status_code == 401
        assert response.json() == {"ok": False, "reason": "unauthorized"}

    def test_null_new_pass_leaves_it_unchanged(self, client):
        response = client.post(
            "/api/password", json={"adminPass": ADMIN_PASS, "newAdminPass": None, "newPlayerPass": "p3"}
        )

        assert response.json() == {"ok": True}
        assert client.post("/api/login", json={"pass": ADMIN_PASS}).json()["role"] == "admin"
        assert client.post("/api/login", json={"pass": "p3"}).json()["role"] == "player"

    def test_rotates_player_pass(self, client):
        client.post("/api/password", json={"adminPass": ADMIN_PASS, "newPlayerPass": "p2"})

        assert client.post("/api/login", json={"pass": PLAYER_PASS}).status_code == 401
        assert client.post("/api/login", json={"pass": "p2"}).json()["role"] == "player"


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"
    assert response.json()["phase"] == "lobby"
