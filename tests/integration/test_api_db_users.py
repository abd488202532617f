"""
Integration tests for /api/dbusers endpoints.
The seeded admin account is always present.
"""
import pytest

pytestmark = pytest.mark.integration


class TestDbUsersAPI:
    """Tests for /api/dbusers"""

    def test_list_contains_seeded_admin(self, auth_client):
        response = auth_client.get("/api/dbusers/all")
        assert response.status_code == 200
        assert [u["username"] for u in response.json()] == ["admin"]

    def test_create_and_find_by_username(self, auth_client):
        response = auth_client.post("/api/dbusers", json={"username": "operator", "password": "secret"})
        assert response.status_code == 201
        created = response.json()
        assert set(created) == {"id", "username", "password"}
        assert response.headers["location"].endswith(f"/api/dbusers/{created['id']}")

        found = auth_client.get("/api/dbusers", params={"username": "operator"})
        assert found.status_code == 200
        assert found.json() == [created]

        assert auth_client.get("/api/dbusers", params={"username": "oper"}).status_code == 400

    def test_duplicate_username_returns_400(self, auth_client):
        response = auth_client.post("/api/dbusers", json={"username": "admin", "password": "secret"})
        assert response.status_code == 400
        violations = response.json()["error"]["details"]["violations"]
        assert violations == [{"field": "username", "code": "duplicate"}]

    def test_update_may_keep_own_username(self, auth_client):
        created = auth_client.post("/api/dbusers", json={"username": "operator", "password": "secret"}).json()
        response = auth_client.put(
            f"/api/dbusers/{created['id']}",
            json={"username": "operator", "password": "changed"},
        )
        assert response.status_code == 200
        assert response.json()["password"] == "changed"

    def test_update_cannot_take_another_username(self, auth_client):
        created = auth_client.post("/api/dbusers", json={"username": "operator", "password": "secret"}).json()
        response = auth_client.put(
            f"/api/dbusers/{created['id']}",
            json={"username": "admin", "password": "secret"},
        )
        assert response.status_code == 400

    def test_delete_and_missing(self, auth_client):
        created = auth_client.post("/api/dbusers", json={"username": "operator", "password": "secret"}).json()
        response = auth_client.delete(f"/api/dbusers/{created['id']}")
        assert response.status_code == 200
        assert response.json()["username"] == "operator"
        assert auth_client.get(f"/api/dbusers/{created['id']}").status_code == 404
        assert auth_client.delete(f"/api/dbusers/{created['id']}").status_code == 404

    def test_new_account_can_log_in(self, client, auth_client):
        auth_client.post("/api/dbusers", json={"username": "operator", "password": "secret"})
        client.get("/logout")

        response = client.post(
            "/login",
            data={"username": "operator", "password": "secret"},
            follow_redirects=False,
        )
        assert response.status_code == 302
