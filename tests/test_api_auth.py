"""
Tests for the auth routes.
"""

from fastapi.testclient import TestClient

URL = "/api/v1/auth/register"

JOHN = {"name": "John Doe", "email": "john@gmail.com", "password": "123456"}


class TestRegister:
    """Tests for POST /auth/register."""

    def test_register_returns_user_without_password(self, client: TestClient) -> None:
        response = client.post(URL, json=JOHN)

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        user = body["data"]
        assert user["name"] == "John Doe"
        assert user["email"] == "john@gmail.com"
        assert user["role"] == "user"
        assert "id" in user
        assert "createdAt" in user
        assert "password" not in user

    def test_password_is_stored_hashed(self, client: TestClient, database) -> None:
        client.post(URL, json=JOHN)
        stored = database["users"].find_one({"email": "john@gmail.com"})
        assert stored["password"] != "123456"
        assert stored["password"].startswith("pbkdf2_sha256$")

    def test_publisher_role(self, client: TestClient) -> None:
        response = client.post(URL, json={**JOHN, "role": "publisher"})
        assert response.json()["data"]["role"] == "publisher"

    def test_admin_role_rejected(self, client: TestClient, database) -> None:
        response = client.post(URL, json={**JOHN, "role": "admin"})
        assert response.status_code == 400
        assert "role" in response.json()["error"]
        assert database["users"].count_documents({}) == 0

    def test_short_password(self, client: TestClient) -> None:
        response = client.post(URL, json={**JOHN, "password": "123"})
        assert response.status_code == 400
        assert response.json()["success"] is False
        assert "password" in response.json()["error"]

    def test_invalid_email(self, client: TestClient) -> None:
        response = client.post(URL, json={**JOHN, "email": "not-an-email"})
        assert response.status_code == 400
        assert "email" in response.json()["error"]

    def test_duplicate_email(self, client: TestClient) -> None:
        client.post(URL, json=JOHN)
        response = client.post(URL, json={**JOHN, "name": "Johnny"})
        assert response.status_code == 400
        assert response.json()["error"].startswith("Duplicate field value entered")
