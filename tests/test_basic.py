"""
Basic application tests.

Validates that the FastAPI app starts correctly, the health endpoint
responds as expected and cross-cutting middleware is active.
"""

from unittest.mock import MagicMock

from fastapi.testclient import TestClient
from pymongo.errors import ServerSelectionTimeoutError

from devcamper.interfaces.dependencies import get_database
from devcamper.main import app
from devcamper.shared.security.headers import SECURE_HEADERS

client = TestClient(app)


class TestHealthEndpoint:
    """Tests for the health check endpoint."""

    def test_health_returns_200(self) -> None:
        """Health endpoint must return HTTP 200 with status ok."""
        response = client.get("/api/v1/health")
        assert response.status_code == 200

    def test_health_response_body(self) -> None:
        """Health endpoint must return status and version fields."""
        response = client.get("/api/v1/health")
        body = response.json()
        assert body["status"] == "ok"
        assert "version" in body


class TestSecurityHeaders:
    """Tests for security headers on responses."""

    def test_security_headers_present(self) -> None:
        """All security headers must be present on every response."""
        response = client.get("/api/v1/health")
        for name, value in SECURE_HEADERS.items():
            assert response.headers[name] == value

    def test_security_headers_on_errors(self) -> None:
        """Error responses carry the security headers too."""
        response = client.get("/api/v1/does-not-exist")
        assert response.headers["X-Frame-Options"] == "DENY"


class TestFrameworkErrors:
    """Framework-raised HTTP errors use the failure envelope."""

    def test_unknown_route_is_enveloped(self) -> None:
        response = client.get("/api/v1/does-not-exist")
        assert response.status_code == 404
        assert response.json() == {"success": False, "error": "Not Found"}

    def test_wrong_method_is_enveloped(self) -> None:
        response = client.patch("/api/v1/health")
        assert response.status_code == 405
        assert response.json()["success"] is False


class TestReadinessEndpoint:
    """Tests for the readiness probe."""

    def test_ready_when_database_answers(self) -> None:
        database = MagicMock()
        app.dependency_overrides[get_database] = lambda: database
        try:
            response = client.get("/api/v1/health/ready")
        finally:
            app.dependency_overrides.clear()

        assert response.status_code == 200
        assert response.json()["status"] == "ok"
        database.command.assert_called_once_with("ping")

    def test_not_ready_when_database_is_down(self) -> None:
        database = MagicMock()
        database.command.side_effect = ServerSelectionTimeoutError("no servers")
        app.dependency_overrides[get_database] = lambda: database
        try:
            response = client.get("/api/v1/health/ready")
        finally:
            app.dependency_overrides.clear()

        assert response.status_code == 503
        assert response.json() == {"success": False, "error": "Service unavailable"}
