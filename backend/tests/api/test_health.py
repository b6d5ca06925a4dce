"""
Tests for health check endpoints.
"""

from unittest.mock import MagicMock, PropertyMock

import pytest

from api.dependencies import get_container
from shared.exceptions import ConfigurationError, DependencyError


@pytest.fixture
def container(app) -> MagicMock:
    """A stand-in service container for the readiness check."""
    mock = MagicMock()
    app.dependency_overrides[get_container] = lambda: mock
    return mock


class TestHealthEndpoints:
    def test_health_check(self, client):
        """Health endpoint should return healthy status."""
        response = client.get("/api/health")

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["status"] == "healthy"
        assert "version" in data

    def test_health_needs_no_token(self, client):
        assert client.get("/api/health").status_code == 200

    def test_readiness_check(self, client, container):
        """Readiness endpoint should run a query against the database."""
        response = client.get("/api/ready")

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["status"] == "ready"
        assert data["database"] == "connected"
        container.user_repository.ping.assert_called_once()

    def test_readiness_uses_user_store(self, client, app, user_store):
        """The readiness check pings whatever user repository the container holds."""
        container = MagicMock(user_repository=user_store)
        app.dependency_overrides[get_container] = lambda: container

        response = client.get("/api/ready")

        assert response.json()["database"] == "connected"

    def test_readiness_database_down(self, client, container):
        container.user_repository.ping.side_effect = DependencyError(
            "connection refused", service="database"
        )

        response = client.get("/api/ready")

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is False
        assert data["status"] == "not_ready"
        assert data["database"] == "unavailable"

    def test_readiness_not_configured(self, client, container):
        type(container).user_repository = PropertyMock(
            side_effect=ConfigurationError("Supabase configuration missing")
        )

        response = client.get("/api/ready")

        assert response.status_code == 200
        assert response.json()["status"] == "not_ready"
