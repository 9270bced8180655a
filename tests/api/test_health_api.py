"""API tests for service-level endpoints."""

from fastapi.testclient import TestClient


class TestServiceEndpoints:
    """Tests for /health and /."""

    def test_health_check(self, client: TestClient):
        """
        GIVEN the app is running
        WHEN I GET /health
        THEN status is healthy
        """
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_root_lists_app_info(self, client: TestClient):
        """
        GIVEN the app is running
        WHEN I GET /
        THEN app name and docs location are returned
        """
        data = client.get("/").json()

        assert data["app"] == "Net Worth Tracker"
        assert data["docs"] == "/docs"
