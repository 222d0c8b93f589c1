"""
Test suite for health endpoints.

System role: Verification of health HTTP API
"""

import pytest
from fastapi.testclient import TestClient

from ragchat.main import create_app


@pytest.fixture
def client() -> TestClient:
    return TestClient(create_app())


class TestHealth:
    """Test suite for GET /health."""

    @pytest.mark.parametrize("path", ["/health", "/api/health"])
    def test_health_check(self, client: TestClient, path: str) -> None:
        # Act
        response = client.get(path)

        # Assert
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "ok"
        assert body["message"] == "RAG Chat API is running"
        assert "timestamp" in body

    def test_health_check_should_echo_correlation_id(self, client: TestClient) -> None:
        response = client.get("/health", headers={"X-Correlation-ID": "abc-123"})

        assert response.headers["X-Correlation-ID"] == "abc-123"
