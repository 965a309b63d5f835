"""System endpoint tests (root and health)."""

import pytest

from src.core.config import settings


@pytest.mark.api
class TestSystemEndpoints:
    def test_root(self, api):
        response = api.client.get("/")

        assert response.status_code == 200
        assert response.json() == {
            "message": settings.app_name,
            "status": "operational",
            "version": settings.app_version,
        }

    def test_health(self, api):
        response = api.client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}

    def test_trace_id_echoed(self, api):
        response = api.client.get("/health", headers={"X-Trace-Id": "trace-123"})

        assert response.headers["X-Trace-Id"] == "trace-123"
