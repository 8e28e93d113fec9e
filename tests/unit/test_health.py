from __future__ import annotations

from unittest.mock import AsyncMock, patch


def test_health_returns_status_and_services(client):
    response = client.get("/api/v1/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] in ("healthy", "degraded")
    assert "version" in data
    assert "services" in data
    assert "supabase" in data["services"]


def test_health_not_configured_is_healthy(client):
    response = client.get("/api/v1/health")
    data = response.json()
    assert data["status"] == "healthy"
    assert data["services"]["supabase"] == "not_configured"


def test_health_degraded_when_connection_fails(client):
    with (
        patch("staffboard.api.v1.endpoints.health.employee_service.client.initialized", True),
        patch(
            "staffboard.api.v1.endpoints.health.employee_service.check_connection",
            AsyncMock(return_value=False),
        ),
    ):
        response = client.get("/api/v1/health")

    data = response.json()
    assert data["status"] == "degraded"
    assert data["services"]["supabase"] == "error"


def test_readiness_probe(client):
    response = client.get("/api/v1/health/ready")
    assert response.status_code == 200
    data = response.json()
    assert data["ready"] is True
