"""Tests for the health check endpoint."""

import pytest
from httpx import ASGITransport, AsyncClient

from backoffice.config import get_settings
from backoffice.main import app


@pytest.mark.asyncio
async def test_health_reports_status_and_relations():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/api/v1/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["environment"] == get_settings().app_env
    assert data["relations"] == [
        "cost_centers",
        "entities",
        "entity_addresses",
        "entity_contacts",
        "hourly_rates",
        "profiles",
        "projects",
        "user_roles",
    ]
