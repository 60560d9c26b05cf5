"""Tests for health check endpoints."""

import pytest
from httpx import AsyncClient


class TestHealthEndpoints:
    """Tests for health check endpoints."""

    @pytest.mark.asyncio
    async def test_basic_health_check(self, client: AsyncClient):
        """Test basic health check endpoint."""
        response = await client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert "version" in data

    @pytest.mark.asyncio
    async def test_readiness_renders_through_pipeline(self, client: AsyncClient):
        """Test that readiness renders a message through the pipeline."""
        response = await client.get("/health/ready")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["renderer"] == "healthy"

    @pytest.mark.asyncio
    async def test_docs_not_served(self, client: AsyncClient):
        """Test that interactive docs are not exposed."""
        response = await client.get("/docs")

        assert response.status_code == 404
