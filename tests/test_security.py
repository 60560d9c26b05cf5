"""Tests for security features."""

import pytest
from httpx import AsyncClient

from chat_markdown.config import settings


@pytest.mark.asyncio
async def test_security_headers_present(client: AsyncClient):
    """Test that security headers are present in responses."""
    response = await client.get("/health")
    assert response.status_code == 200

    headers = response.headers
    assert headers["x-content-type-options"] == "nosniff"
    assert headers["x-frame-options"] == "DENY"
    assert "default-src 'none'" in headers["content-security-policy"]
    assert headers["cache-control"] == "no-store"


@pytest.mark.asyncio
async def test_request_id_generated(client: AsyncClient):
    """Test that X-Request-ID is returned in responses."""
    response = await client.get("/health")
    assert response.headers.get("x-request-id")


@pytest.mark.asyncio
async def test_request_id_propagated(client: AsyncClient):
    """Test that a well-formed client request ID is echoed back."""
    response = await client.get("/health", headers={"X-Request-ID": "abc-123"})
    assert response.headers["x-request-id"] == "abc-123"


@pytest.mark.asyncio
async def test_malformed_request_id_replaced(client: AsyncClient):
    """Test that a malformed client request ID is not echoed back."""
    bad_id = "<script>" + "x" * 100
    response = await client.get("/health", headers={"X-Request-ID": bad_id})
    assert response.headers["x-request-id"] != bad_id


@pytest.mark.asyncio
async def test_request_too_large(client: AsyncClient):
    """Test that oversized request bodies are rejected."""
    body = '{"content": "' + "a" * (settings.max_request_size_kb * 1024) + '"}'
    response = await client.post(
        "/api/messages/render",
        content=body,
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 413
    error = response.json()["error"]
    assert error["code"] == "REQUEST_TOO_LARGE"
    assert error["request_id"] == response.headers["x-request-id"]


@pytest.mark.asyncio
async def test_cors_preflight(client: AsyncClient):
    """Test CORS preflight request handling."""
    response = await client.options(
        "/api/messages/render",
        headers={
            "Origin": "http://localhost:3000",
            "Access-Control-Request-Method": "POST",
        },
    )
    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "http://localhost:3000"
