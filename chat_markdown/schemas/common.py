"""Response schemas shared by the API endpoints."""

from typing import Any, Optional

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Error body returned for rejected requests."""

    error: dict[str, Any] = Field(
        ...,
        examples=[
            {
                "code": "INVALID_MESSAGE",
                "message": "Message could not be rendered",
                "details": [{"field": "body.content", "message": "Field required"}],
                "request_id": "550e8400-e29b-41d4-a716-446655440000",
            }
        ],
    )


class HealthResponse(BaseModel):
    """Service and renderer status."""

    status: str
    version: str
    renderer: Optional[str] = None
