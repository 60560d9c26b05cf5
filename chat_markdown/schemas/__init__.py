"""Pydantic schemas for request/response validation."""

from chat_markdown.schemas.common import (
    ErrorResponse,
    HealthResponse,
)
from chat_markdown.schemas.message import (
    MessageContentType,
    RenderRequest,
    RenderResponse,
)

__all__ = [
    # Common
    "ErrorResponse",
    "HealthResponse",
    # Message
    "MessageContentType",
    "RenderRequest",
    "RenderResponse",
]
