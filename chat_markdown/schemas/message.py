"""Chat message schemas for render requests and responses."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from chat_markdown.config import settings


class MessageContentType(str, Enum):
    """Chat message content type."""

    TEXT = "text"
    IMAGE = "image"
    INFO = "info"
    GIF = "gif"


class RenderRequest(BaseModel):
    """Schema for rendering a chat message."""

    model_config = ConfigDict(extra="forbid")

    content_type: MessageContentType = Field(
        default=MessageContentType.TEXT,
        description="Message content type: text, image, info (system message), or gif",
    )
    content: str = Field(
        ...,
        min_length=1,
        description="Message content (markdown for text messages)",
    )

    @field_validator("content")
    @classmethod
    def limit_text_length(cls, v: str, info: ValidationInfo) -> str:
        """Reject text messages longer than the configured limit."""
        # Media messages may carry data URLs well past the text limit
        if (
            info.data.get("content_type") == MessageContentType.TEXT
            and len(v) > settings.max_message_length
        ):
            raise ValueError(
                f"Text messages are limited to {settings.max_message_length} characters"
            )
        return v


class RenderResponse(BaseModel):
    """Schema for a rendered chat message."""

    content_type: MessageContentType
    html: Optional[str] = Field(
        default=None,
        description="Sanitized HTML fragment, null for media messages",
    )
    emoji_only_size: Optional[int] = Field(
        default=None,
        description=(
            "Display size tier of an emoji-only text message: 1 for one emoji, "
            "2 for two, 3 for three to five; null otherwise"
        ),
    )
