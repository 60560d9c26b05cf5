"""Message rendering API endpoints."""

from fastapi import APIRouter

from chat_markdown.schemas.common import ErrorResponse
from chat_markdown.schemas.message import MessageContentType, RenderRequest, RenderResponse
from chat_markdown.utils.emoji import emoji_only_size
from chat_markdown.utils.markdown_renderer import render_message

router = APIRouter()


@router.post(
    "/render",
    response_model=RenderResponse,
    responses={
        413: {"model": ErrorResponse, "description": "Request body too large"},
        422: {"model": ErrorResponse, "description": "Invalid message"},
    },
    summary="Render a chat message",
    description=(
        "Render message content to a sanitized HTML fragment. Text messages "
        "are parsed as markdown, system messages are escaped, media messages "
        "have no HTML."
    ),
)
async def render(data: RenderRequest) -> RenderResponse:
    """Render a chat message for display."""
    size = None
    if data.content_type == MessageContentType.TEXT:
        size = emoji_only_size(data.content)

    return RenderResponse(
        content_type=data.content_type,
        html=render_message(data.content, data.content_type.value),
        emoji_only_size=size,
    )
