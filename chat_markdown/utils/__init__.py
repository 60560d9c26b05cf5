"""Utility functions and helpers."""

from chat_markdown.utils.emoji import emoji_only_size
from chat_markdown.utils.markdown_renderer import (
    escape_html,
    render_markdown,
    render_message,
    strip_all_html,
)

__all__ = [
    "emoji_only_size",
    "escape_html",
    "render_markdown",
    "render_message",
    "strip_all_html",
]
