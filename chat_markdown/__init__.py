"""Chat Markdown Renderer - sanitized HTML rendering for chat messages."""

__version__ = "1.0.0"
