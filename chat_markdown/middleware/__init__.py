"""Middleware components for the application."""

from chat_markdown.middleware.request_id import RequestIDMiddleware
from chat_markdown.middleware.request_logger import RequestLogMiddleware
from chat_markdown.middleware.request_size import RequestSizeLimitMiddleware
from chat_markdown.middleware.security_headers import SecurityHeadersMiddleware

__all__ = [
    "RequestIDMiddleware",
    "RequestLogMiddleware",
    "RequestSizeLimitMiddleware",
    "SecurityHeadersMiddleware",
]
