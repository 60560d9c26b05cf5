"""Request body size limiting middleware."""

from fastapi import status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from chat_markdown.config import settings


class RequestSizeLimitMiddleware(BaseHTTPMiddleware):
    """Reject message bodies above ``max_request_size_kb`` before parsing them."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        max_size = settings.max_request_size_kb * 1024
        content_length = request.headers.get("content-length", "")
        if content_length.isdigit() and int(content_length) > max_size:
            return JSONResponse(
                status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
                content={
                    "error": {
                        "code": "REQUEST_TOO_LARGE",
                        "message": f"Messages are limited to {settings.max_request_size_kb}KB",
                        "request_id": request.state.request_id,
                    }
                },
            )
        return await call_next(request)
