"""Request ID middleware for correlating render requests with their logs."""

import re
from uuid import uuid4

import structlog
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# Client supplied IDs end up in logs and headers
_VALID_REQUEST_ID = re.compile(r"^[A-Za-z0-9._-]{1,64}$")


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Tag each request with an ID.

    A well-formed ``X-Request-ID`` from the chat front end is reused,
    anything else is replaced by a fresh UUID. The ID is bound into the
    structlog context for the duration of the request, stored on
    ``request.state`` for error bodies, and echoed in the response.
    """

    HEADER_NAME = "X-Request-ID"

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        request_id = request.headers.get(self.HEADER_NAME, "")
        if not _VALID_REQUEST_ID.match(request_id):
            request_id = str(uuid4())

        request.state.request_id = request_id
        with structlog.contextvars.bound_contextvars(request_id=request_id):
            response = await call_next(request)

        response.headers[self.HEADER_NAME] = request_id
        return response
