"""FastAPI application serving the chat markdown renderer."""

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from chat_markdown import __version__
from chat_markdown.api.v1.router import router as api_v1_router
from chat_markdown.config import settings
from chat_markdown.middleware import (
    RequestIDMiddleware,
    RequestLogMiddleware,
    RequestSizeLimitMiddleware,
    SecurityHeadersMiddleware,
)
from chat_markdown.schemas.common import HealthResponse
from chat_markdown.utils.markdown_renderer import render_markdown

logger = structlog.get_logger()

# Readiness renders this message and looks for the fragment
READINESS_MESSAGE = "**ok** <script>x</script>"
READINESS_EXPECTED = "<strong>ok</strong>"

app = FastAPI(
    title=settings.app_name,
    description="Renders user-authored chat message markdown to sanitized HTML fragments.",
    version=__version__,
    docs_url=None,
    redoc_url=None,
    openapi_url="/openapi.json" if settings.debug else None,
)

# Last added runs first
app.add_middleware(RequestSizeLimitMiddleware)
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(RequestLogMiddleware)
app.add_middleware(RequestIDMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET", "POST"],
    allow_headers=["Content-Type", "X-Request-ID"],
    expose_headers=["X-Request-ID"],
)


@app.exception_handler(RequestValidationError)
async def invalid_message_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report which part of a render request was rejected."""
    details = [
        {"field": ".".join(str(loc) for loc in error["loc"]), "message": error["msg"]}
        for error in exc.errors()
    ]
    logger.info("message_rejected", fields=[d["field"] for d in details])
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "error": {
                "code": "INVALID_MESSAGE",
                "message": "Message could not be rendered",
                "details": details,
                "request_id": request.state.request_id,
            }
        },
    )


app.include_router(api_v1_router, prefix=settings.api_prefix)


@app.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check() -> HealthResponse:
    """Liveness check."""
    return HealthResponse(status="healthy", version=__version__)


@app.get("/health/ready", response_model=HealthResponse, tags=["Health"])
async def readiness_check() -> HealthResponse:
    """Render a fixed message through the parser and the cleaner."""
    rendered = render_markdown(READINESS_MESSAGE)
    ready = READINESS_EXPECTED in rendered and "script" not in rendered
    if not ready:
        logger.error("renderer_not_ready", output=rendered)

    return HealthResponse(
        status="healthy" if ready else "unhealthy",
        version=__version__,
        renderer="healthy" if ready else "unexpected output",
    )
