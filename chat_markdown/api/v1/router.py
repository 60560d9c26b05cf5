"""API v1 router combining all endpoint routers."""

from fastapi import APIRouter

from chat_markdown.api.v1 import messages

router = APIRouter()

# Include all routers
router.include_router(messages.router, prefix="/messages", tags=["Messages"])
