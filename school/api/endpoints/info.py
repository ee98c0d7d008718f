"""Runtime information."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from school.core.config import settings
from school.core.logging import logger

router = APIRouter()


@router.get("/port", response_class=PlainTextResponse)
async def get_port():
    """Configured server port and active profile."""
    logger.debug(f"Current server port: {settings.PORT}, active profile: {settings.PROFILE}")
    return f"Port: {settings.PORT} | Profile: {settings.PROFILE}"
