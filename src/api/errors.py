"""
API Errors
==========

Exceptions raised by route handlers and the handlers that turn them into
responses.
"""

from fastapi import Request
from fastapi.responses import PlainTextResponse

from src.config.logging import get_logger

logger = get_logger(__name__)


class StaticPageError(Exception):
    """A bundled HTML page could not be read."""

    def __init__(self, page_name: str, reason: str = ""):
        self.page_name = page_name
        self.reason = reason
        super().__init__(f"Failed to load {page_name}")


async def static_page_exception_handler(request: Request, exc: StaticPageError) -> PlainTextResponse:
    """Report an unreadable page as a plain-text 500."""
    logger.error(
        "Static page read failed",
        page=exc.page_name,
        reason=exc.reason,
        path=request.url.path,
    )
    return PlainTextResponse(str(exc), status_code=500)
