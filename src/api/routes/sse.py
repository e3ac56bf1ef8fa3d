"""
SSE Routes
==========

Catch-all Server-Sent Events endpoint: every request not claimed by another
route gets a heartbeat stream.
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import StreamingResponse

from src.api.dependencies import get_app_settings
from src.api.routes import ROUTED_METHODS, AnyMethodRoute
from src.api.sse.stream import SSEStream
from src.config.logging import get_logger
from src.config.settings import Settings

logger = get_logger(__name__)

SSE_HEADERS = {
    "Cache-Control": "no-cache",
    "Connection": "keep-alive",
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "*",
    "Access-Control-Allow-Headers": "*",
    "X-Accel-Buffering": "no",  # Disable Nginx buffering
}

router = APIRouter(tags=["SSE"], route_class=AnyMethodRoute)


def request_target(request: Request) -> str:
    """Path plus query string, as sent on the request line."""
    query = request.url.query
    return f"{request.url.path}?{query}" if query else request.url.path


@router.api_route("/{path:path}", methods=ROUTED_METHODS)
async def sse_stream(
    request: Request, settings: Settings = Depends(get_app_settings)
) -> StreamingResponse:
    """
    Open an SSE stream on any path.

    Sends a ``connected`` event, then a ``heartbeat`` every
    ``sse_heartbeat_interval`` seconds until the client disconnects.
    """
    target = request_target(request)
    logger.info("SSE request received", method=request.method, path=target)

    stream = SSEStream(target, request.method, settings.sse_heartbeat_interval)
    return StreamingResponse(
        stream.events(),
        media_type="text/event-stream",
        headers=SSE_HEADERS,
    )
