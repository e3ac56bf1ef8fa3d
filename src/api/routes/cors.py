"""
CORS Routes
===========

Preflight responses for any path.
"""

from fastapi import APIRouter, Response

CORS_PREFLIGHT_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
    "Access-Control-Allow-Headers": "*",
    "Access-Control-Max-Age": "86400",
}

router = APIRouter(tags=["CORS"])


@router.options("/{path:path}", status_code=204)
async def cors_preflight(path: str) -> Response:
    """Answer CORS preflight requests with permissive headers and no body."""
    return Response(status_code=204, headers=CORS_PREFLIGHT_HEADERS)
