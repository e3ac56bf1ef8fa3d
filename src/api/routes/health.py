"""
Health Routes
=============

FastAPI routes for health check endpoints.
"""

import json
from typing import Any

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from src.api.dependencies import get_health_reporter
from src.api.health import HealthReporter
from src.api.routes import ROUTED_METHODS, AnyMethodRoute

HEALTH_PATHS = ("/health", "/healthz", "/ready")

router = APIRouter(tags=["Health"], route_class=AnyMethodRoute)


class PrettyJSONResponse(JSONResponse):
    """JSON response indented for reading with curl."""

    def render(self, content: Any) -> bytes:
        return json.dumps(content, indent=2, ensure_ascii=False).encode("utf-8")


async def health_check(
    reporter: HealthReporter = Depends(get_health_reporter),
) -> PrettyJSONResponse:
    """
    Get service health status.

    Returns uptime, version and the number of open WebSocket connections.
    """
    snapshot = reporter.snapshot()
    return PrettyJSONResponse(
        content=snapshot.model_dump(mode="json"),
        headers={"Cache-Control": "no-cache"},
    )


for _path in HEALTH_PATHS:
    router.add_api_route(_path, health_check, methods=ROUTED_METHODS)
