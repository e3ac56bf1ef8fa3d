"""
Routes
======

Routers in dispatch order:
- cors: OPTIONS preflight on any path
- health: /health, /healthz, /ready
- pages: /ws-test static page
- ws: /ws WebSocket endpoint
- sse: catch-all Server-Sent Events stream
"""

from typing import Any, Dict, Tuple

from fastapi.routing import APIRoute
from starlette.routing import Match
from starlette.types import Receive, Scope, Send

# Methods declared on routes; AnyMethodRoute also accepts any other verb but OPTIONS
ROUTED_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE"]


class AnyMethodRoute(APIRoute):
    """
    Route that serves every HTTP method except OPTIONS.

    Starlette treats a method outside ``methods`` as a partial match and
    answers 405. Here such a request is a full match instead, so WebDAV or
    custom verbs reach the endpoint. OPTIONS is left to the preflight router.
    """

    def matches(self, scope: Scope) -> Tuple[Match, Dict[str, Any]]:
        match, child_scope = super().matches(scope)
        if match == Match.PARTIAL and scope["method"] != "OPTIONS":
            return Match.FULL, child_scope
        return match, child_scope

    async def handle(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["method"] == "OPTIONS":
            await super().handle(scope, receive, send)
        else:
            await self.app(scope, receive, send)
