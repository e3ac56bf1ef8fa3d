"""
WebSocket Routes
================

The ``/ws`` echo endpoint.
"""

from fastapi import APIRouter, Depends, WebSocket

from src.api.dependencies import get_app_settings, get_lifecycle, get_registry
from src.api.lifecycle import LifecycleController
from src.api.ws.connection import SHUTDOWN_CLOSE_CODE, SHUTDOWN_CLOSE_REASON
from src.api.ws.handler import WebSocketHandler
from src.api.ws.registry import ConnectionRegistry
from src.config.settings import Settings

router = APIRouter(tags=["WebSocket"])


@router.websocket("/ws")
async def websocket_endpoint(
    websocket: WebSocket,
    registry: ConnectionRegistry = Depends(get_registry),
    lifecycle: LifecycleController = Depends(get_lifecycle),
    settings: Settings = Depends(get_app_settings),
) -> None:
    """Echo every message back and send heartbeats until the client leaves."""
    if not lifecycle.accepting_websockets:
        await websocket.close(code=SHUTDOWN_CLOSE_CODE, reason=SHUTDOWN_CLOSE_REASON)
        return

    handler = WebSocketHandler(websocket, registry, settings.ws_heartbeat_interval)
    await handler.run()
