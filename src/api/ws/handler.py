"""
WebSocket Handler
=================

Per-connection lifecycle for the WebSocket endpoint: welcome message,
periodic heartbeats, and an echo for every inbound message.
"""

import functools
import json
from typing import Any, NoReturn

from starlette.websockets import WebSocket

from src.api.heartbeat import HeartbeatTimer
from src.config.logging import get_logger

from .connection import SHUTDOWN_CLOSE_CODE, SHUTDOWN_CLOSE_REASON, ConnectionHandle
from .models import EchoMessage, HeartbeatMessage, WelcomeMessage
from .registry import ConnectionRegistry

logger = get_logger(__name__)


def _reject_constant(name: str) -> NoReturn:
    raise ValueError(f"Unsupported JSON constant: {name}")


def parse_inbound(text: str) -> Any:
    """Parse a client message as JSON, falling back to the raw text."""
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except ValueError:
        return text


class WebSocketHandler:
    """
    Drives a single WebSocket connection from accept to cleanup.

    Handles:
    - Registry membership (added on accept, removed on close or error)
    - Welcome and heartbeat messages
    - Echo replies in arrival order
    """

    def __init__(
        self,
        websocket: WebSocket,
        registry: ConnectionRegistry,
        heartbeat_interval: float = 5.0,
    ):
        self.websocket = websocket
        self.registry = registry
        self.heartbeat_interval = heartbeat_interval
        self.path = websocket.url.path

    async def run(self) -> None:
        """Accept the connection and serve it until it closes."""
        await self.websocket.accept()

        handle = ConnectionHandle(self.websocket, self.path)
        if not self.registry.add(handle):
            logger.info("WebSocket connection refused during shutdown", path=handle.path)
            await handle.close(code=SHUTDOWN_CLOSE_CODE, reason=SHUTDOWN_CLOSE_REASON)
            return

        logger.info(
            "WebSocket connection opened",
            path=handle.path,
            connection_id=handle.connection_id,
            active=len(self.registry),
        )

        try:
            # The client may already be gone; a failed welcome does not stop setup
            await handle.send(WelcomeMessage(path=handle.path))

            handle.timer = HeartbeatTimer(
                self.heartbeat_interval,
                functools.partial(self.send_heartbeat, handle),
                name=f"ws-heartbeat {handle.connection_id}",
            )
            handle.timer.start()

            await self._receive_loop(handle)
        except Exception as e:
            logger.warning(
                "WebSocket error",
                path=handle.path,
                connection_id=handle.connection_id,
                error=str(e),
                error_type=type(e).__name__,
            )
        finally:
            self.cleanup(handle)

    async def _receive_loop(self, handle: ConnectionHandle) -> None:
        while True:
            message = await self.websocket.receive()

            if message["type"] == "websocket.disconnect":
                logger.debug(
                    "WebSocket disconnect received",
                    connection_id=handle.connection_id,
                    code=message.get("code", 1000),
                )
                return

            text = message.get("text")
            if text is None:
                text = (message.get("bytes") or b"").decode("utf-8", errors="replace")

            logger.info("WebSocket message received", path=handle.path, message=text)
            await self.echo(handle, text)

    async def echo(self, handle: ConnectionHandle, text: str) -> bool:
        """Reply with the parsed message; send failures are ignored."""
        reply = EchoMessage(original=parse_inbound(text), path=handle.path)
        return await handle.send(reply)

    async def send_heartbeat(self, handle: ConnectionHandle) -> bool:
        """Send a heartbeat if the connection is still open; stale ticks do nothing."""
        if not handle.is_open:
            return False
        return await handle.send(HeartbeatMessage(connections=len(self.registry)))

    def cleanup(self, handle: ConnectionHandle) -> None:
        """Cancel the heartbeat and drop the handle from the registry. Idempotent."""
        first_release = handle.release()
        self.registry.discard(handle)
        if first_release:
            logger.info(
                "WebSocket connection closed",
                path=handle.path,
                connection_id=handle.connection_id,
                active=len(self.registry),
            )
