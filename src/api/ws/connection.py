"""
WebSocket Connection Handle
===========================

Bookkeeping for one open WebSocket connection.
"""

import time
import uuid
from typing import Optional

from starlette.websockets import WebSocket, WebSocketState

from src.api.heartbeat import HeartbeatTimer
from src.config.logging import get_logger

from .models import ConnectionStatus, WebSocketMessage

logger = get_logger(__name__)

SHUTDOWN_CLOSE_CODE = 1001  # Going Away
SHUTDOWN_CLOSE_REASON = "Server shutting down"


class ConnectionHandle:
    """
    One active WebSocket connection.

    Owned by the handler that accepted it; the registry only holds a
    reference. Hashes by identity so it can live in a set.
    """

    def __init__(self, websocket: WebSocket, path: str):
        self.websocket = websocket
        self.path = path
        self.connection_id = str(uuid.uuid4())
        self.connected_at = time.time()
        self.status = ConnectionStatus.OPEN
        self.timer: Optional[HeartbeatTimer] = None

    def __repr__(self) -> str:
        return f"ConnectionHandle(id={self.connection_id!r}, path={self.path!r}, status={self.status.value})"

    @property
    def is_open(self) -> bool:
        """True while both sides of the transport are connected and cleanup has not run."""
        return (
            self.status == ConnectionStatus.OPEN
            and self.websocket.application_state == WebSocketState.CONNECTED
            and self.websocket.client_state == WebSocketState.CONNECTED
        )

    async def send(self, message: WebSocketMessage) -> bool:
        """
        Best-effort send.

        Returns:
            True if the message was handed to the transport, False if the
            connection was not open or the send failed.
        """
        if not self.is_open:
            return False
        try:
            await self.websocket.send_text(message.encode())
            return True
        except Exception as e:
            logger.debug(
                "WebSocket send failed", connection_id=self.connection_id, error=str(e)
            )
            return False

    async def close(self, code: int = 1000, reason: str = "") -> None:
        """Request a graceful close from the server side."""
        if self.websocket.application_state == WebSocketState.DISCONNECTED:
            return
        await self.websocket.close(code=code, reason=reason)

    def release(self) -> bool:
        """
        Mark closed and cancel the heartbeat timer.

        Returns:
            True on the first call, False on later calls.
        """
        if self.status == ConnectionStatus.CLOSED:
            return False
        self.status = ConnectionStatus.CLOSED
        if self.timer is not None:
            self.timer.cancel()
        return True
