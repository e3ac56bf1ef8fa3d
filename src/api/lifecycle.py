"""
Lifecycle Controller
====================

Ordered shutdown: close WebSocket clients, refuse new ones, then stop the
HTTP listener.
"""

from typing import Callable, Optional

from src.api.ws.connection import SHUTDOWN_CLOSE_CODE, SHUTDOWN_CLOSE_REASON
from src.api.ws.registry import ConnectionRegistry
from src.config.logging import get_logger

logger = get_logger(__name__)


class LifecycleController:
    """
    Coordinates graceful shutdown.

    ``shutdown()`` runs at most once. Every step is best-effort: a failure
    while closing one connection is logged and the sequence continues.
    SSE streams are left to finish on their own.
    """

    def __init__(
        self,
        registry: ConnectionRegistry,
        stop_listener: Optional[Callable[[], None]] = None,
    ):
        self.registry = registry
        self.stop_listener = stop_listener
        self.accepting_websockets = True
        self.shutting_down = False

    def bind_listener(self, stop_listener: Callable[[], None]) -> None:
        """Attach the callback that tells the HTTP server to stop accepting connections."""
        self.stop_listener = stop_listener

    async def shutdown(self, reason: str = "shutdown") -> None:
        if self.shutting_down:
            logger.debug("Shutdown already in progress", reason=reason)
            return
        self.shutting_down = True
        logger.info("Shutting down", reason=reason, websocket_connections=len(self.registry))

        # Registration closes before the first await
        handles = self.registry.snapshot()
        self.accepting_websockets = False
        self.registry.close()

        closed = 0
        for handle in handles:
            try:
                await handle.close(code=SHUTDOWN_CLOSE_CODE, reason=SHUTDOWN_CLOSE_REASON)
                closed += 1
            except Exception as e:
                logger.warning(
                    "Error closing WebSocket connection",
                    connection_id=handle.connection_id,
                    error=str(e),
                )

        self.registry.clear()
        logger.info("WebSocket connections closed", closed=closed)

        # Stop the HTTP listener; in-flight streams finish on their own
        if self.stop_listener is not None:
            try:
                self.stop_listener()
            except Exception as e:
                logger.error("Error stopping HTTP listener", error=str(e))
