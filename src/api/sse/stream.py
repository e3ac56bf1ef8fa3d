"""
SSE Stream
==========

Per-request Server-Sent Events stream: one ``connected`` event followed by
heartbeats until the client goes away.
"""

import asyncio
from typing import AsyncIterator, Optional

from src.api.heartbeat import HeartbeatTimer
from src.config.logging import get_logger

from .events import create_connected_event, create_heartbeat_event
from .models import SSEStreamState

logger = get_logger(__name__)


class SSEStream:
    """
    Heartbeat stream for a single HTTP request.

    Heartbeats are produced by the timer into a local queue and only written
    out by ``events()``. The generator's ``finally`` block closes the stream,
    so the timer is cancelled on every exit path: client disconnect, task
    cancellation, or the response being torn down.
    """

    def __init__(self, path: str, method: str, heartbeat_interval: float = 2.0):
        self.path = path
        self.method = method
        self.state = SSEStreamState.OPEN
        self.events_sent = 0
        self.queue: asyncio.Queue[Optional[str]] = asyncio.Queue()
        self.timer = HeartbeatTimer(
            heartbeat_interval, self._enqueue_heartbeat, name=f"sse-heartbeat {path}"
        )
        self.logger = logger.bind(component="sse_stream", path=path, method=method)

    @property
    def is_open(self) -> bool:
        return self.state == SSEStreamState.OPEN

    async def _enqueue_heartbeat(self) -> None:
        if self.is_open:
            await self.queue.put(create_heartbeat_event(self.path, self.method))

    async def events(self) -> AsyncIterator[str]:
        """
        Yield SSE frames until the stream is closed.

        Yields:
            SSE formatted events
        """
        try:
            self.timer.start()
            yield create_connected_event(self.path, self.method)
            self.events_sent += 1

            while self.is_open:
                event = await self.queue.get()

                # None is a signal to stop
                if event is None:
                    break

                yield event
                self.events_sent += 1
        finally:
            self.close()

    def close(self) -> None:
        """Move to CLOSED and stop the heartbeat timer. Safe to call repeatedly."""
        if self.state == SSEStreamState.CLOSED:
            return
        self.state = SSEStreamState.CLOSED
        self.timer.cancel()
        self.queue.put_nowait(None)
        self.logger.info("SSE connection closed", events_sent=self.events_sent)
