"""
Heartbeat Timer
===============

Cancellable periodic task bound to a single streaming connection.
"""

import asyncio
from typing import Awaitable, Callable, Optional

from src.config.logging import get_logger

logger = get_logger(__name__)

HeartbeatCallback = Callable[[], Awaitable[None]]


class HeartbeatTimer:
    """
    Runs a coroutine callback every ``interval`` seconds until cancelled.

    The first tick fires one interval after ``start()``. ``cancel()`` may be
    called any number of times, before or after the timer has started.
    """

    def __init__(self, interval: float, callback: HeartbeatCallback, name: Optional[str] = None):
        if interval <= 0:
            raise ValueError("Heartbeat interval must be positive")
        self.interval = interval
        self.callback = callback
        self.name = name or "heartbeat"
        self._task: Optional["asyncio.Task[None]"] = None
        self._cancelled = False

    @property
    def active(self) -> bool:
        """Whether the timer is started and not yet cancelled."""
        return self._task is not None and not self._cancelled and not self._task.done()

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def start(self) -> None:
        """Schedule the timer on the running event loop."""
        if self._cancelled:
            raise RuntimeError(f"Timer {self.name} was cancelled and cannot be restarted")
        if self._task is not None:
            raise RuntimeError(f"Timer {self.name} is already running")
        self._task = asyncio.get_running_loop().create_task(self._run(), name=self.name)

    def cancel(self) -> bool:
        """
        Stop the timer.

        Returns:
            True if this call stopped a running timer, False if it was already
            stopped or never started.
        """
        if self._cancelled:
            return False
        self._cancelled = True
        if self._task is None or self._task.done():
            return False
        self._task.cancel()
        return True

    async def _run(self) -> None:
        while not self._cancelled:
            await asyncio.sleep(self.interval)
            if self._cancelled:
                break
            try:
                await self.callback()
            except asyncio.CancelledError:
                raise
            except Exception as e:
                logger.warning("Heartbeat callback failed", timer=self.name, error=str(e))
