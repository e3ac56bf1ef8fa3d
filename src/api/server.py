"""
Server Runner
=============

uvicorn server wired to the lifecycle controller, so SIGINT/SIGTERM close
WebSocket clients with a shutdown code before the listener stops.
"""

import asyncio
import signal
from types import FrameType
from typing import Optional, List

import uvicorn
from fastapi import FastAPI

from src.api.lifecycle import LifecycleController
from src.config.logging import get_logger

logger = get_logger(__name__)


class GracefulServer(uvicorn.Server):
    """
    uvicorn server whose signal handler runs the lifecycle controller first.

    The first signal schedules ``LifecycleController.shutdown()``, which ends
    by setting ``should_exit``; a second signal forces exit.
    """

    def __init__(self, config: uvicorn.Config, lifecycle: LifecycleController):
        super().__init__(config)
        self.lifecycle = lifecycle
        self.lifecycle.bind_listener(self.stop_listener)
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._shutdown_task: Optional["asyncio.Task[None]"] = None

    async def startup(self, sockets: Optional[List] = None) -> None:  # type: ignore[override]
        self._loop = asyncio.get_running_loop()
        await super().startup(sockets=sockets)

    def stop_listener(self) -> None:
        self.should_exit = True

    def handle_exit(self, sig: int, frame: Optional[FrameType]) -> None:
        signal_name = signal.Signals(sig).name
        if self.lifecycle.shutting_down or self._loop is None:
            logger.warning("Received signal during shutdown, forcing exit", signal=signal_name)
            self.should_exit = True
            self.force_exit = True
            return

        logger.info(f"Received {signal_name} signal, shutting down...")
        self._loop.call_soon_threadsafe(self._begin_shutdown, signal_name)

    def _begin_shutdown(self, signal_name: str) -> None:
        self._shutdown_task = asyncio.ensure_future(self.lifecycle.shutdown(signal_name))


def run_server(app: FastAPI, host: str, port: int, shutdown_timeout: Optional[float] = None) -> None:
    """Serve ``app`` until a termination signal completes shutdown."""
    config = uvicorn.Config(
        app,
        host=host,
        port=port,
        log_config=None,
        timeout_graceful_shutdown=shutdown_timeout,
    )
    server = GracefulServer(config, app.state.lifecycle)
    server.run()
    logger.info("Server closed")
