"""
Health Reporter
===============

Computes service health snapshots on demand.
"""

import time
from typing import Callable

from src.api.ws.registry import ConnectionRegistry
from src.models.schemas import HealthSnapshot
from src.utils import utc_timestamp


class HealthReporter:
    """
    Reports uptime and the number of open WebSocket connections.

    SSE streams are not counted.
    """

    def __init__(
        self,
        registry: ConnectionRegistry,
        version: str,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.registry = registry
        self.version = version
        self._clock = clock
        self.started_at = clock()

    @property
    def uptime(self) -> int:
        return int(self._clock() - self.started_at)

    def snapshot(self) -> HealthSnapshot:
        return HealthSnapshot(
            uptime=self.uptime,
            timestamp=utc_timestamp(),
            version=self.version,
            websocket_connections=len(self.registry),
        )
