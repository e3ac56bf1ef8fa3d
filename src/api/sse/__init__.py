"""
Server-Sent Events (SSE) Infrastructure
======================================

Components:
- Stream: per-request heartbeat stream with timer lifecycle
- Events: SSE protocol framing
- Models: Pydantic models for SSE payloads
"""

from .stream import SSEStream
from .events import format_sse_event, create_connected_event, create_heartbeat_event
from .models import SSEStreamState, SSEConnectedEvent, SSEHeartbeatEvent

__all__ = [
    "SSEStream",
    "format_sse_event",
    "create_connected_event",
    "create_heartbeat_event",
    "SSEStreamState",
    "SSEConnectedEvent",
    "SSEHeartbeatEvent",
]
