"""
WebSocket Infrastructure
========================

Components:
- Registry: set of open connections for counting and bulk shutdown
- Connection: per-connection handle with heartbeat timer
- Handler: accept, welcome, heartbeat, echo, cleanup
- Models: Pydantic models for outbound messages
"""

from .connection import ConnectionHandle
from .handler import WebSocketHandler, parse_inbound
from .models import ConnectionStatus, WelcomeMessage, HeartbeatMessage, EchoMessage
from .registry import ConnectionRegistry

__all__ = [
    "ConnectionHandle",
    "ConnectionRegistry",
    "WebSocketHandler",
    "parse_inbound",
    "ConnectionStatus",
    "WelcomeMessage",
    "HeartbeatMessage",
    "EchoMessage",
]
