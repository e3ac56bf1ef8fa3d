"""
WebSocket Models
================

Pydantic models for messages sent over the WebSocket endpoint.
"""

from enum import Enum
from typing import Any, Literal
from pydantic import BaseModel, Field

from src.utils import utc_timestamp


class ConnectionStatus(str, Enum):
    """WebSocket connection status."""

    OPEN = "open"
    CLOSED = "closed"


class WebSocketMessage(BaseModel):
    """Base class for server-to-client messages."""

    def encode(self) -> str:
        """Serialize to compact JSON text."""
        return self.model_dump_json()


class WelcomeMessage(WebSocketMessage):
    """Sent once right after the connection is accepted."""

    type: Literal["connected"] = "connected"
    message: str = Field(default="WebSocket connection established")
    path: str = Field(..., description="Connection path without query string")
    timestamp: str = Field(default_factory=utc_timestamp)


class HeartbeatMessage(WebSocketMessage):
    """Periodic keep-alive carrying the number of open WebSocket connections."""

    type: Literal["heartbeat"] = "heartbeat"
    timestamp: str = Field(default_factory=utc_timestamp)
    connections: int = Field(..., ge=0, description="Open WebSocket connections")


class EchoMessage(WebSocketMessage):
    """Reply to every inbound message."""

    type: Literal["echo"] = "echo"
    original: Any = Field(..., description="Parsed JSON payload, or the raw text")
    timestamp: str = Field(default_factory=utc_timestamp)
    path: str = Field(..., description="Connection path without query string")
