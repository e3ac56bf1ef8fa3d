"""
SSE Models
==========

Pydantic models for Server-Sent Events payloads and stream state.
"""

from enum import Enum
from typing import Literal
from pydantic import BaseModel, Field

from src.utils import utc_timestamp


class SSEStreamState(str, Enum):
    """SSE stream status."""

    OPEN = "open"
    CLOSED = "closed"


class SSEConnectedEvent(BaseModel):
    """First event sent on every stream."""

    type: Literal["connected"] = "connected"
    message: str = Field(default="Connection established", description="Human-readable status")
    path: str = Field(..., description="Request target, including query string")
    method: str = Field(..., description="HTTP method of the request")
    timestamp: str = Field(default_factory=utc_timestamp, description="Event timestamp")


class SSEHeartbeatEvent(BaseModel):
    """Periodic keep-alive event."""

    type: Literal["heartbeat"] = "heartbeat"
    timestamp: str = Field(default_factory=utc_timestamp, description="Heartbeat timestamp")
    path: str = Field(..., description="Request target, including query string")
    method: str = Field(..., description="HTTP method of the request")
