"""
API Schemas
===========

Pydantic models for HTTP response bodies.
"""

from typing import Literal
from pydantic import BaseModel, Field


class HealthSnapshot(BaseModel):
    """Health check status."""

    status: Literal["healthy"] = Field(default="healthy", description="Overall status")
    uptime: int = Field(..., ge=0, description="Whole seconds since the service started")
    timestamp: str = Field(..., description="Check timestamp")
    version: str = Field(..., description="Application version")
    websocket_connections: int = Field(0, ge=0, description="Open WebSocket connections")
