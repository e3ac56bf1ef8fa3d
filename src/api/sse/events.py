"""
SSE Events
==========

Server-Sent Events formatting functions.
Handles SSE protocol framing for the stream payload models.
"""

from typing import Optional, Dict, Any, List, Union
import json

from pydantic import BaseModel

from .models import SSEConnectedEvent, SSEHeartbeatEvent


def format_sse_event(
    data: Union[Dict[str, Any], BaseModel],
    event_type: Optional[str] = None,
    event_id: Optional[str] = None,
    retry_after: Optional[int] = None,
) -> str:
    """
    Format data for Server-Sent Events protocol.

    Without ``event_type`` the frame is an unnamed message, which browsers
    deliver to ``EventSource.onmessage``.

    Args:
        data: Event data dictionary or model
        event_type: Optional event name
        event_id: Optional event ID for client-side event tracking
        retry_after: Optional retry interval in milliseconds

    Returns:
        Formatted SSE message string
    """
    lines: List[str] = []

    if event_id:
        lines.append(f"id: {event_id}")

    if event_type:
        lines.append(f"event: {event_type}")

    if retry_after:
        lines.append(f"retry: {retry_after}")

    # Add data (JSON formatted)
    if isinstance(data, BaseModel):
        data_json = data.model_dump_json()
    else:
        data_json = json.dumps(data, default=str, separators=(",", ":"))
    lines.append(f"data: {data_json}")

    # SSE protocol requires double newline at end
    lines.append("")
    lines.append("")

    return "\n".join(lines)


def create_connected_event(path: str, method: str) -> str:
    """Create the stream opening event."""
    return format_sse_event(SSEConnectedEvent(path=path, method=method))


def create_heartbeat_event(path: str, method: str) -> str:
    """Create heartbeat event to keep connection alive."""
    return format_sse_event(SSEHeartbeatEvent(path=path, method=method))
