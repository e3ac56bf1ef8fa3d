"""
Test Helpers
============

Helper functions for common testing operations.
"""

import asyncio
import json
import time
from typing import Any, Callable, Dict, List, Optional, Tuple


async def wait_for_condition(
    condition: Callable[[], bool],
    timeout: float = 5.0,
    interval: float = 0.01,
    error_message: str = "Condition not met within timeout",
) -> None:
    """Wait for a condition to become true."""
    start_time = time.time()

    while time.time() - start_time < timeout:
        if condition():
            return
        await asyncio.sleep(interval)

    raise TimeoutError(error_message)


def wait_until(
    condition: Callable[[], bool],
    timeout: float = 5.0,
    interval: float = 0.01,
    error_message: str = "Condition not met within timeout",
) -> None:
    """Blocking variant of ``wait_for_condition`` for synchronous tests."""
    start_time = time.time()

    while time.time() - start_time < timeout:
        if condition():
            return
        time.sleep(interval)

    raise TimeoutError(error_message)


async def stream_sse(
    app: Callable,
    path: str = "/",
    method: str = "GET",
    query_string: bytes = b"",
    frame_count: int = 2,
    timeout: float = 5.0,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Drive an ASGI app as an SSE client and disconnect after ``frame_count`` frames.

    The test client buffers whole responses, so endless streams are exercised
    here with a scripted receive/send pair instead.

    Returns:
        The ``http.response.start`` message and the body frames received
    """
    start: Dict[str, Any] = {}
    frames: List[str] = []
    disconnected = asyncio.Event()

    async def receive() -> Dict[str, Any]:
        await disconnected.wait()
        return {"type": "http.disconnect"}

    async def send(message: Dict[str, Any]) -> None:
        if message["type"] == "http.response.start":
            start.update(message)
        elif message["type"] == "http.response.body":
            body = message.get("body", b"")
            if body:
                frames.append(body.decode("utf-8"))
            if len(frames) >= frame_count:
                disconnected.set()

    scope = {
        "type": "http",
        "asgi": {"version": "3.0", "spec_version": "2.3"},
        "http_version": "1.1",
        "method": method,
        "scheme": "http",
        "path": path,
        "raw_path": path.encode("utf-8"),
        "query_string": query_string,
        "root_path": "",
        "headers": [(b"host", b"testserver"), (b"accept", b"text/event-stream")],
        "client": ("127.0.0.1", 50000),
        "server": ("testserver", 80),
    }

    await asyncio.wait_for(app(scope, receive, send), timeout)
    return start, frames


def response_headers(start: Dict[str, Any]) -> Dict[str, str]:
    """Decode the header list of an ``http.response.start`` message."""
    return {k.decode("latin-1").lower(): v.decode("latin-1") for k, v in start.get("headers", [])}


def parse_sse_data(frame: str) -> Dict[str, Any]:
    """Decode the JSON carried in the ``data:`` lines of one SSE frame."""
    payload = "\n".join(
        line[len("data:"):].lstrip(" ")
        for line in frame.splitlines()
        if line.startswith("data:")
    )
    if not payload:
        raise ValueError("SSE frame has no data lines")
    return json.loads(payload)


def decode_frames(frames: List[str]) -> List[Dict[str, Any]]:
    """Parse the JSON payload of each SSE frame."""
    return [parse_sse_data(frame) for frame in frames]


def first_of_type(
    receive: Callable[[], Dict[str, Any]], message_type: str, limit: int = 50
) -> Optional[Dict[str, Any]]:
    """Read WebSocket JSON messages until one of ``message_type`` arrives."""
    for _ in range(limit):
        message = receive()
        if message.get("type") == message_type:
            return message
    return None
