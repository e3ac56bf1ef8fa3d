"""
WebSocket Connection Registry
=============================

Set of open WebSocket connections, used for counting and bulk shutdown.
"""

from typing import Iterator, List, Set

from .connection import ConnectionHandle


class ConnectionRegistry:
    """
    Tracks open WebSocket connections.

    A handle is present iff its connection is open. Handlers add on accept
    and discard on close or error; removal of an absent handle is a no-op.
    Once ``close()`` is called no handle can be added again.
    """

    def __init__(self) -> None:
        self._connections: Set[ConnectionHandle] = set()
        self.closed = False

    def add(self, handle: ConnectionHandle) -> bool:
        """
        Register an accepted connection.

        Returns:
            False if the registry is closed and the handle was not added
        """
        if self.closed:
            return False
        self._connections.add(handle)
        return True

    def discard(self, handle: ConnectionHandle) -> None:
        self._connections.discard(handle)

    def snapshot(self) -> List[ConnectionHandle]:
        """Copy of the current handles, safe to iterate while the registry changes."""
        return list(self._connections)

    def close(self) -> None:
        """Refuse further registrations. Existing handles stay until discarded or cleared."""
        self.closed = True

    def clear(self) -> None:
        self._connections.clear()

    def __len__(self) -> int:
        return len(self._connections)

    def __contains__(self, handle: object) -> bool:
        return handle in self._connections

    def __iter__(self) -> Iterator[ConnectionHandle]:
        return iter(self.snapshot())
