"""Connection admission control."""

from __future__ import annotations

import asyncio
from typing import Any


class ConnectionManager:
    def __init__(self, *, max_connections: int) -> None:
        self._max = max(1, int(max_connections))
        self._lock = asyncio.Lock()
        self._active: set[int] = set()

    async def connect(self, conn: Any) -> bool:
        """Admit a connection unless the server is at capacity."""
        key = id(conn)
        async with self._lock:
            if len(self._active) >= self._max:
                return False
            self._active.add(key)
            return True

    async def disconnect(self, conn: Any) -> None:
        async with self._lock:
            self._active.discard(id(conn))

    def get_connection_count(self) -> int:
        return len(self._active)


__all__ = ["ConnectionManager"]
