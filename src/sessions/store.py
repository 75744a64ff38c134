"""Concurrency-safe session store."""

from __future__ import annotations

import uuid
import asyncio
import logging
from typing import TypeVar
from dataclasses import field, dataclass
from collections.abc import Callable, Awaitable

from src.errors import SessionNotFoundError
from src.models.handler import ModelHandler
from src.state.session import Session, SessionSnapshot

logger = logging.getLogger(__name__)

T = TypeVar("T")

Mutator = Callable[[Session], Awaitable[T]]


@dataclass(slots=True)
class _Entry:
    session: Session
    lock: asyncio.Lock = field(default_factory=asyncio.Lock)
    closed: bool = False


class SessionStore:
    """Owns every session; callers mutate them only through ``get_and_apply``.

    ``_lock`` guards the id map and is only held for short, non-awaiting
    sections. Each session also has its own lock that serializes mutations and
    closes for that id. The map lock is never held while waiting on a session
    lock.
    """

    def __init__(self) -> None:
        self._lock = asyncio.Lock()
        self._entries: dict[str, _Entry] = {}

    async def create(self, model: str, handler: ModelHandler) -> str:
        session_id = str(uuid.uuid4())
        async with self._lock:
            if session_id in self._entries:
                raise RuntimeError(f"session id collision: {session_id}")
            self._entries[session_id] = _Entry(Session(model=model, handler=handler))
        logger.debug("session created session_id=%s model=%s", session_id, model)
        return session_id

    async def _entry(self, session_id: str) -> _Entry:
        async with self._lock:
            entry = self._entries.get(session_id)
        if entry is None:
            raise SessionNotFoundError(session_id)
        return entry

    async def get_and_apply(self, session_id: str, mutator: Mutator[T]) -> T:
        """Run ``mutator`` on the session under exclusive access.

        Raises:
            SessionNotFoundError: If the id is unknown or was closed before the
                session lock was acquired.
        """
        entry = await self._entry(session_id)
        async with entry.lock:
            if entry.closed:
                raise SessionNotFoundError(session_id)
            return await mutator(entry.session)

    async def close(self, session_id: str) -> None:
        entry = await self._entry(session_id)
        async with entry.lock:
            if entry.closed:
                raise SessionNotFoundError(session_id)
            entry.closed = True
            async with self._lock:
                self._entries.pop(session_id, None)
        logger.debug("session closed session_id=%s", session_id)

    async def snapshot(self, session_id: str) -> SessionSnapshot:
        entry = await self._entry(session_id)
        async with entry.lock:
            if entry.closed:
                raise SessionNotFoundError(session_id)
            return entry.session.snapshot()

    def count(self) -> int:
        return len(self._entries)


__all__ = ["Mutator", "SessionStore"]
