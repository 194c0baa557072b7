"""In-memory session store for development and tests.

Process-local; sessions are lost on restart and not shared between workers.
Expired entries are dropped on load and swept on every save.
"""

import copy
import time
from typing import Any


class MemorySessionStore:
    """Dictionary-backed SessionStoreProtocol implementation."""

    def __init__(self) -> None:
        self._sessions: dict[str, tuple[float, dict[str, Any]]] = {}

    async def load(self, session_id: str) -> dict[str, Any] | None:
        entry = self._sessions.get(session_id)
        if entry is None:
            return None

        expires_at, data = entry
        if time.time() >= expires_at:
            del self._sessions[session_id]
            return None
        return copy.deepcopy(data)

    async def save(self, session_id: str, data: dict[str, Any], ttl: int) -> None:
        now = time.time()
        self._sweep(now)
        self._sessions[session_id] = (now + ttl, copy.deepcopy(data))

    async def destroy(self, session_id: str) -> None:
        self._sessions.pop(session_id, None)

    def __len__(self) -> int:
        return len(self._sessions)

    def _sweep(self, now: float) -> None:
        expired = [
            sid
            for sid, (expires_at, _) in self._sessions.items()
            if now >= expires_at
        ]
        for sid in expired:
            del self._sessions[sid]
