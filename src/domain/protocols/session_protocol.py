"""Session protocols.

Two ports:
    - SessionProtocol: request view of a server-side session. Synchronous;
      the data is loaded before the handler runs and committed after.
    - SessionStoreProtocol: backing store keyed by session id.

Implementations:
    - RequestSession: src/infrastructure/session/request_session.py
    - RedisSessionStore / MemorySessionStore: src/infrastructure/session/
"""

from typing import Any, Protocol


class SessionProtocol(Protocol):
    """Per-request session data."""

    @property
    def session_id(self) -> str:
        """Current session identifier."""
        ...

    def get(self, key: str, default: Any = None) -> Any:
        """Read a value."""
        ...

    def put(self, key: str, value: Any) -> None:
        """Store a value (must be JSON serializable)."""
        ...

    def forget(self, key: str) -> None:
        """Remove a value. Missing keys are ignored."""
        ...

    def regenerate(self) -> None:
        """Issue a new session identifier, keeping the data."""
        ...

    def all(self) -> dict[str, Any]:
        """Return a copy of all session values."""
        ...


class SessionStoreProtocol(Protocol):
    """Backing store for session data."""

    async def load(self, session_id: str) -> dict[str, Any] | None:
        """Load session data.

        Returns:
            Stored values, or None when the session is unknown or expired.
        """
        ...

    async def save(self, session_id: str, data: dict[str, Any], ttl: int) -> None:
        """Write session data with an idle lifetime in seconds."""
        ...

    async def destroy(self, session_id: str) -> None:
        """Delete a session. Unknown ids are a no-op."""
        ...
