"""Redis session store implementing SessionStoreProtocol.

Sessions are JSON objects stored under ``session:<id>`` with an idle TTL
that is pushed forward on every save.

Architecture:
- Implements SessionStoreProtocol without inheritance (structural typing)
- Redis connection errors propagate; the request fails rather than
  silently treating every user as logged out
- Corrupt payloads are logged and treated as a missing session
"""

import json
from typing import Any

from redis.asyncio import Redis

from src.domain.protocols.logger_protocol import LoggerProtocol

SESSION_KEY_PREFIX = "session:"


class RedisSessionStore:
    """Redis-backed session storage.

    Attributes:
        _redis: Async Redis client instance.
        _logger: Logger for corrupt payloads.
    """

    def __init__(self, redis_client: Redis, logger: LoggerProtocol) -> None:
        """Initialize store.

        Args:
            redis_client: Async Redis client instance.
            logger: Structured logger.
        """
        self._redis = redis_client
        self._logger = logger

    @staticmethod
    def _key(session_id: str) -> str:
        return f"{SESSION_KEY_PREFIX}{session_id}"

    async def load(self, session_id: str) -> dict[str, Any] | None:
        """Load session data.

        Args:
            session_id: Session identifier from the session cookie.

        Returns:
            Session values, or None when unknown, expired, or corrupt.
        """
        raw = await self._redis.get(self._key(session_id))
        if raw is None:
            return None

        try:
            data = json.loads(raw)
        except (json.JSONDecodeError, UnicodeDecodeError):
            self._logger.warning("session_payload_corrupt", reason="invalid_json")
            return None

        if not isinstance(data, dict):
            self._logger.warning("session_payload_corrupt", reason="not_an_object")
            return None
        return data

    async def save(self, session_id: str, data: dict[str, Any], ttl: int) -> None:
        """Write session data.

        Args:
            session_id: Session identifier.
            data: JSON-serializable session values.
            ttl: Idle lifetime in seconds.
        """
        await self._redis.setex(
            self._key(session_id), ttl, json.dumps(data, separators=(",", ":"))
        )

    async def destroy(self, session_id: str) -> None:
        """Delete a session. Unknown ids are a no-op."""
        await self._redis.delete(self._key(session_id))
