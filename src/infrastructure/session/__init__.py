"""Server-side session infrastructure.

- RequestSession: per-request view implementing SessionProtocol
- RedisSessionStore: Redis-backed store (production)
- MemorySessionStore: process-local store (development/testing)
"""

from src.infrastructure.session.memory_session_store import MemorySessionStore
from src.infrastructure.session.redis_session_store import RedisSessionStore
from src.infrastructure.session.request_session import (
    RequestSession,
    generate_session_id,
)

__all__ = [
    "MemorySessionStore",
    "RedisSessionStore",
    "RequestSession",
    "generate_session_id",
]
