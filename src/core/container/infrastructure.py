# mypy: disable-error-code="arg-type"
"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Logging (console, JSON outside development)
- Database (SQLAlchemy async engine)
- Password hashing (bcrypt)
- Cookie encryption (AES-256-GCM)
- Session store (Redis, in-memory when REDIS_URL is unset)

Tests patch the environment, then call ``cache_clear()`` on the factories
they depend on.
"""

from functools import lru_cache
from typing import TYPE_CHECKING, AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from src.core.config import get_settings
from src.core.result import Failure, Success
from src.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from src.domain.protocols.logger_protocol import LoggerProtocol
    from src.domain.protocols.password_hashing_protocol import PasswordHashingProtocol
    from src.domain.protocols.session_protocol import SessionStoreProtocol
    from src.infrastructure.security.cookie_cipher import CookieCipher


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from src.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    return ConsoleAdapter(
        use_json=not settings.is_development,
        level=settings.log_level,
    )


@lru_cache()
def get_database() -> Database:
    """Get database manager singleton (app-scoped).

    Returns Database instance with connection pool.
    Use get_db_session() for per-request sessions.

    Returns:
        Database manager instance.
    """
    settings = get_settings()
    return Database(
        database_url=settings.database_url,
        echo=settings.db_echo,
    )


@lru_cache()
def get_password_service() -> "PasswordHashingProtocol":
    """Get password hashing service singleton (app-scoped).

    Cost factor comes from BCRYPT_ROUNDS (12 = ~250ms per hash).

    Returns:
        Password hashing service implementing PasswordHashingProtocol.
    """
    from src.infrastructure.security import BcryptPasswordService

    return BcryptPasswordService(cost_factor=get_settings().bcrypt_rounds)


@lru_cache()
def get_cookie_cipher() -> "CookieCipher":
    """Get cookie cipher singleton (app-scoped).

    Returns:
        CookieCipher keyed with ENCRYPTION_KEY.

    Raises:
        RuntimeError: If ENCRYPTION_KEY is not a url-safe base64 32-byte key.
            Fails at startup rather than on the first request.
    """
    from src.infrastructure.security import CookieCipher

    match CookieCipher.create(get_settings().encryption_key):
        case Success(value=cipher):
            return cipher
        case Failure(error=error):
            raise RuntimeError(f"Invalid ENCRYPTION_KEY: {error.message}")


@lru_cache()
def get_session_store() -> "SessionStoreProtocol":
    """Get session store singleton (app-scoped).

    Returns RedisSessionStore when REDIS_URL is set, otherwise a process-local
    MemorySessionStore (single worker development and tests only).

    Returns:
        Session store implementing SessionStoreProtocol.
    """
    settings = get_settings()

    if settings.redis_url:
        from redis.asyncio import ConnectionPool, Redis

        from src.infrastructure.session import RedisSessionStore

        pool = ConnectionPool.from_url(
            settings.redis_url,
            max_connections=50,
            decode_responses=False,
            socket_connect_timeout=5,
            socket_timeout=5,
            retry_on_timeout=True,
        )
        return RedisSessionStore(
            redis_client=Redis(connection_pool=pool),
            logger=get_logger(),
        )

    from src.infrastructure.session import MemorySessionStore

    return MemorySessionStore()


# ============================================================================
# Request-Scoped Dependencies (Per-Request)
# ============================================================================


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Get database session (request-scoped).

    Creates new session per request with automatic transaction management:
        - Commits on success
        - Rolls back on exception
        - Always closes session

    Yields:
        Database session for request duration.

    Usage:
        # Presentation Layer (FastAPI endpoint)
        @router.get("/me")
        async def me(session: AsyncSession = Depends(get_db_session)):
            ...
    """
    db = get_database()
    async with db.get_session() as session:
        yield session
