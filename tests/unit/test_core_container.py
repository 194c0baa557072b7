"""Unit tests for the dependency container.

Tests cover:
- Singleton factories (lru_cache)
- Session store backend selection (Redis vs in-memory)
- Cookie cipher construction and invalid key handling
- Event bus wiring of the logging handler
- Password service cost factor from settings

Note:
    Factories import adapters inside the function, so Redis classes are
    patched at their import location (redis.asyncio.*).
"""

from unittest.mock import MagicMock, patch

import pytest

from src.core.container import (
    get_cookie_cipher,
    get_event_bus,
    get_logger,
    get_password_service,
    get_session_store,
)
from src.domain.events import SESSION_AUTH_EVENTS
from src.infrastructure.events.in_memory_event_bus import InMemoryEventBus
from src.infrastructure.security import BcryptPasswordService, CookieCipher
from src.infrastructure.session import MemorySessionStore, RedisSessionStore

_FACTORIES = (
    get_cookie_cipher,
    get_event_bus,
    get_logger,
    get_password_service,
    get_session_store,
)


@pytest.fixture(autouse=True)
def clear_container_caches():
    """Reset container singletons around every test."""
    for factory in _FACTORIES:
        factory.cache_clear()
    yield
    for factory in _FACTORIES:
        factory.cache_clear()


@pytest.mark.unit
class TestSessionStoreSelection:
    """Test get_session_store() backend selection."""

    def test_memory_store_without_redis_url(self, monkeypatch):
        """Test the in-memory store is used when REDIS_URL is unset."""
        monkeypatch.delenv("REDIS_URL", raising=False)

        store = get_session_store()

        assert isinstance(store, MemorySessionStore)
        assert get_session_store() is store

    def test_redis_store_with_redis_url(self, monkeypatch):
        """Test the Redis store is built from REDIS_URL."""
        # Arrange
        monkeypatch.setenv("REDIS_URL", "redis://localhost:6379/0")

        with patch("redis.asyncio.ConnectionPool") as mock_pool_cls:
            with patch("redis.asyncio.Redis") as mock_redis_cls:
                mock_pool = MagicMock()
                mock_pool_cls.from_url.return_value = mock_pool

                # Act
                store = get_session_store()

        # Assert
        assert isinstance(store, RedisSessionStore)
        call_args = mock_pool_cls.from_url.call_args
        assert call_args[0][0] == "redis://localhost:6379/0"
        assert call_args[1]["max_connections"] == 50
        assert call_args[1]["decode_responses"] is False
        mock_redis_cls.assert_called_once_with(connection_pool=mock_pool)


@pytest.mark.unit
class TestCookieCipherFactory:
    """Test get_cookie_cipher()."""

    def test_returns_singleton_cipher(self):
        """Test a valid key yields one shared cipher."""
        cipher = get_cookie_cipher()

        assert isinstance(cipher, CookieCipher)
        assert get_cookie_cipher() is cipher

    def test_invalid_key_raises(self, monkeypatch):
        """Test an invalid ENCRYPTION_KEY fails fast."""
        monkeypatch.setenv("ENCRYPTION_KEY", "too-short")

        with pytest.raises(RuntimeError, match="Invalid ENCRYPTION_KEY"):
            get_cookie_cipher()


@pytest.mark.unit
class TestEventBusFactory:
    """Test get_event_bus()."""

    def test_event_bus_singleton_with_logging_handler(self):
        """Test the bus is shared and every guard event has a logging handler."""
        event_bus = get_event_bus()

        assert isinstance(event_bus, InMemoryEventBus)
        assert get_event_bus() is event_bus
        for event_type in SESSION_AUTH_EVENTS:
            assert event_bus.handler_count(event_type) == 1


@pytest.mark.unit
class TestPasswordServiceFactory:
    """Test get_password_service()."""

    def test_cost_factor_from_settings(self, monkeypatch):
        """Test BCRYPT_ROUNDS sets the cost factor."""
        monkeypatch.setenv("BCRYPT_ROUNDS", "5")

        service = get_password_service()

        assert isinstance(service, BcryptPasswordService)
        assert service.hash_password("pw").startswith("$2b$05$")


@pytest.mark.unit
class TestLoggerFactory:
    """Test get_logger()."""

    def test_logger_singleton_supports_bind(self):
        """Test the logger is shared and bind() returns a logger."""
        logger = get_logger()

        assert get_logger() is logger
        bound = logger.bind(guard="web")
        bound.debug("container_test")
