"""Domain protocols (ports) package.

This package contains protocol definitions that the domain layer needs.
Infrastructure adapters implement these protocols without inheritance.

IMPORTANT: Re-exports are ONLY for protocols defined in this package.
Do NOT re-export from other domain subpackages (events, entities) to avoid
circular import risks.

Usage:
    from src.domain.protocols import SessionProtocol, SessionUserProviderProtocol
"""

from src.domain.protocols.event_bus_protocol import EventBusProtocol, EventHandler
from src.domain.protocols.http_context_protocol import (
    CookieReaderProtocol,
    CookieWriterProtocol,
    HttpContext,
)
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.password_hashing_protocol import PasswordHashingProtocol
from src.domain.protocols.remember_me_token_repository import (
    RememberMeTokenRepository,
)
from src.domain.protocols.session_protocol import (
    SessionProtocol,
    SessionStoreProtocol,
)
from src.domain.protocols.user_provider_protocol import (
    GuardUser,
    SessionUserProviderProtocol,
)
from src.domain.protocols.user_repository import UserRepository

__all__ = [
    # Service protocols
    "EventBusProtocol",
    "EventHandler",
    "LoggerProtocol",
    "PasswordHashingProtocol",
    # Request protocols
    "CookieReaderProtocol",
    "CookieWriterProtocol",
    "HttpContext",
    "SessionProtocol",
    "SessionStoreProtocol",
    # User protocols
    "GuardUser",
    "SessionUserProviderProtocol",
    # Repository protocols
    "RememberMeTokenRepository",
    "UserRepository",
]
