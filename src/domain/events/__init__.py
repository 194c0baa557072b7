"""Domain events module.

This module exports the session guard events for use throughout the
application. Events decouple the guard from observability concerns
(logging, audit).

Usage:
    >>> from src.domain.events import LoginSucceeded
    >>>
    >>> event = LoginSucceeded(guard_name="web", user_id=str(user.id))
    >>> await event_bus.publish(event)
"""

from src.domain.events.base_event import DomainEvent
from src.domain.events.session_auth_events import (
    SESSION_AUTH_EVENTS,
    AuthenticationAttempted,
    AuthenticationFailed,
    AuthenticationSucceeded,
    CredentialsVerified,
    LoggedOut,
    LoginAttempted,
    LoginFailed,
    LoginSucceeded,
    SessionAuthEvent,
)

__all__ = [
    "DomainEvent",
    "SESSION_AUTH_EVENTS",
    "SessionAuthEvent",
    "AuthenticationAttempted",
    "AuthenticationFailed",
    "AuthenticationSucceeded",
    "CredentialsVerified",
    "LoggedOut",
    "LoginAttempted",
    "LoginFailed",
    "LoginSucceeded",
]
