"""Session guard domain events.

Pattern: 3 events per workflow (ATTEMPTED → SUCCEEDED/FAILED)
- *Attempted: Guard started the operation (before any I/O)
- *Succeeded: Operation completed successfully
- *Failed: Operation failed (published BEFORE the error is raised)

Workflows:
- Login: LoginAttempted → LoginSucceeded / LoginFailed
- Authentication: AuthenticationAttempted → AuthenticationSucceeded /
  AuthenticationFailed
- Credentials: CredentialsVerified (or LoginFailed)
- Logout: LoggedOut

Handlers:
- LoggingEventHandler: ALL events

Every event carries the name of the guard that published it. Token secrets
are never included; remember-me tokens are identified by series only.
"""

from dataclasses import dataclass

from src.domain.events.base_event import DomainEvent


@dataclass(frozen=True, kw_only=True)
class SessionAuthEvent(DomainEvent):
    """Base class for events published by a session guard.

    Attributes:
        guard_name: Name of the publishing guard (e.g., "web").
        session_id: Session identifier at publication time.
    """

    guard_name: str
    session_id: str | None = None


# ═══════════════════════════════════════════════════════════════
# Credentials
# ═══════════════════════════════════════════════════════════════


@dataclass(frozen=True, kw_only=True)
class CredentialsVerified(SessionAuthEvent):
    """User-supplied credentials matched a user.

    Attributes:
        uid: Identifier the user signed in with (e.g., email).
        user_id: ID of the matched user.
    """

    uid: str
    user_id: str


# ═══════════════════════════════════════════════════════════════
# Login
# ═══════════════════════════════════════════════════════════════


@dataclass(frozen=True, kw_only=True)
class LoginAttempted(SessionAuthEvent):
    """Login started for a user.

    Attributes:
        user_id: ID of the user being logged in (None when unknown yet).
        uid: Identifier the user signed in with, when known.
    """

    user_id: str | None = None
    uid: str | None = None


@dataclass(frozen=True, kw_only=True)
class LoginSucceeded(SessionAuthEvent):
    """User logged in; session holds the user id.

    Attributes:
        user_id: ID of the logged in user.
        remember_me_series: Series of the minted remember-me token, if any.
    """

    user_id: str
    remember_me_series: str | None = None


@dataclass(frozen=True, kw_only=True)
class LoginFailed(SessionAuthEvent):
    """Login failed.

    Attributes:
        reason: Failure reason (e.g., "invalid_credentials", "user_not_found").
        uid: Identifier the user signed in with, when known.
        user_id: User ID, when known.
    """

    reason: str
    uid: str | None = None
    user_id: str | None = None


# ═══════════════════════════════════════════════════════════════
# Request Authentication
# ═══════════════════════════════════════════════════════════════


@dataclass(frozen=True, kw_only=True)
class AuthenticationAttempted(SessionAuthEvent):
    """Guard started authenticating the current request."""


@dataclass(frozen=True, kw_only=True)
class AuthenticationSucceeded(SessionAuthEvent):
    """Request authenticated.

    Attributes:
        user_id: ID of the authenticated user.
        via_remember: True when a remember-me token was used.
        remember_me_series: Series of the token used, if any.
    """

    user_id: str
    via_remember: bool = False
    remember_me_series: str | None = None


@dataclass(frozen=True, kw_only=True)
class AuthenticationFailed(SessionAuthEvent):
    """Request authentication failed.

    The reason is for audit only. Callers always receive the same
    InvalidAuthSession error regardless of reason.

    Attributes:
        reason: Failure reason (e.g., "remember_cookie_missing",
            "token_hash_mismatch", "token_expired").
        user_id: User ID, when known.
        remember_me_series: Series of the presented token, when decodable.
    """

    reason: str
    user_id: str | None = None
    remember_me_series: str | None = None


# ═══════════════════════════════════════════════════════════════
# Logout
# ═══════════════════════════════════════════════════════════════


@dataclass(frozen=True, kw_only=True)
class LoggedOut(SessionAuthEvent):
    """User logged out.

    Attributes:
        user_id: ID of the user that was authenticated, if any.
        remember_me_series: Series of the deleted remember-me token, if any.
    """

    user_id: str | None = None
    remember_me_series: str | None = None


SESSION_AUTH_EVENTS: tuple[type[SessionAuthEvent], ...] = (
    CredentialsVerified,
    LoginAttempted,
    LoginSucceeded,
    LoginFailed,
    AuthenticationAttempted,
    AuthenticationSucceeded,
    AuthenticationFailed,
    LoggedOut,
)
