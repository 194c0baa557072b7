"""Authentication exceptions raised by the session guard.

Unlike most domain errors, guard failures are raised rather than returned in
Result types: ``authenticate()`` and ``login()`` raise, and ``check()``
converts only the authentication-failure kinds into ``False``. This mirrors
how value objects raise on invalid input (see ``CurrencyMismatchError``).

Taxonomy:
    - AuthenticationError: Base class for recoverable auth failures.
    - InvalidAuthSession: Session or remember-me validation failed for any
      reason. Deliberately undifferentiated so callers cannot tell an expired
      token from a tampered one.
    - InvalidAuthToken: Presented token rejected.
    - InvalidCredentials: Explicit login with bad uid/password or unknown id.
    - GuardConfigurationError: Deployment/programmer misconfiguration. NOT an
      authentication failure; never swallowed by ``check()``.

Usage:
    from src.domain.errors import InvalidAuthSession

    try:
        user = await guard.authenticate()
    except InvalidAuthSession:
        # Redirect to login
        ...
"""

from src.core.enums import ErrorCode


class AuthenticationError(Exception):
    """Base exception for authentication failures.

    Attributes:
        code: Machine-readable error code.
        message: Human-readable message, safe to show to clients.
        guard_name: Name of the guard that raised the error (if any).
    """

    code: ErrorCode = ErrorCode.AUTHENTICATION_FAILED
    default_message: str = "Authentication failed"

    def __init__(self, message: str | None = None, *, guard_name: str | None = None) -> None:
        """Initialize authentication error.

        Args:
            message: Optional override for the default message.
            guard_name: Name of the guard that raised the error.
        """
        self.message = message or self.default_message
        self.guard_name = guard_name
        super().__init__(self.message)

    def __str__(self) -> str:
        """String representation of error."""
        return f"{self.code.value}: {self.message}"


class InvalidAuthSession(AuthenticationError):
    """Session or remember-me token could not authenticate the request."""

    code = ErrorCode.INVALID_AUTH_SESSION
    default_message = "Invalid or expired authentication session"


class InvalidAuthToken(AuthenticationError):
    """Presented authentication token was rejected."""

    code = ErrorCode.TOKEN_INVALID
    default_message = "Invalid or expired authentication token"


class InvalidCredentials(AuthenticationError):
    """User credentials (or user id) did not match any active user."""

    code = ErrorCode.INVALID_CREDENTIALS
    default_message = "Invalid user credentials"


class GuardConfigurationError(RuntimeError):
    """Guard is used in a way its configuration does not support.

    Raised when remember-me tokens are requested without a registered token
    repository, or when the HTTP context carries no session.
    """

    def __init__(self, code: ErrorCode, message: str) -> None:
        """Initialize configuration error.

        Args:
            code: Machine-readable configuration error code.
            message: Explanation including how to fix the configuration.
        """
        self.code = code
        self.message = message
        super().__init__(message)
