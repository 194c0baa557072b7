"""Logging event handler for session guard events.

Structured logging for every guard lifecycle event.

Log Levels:
    - INFO: Attempted, succeeded, verified and logged-out events
    - WARNING: Failed events (operational issues requiring attention)

Structured Fields:
    - event_id: UUID for event correlation
    - occurred_at: ISO 8601 timestamp (UTC)
    - guard: Guard name
    - session_id: Session identifier (when available)
    - user_id / uid / reason / series: Per event

Token secrets never reach this handler; tokens are identified by series.

Usage:
    >>> handler = LoggingEventHandler(logger=get_logger())
    >>> handler.register(event_bus)
"""

from typing import Any

from src.domain.events.session_auth_events import (
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
from src.domain.protocols.event_bus_protocol import EventBusProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol


class LoggingEventHandler:
    """Event handler for structured logging of guard events.

    Attributes:
        _logger: Logger protocol implementation (from container).
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        """Initialize logging handler with logger.

        Args:
            logger: Logger protocol implementation from container.
        """
        self._logger = logger

    def register(self, event_bus: EventBusProtocol) -> None:
        """Subscribe all handler methods to their events."""
        event_bus.subscribe(CredentialsVerified, self.handle_credentials_verified)
        event_bus.subscribe(LoginAttempted, self.handle_login_attempted)
        event_bus.subscribe(LoginSucceeded, self.handle_login_succeeded)
        event_bus.subscribe(LoginFailed, self.handle_login_failed)
        event_bus.subscribe(
            AuthenticationAttempted, self.handle_authentication_attempted
        )
        event_bus.subscribe(
            AuthenticationSucceeded, self.handle_authentication_succeeded
        )
        event_bus.subscribe(AuthenticationFailed, self.handle_authentication_failed)
        event_bus.subscribe(LoggedOut, self.handle_logged_out)

    def _base_fields(self, event: SessionAuthEvent) -> dict[str, Any]:
        return {
            "event_id": str(event.event_id),
            "occurred_at": event.occurred_at.isoformat(),
            "guard": event.guard_name,
            "session_id": event.session_id,
        }

    # =========================================================================
    # Credentials / Login
    # =========================================================================

    async def handle_credentials_verified(self, event: CredentialsVerified) -> None:
        """Log verified credentials (INFO level)."""
        self._logger.info(
            "session_auth_credentials_verified",
            **self._base_fields(event),
            uid=event.uid,
            user_id=event.user_id,
        )

    async def handle_login_attempted(self, event: LoginAttempted) -> None:
        """Log login attempt (INFO level)."""
        self._logger.info(
            "session_auth_login_attempted",
            **self._base_fields(event),
            user_id=event.user_id,
            uid=event.uid,
        )

    async def handle_login_succeeded(self, event: LoginSucceeded) -> None:
        """Log successful login (INFO level)."""
        self._logger.info(
            "session_auth_login_succeeded",
            **self._base_fields(event),
            user_id=event.user_id,
            remember_me_series=event.remember_me_series,
        )

    async def handle_login_failed(self, event: LoginFailed) -> None:
        """Log failed login (WARNING level)."""
        self._logger.warning(
            "session_auth_login_failed",
            **self._base_fields(event),
            reason=event.reason,
            uid=event.uid,
            user_id=event.user_id,
        )

    # =========================================================================
    # Request Authentication
    # =========================================================================

    async def handle_authentication_attempted(
        self,
        event: AuthenticationAttempted,
    ) -> None:
        """Log authentication attempt (INFO level)."""
        self._logger.info(
            "session_auth_authentication_attempted",
            **self._base_fields(event),
        )

    async def handle_authentication_succeeded(
        self,
        event: AuthenticationSucceeded,
    ) -> None:
        """Log successful authentication (INFO level)."""
        self._logger.info(
            "session_auth_authentication_succeeded",
            **self._base_fields(event),
            user_id=event.user_id,
            via_remember=event.via_remember,
            remember_me_series=event.remember_me_series,
        )

    async def handle_authentication_failed(
        self,
        event: AuthenticationFailed,
    ) -> None:
        """Log failed authentication (WARNING level)."""
        self._logger.warning(
            "session_auth_authentication_failed",
            **self._base_fields(event),
            reason=event.reason,
            user_id=event.user_id,
            remember_me_series=event.remember_me_series,
        )

    # =========================================================================
    # Logout
    # =========================================================================

    async def handle_logged_out(self, event: LoggedOut) -> None:
        """Log logout (INFO level)."""
        self._logger.info(
            "session_auth_logged_out",
            **self._base_fields(event),
            user_id=event.user_id,
            remember_me_series=event.remember_me_series,
        )
