"""Session guard.

Decides whether the current request belongs to an authenticated user by
consulting the server-side session and, failing that, a remember-me token
presented in an encrypted cookie. Also performs login and logout.

Flow (authenticate):
1. Return cached result if authentication already ran for this request
2. Emit AuthenticationAttempted event
3. Session holds a user id → look the user up → done (via_remember=False)
4. Otherwise read the remember-me cookie (requires a token repository)
5. Decode cookie into series + secret
6. Load token by series; verify secret, guard name and expiry
7. Look up the token's user
8. Store user id in session, regenerate session id (via_remember=True)
9. Rotate the token secret when older than the rotation window, otherwise
   re-issue the same cookie value with a fresh max-age

On failure:
- Emit AuthenticationFailed event (with internal reason)
- Raise InvalidAuthSession (same message for every reason)

Architecture:
- Application layer ONLY imports from core and domain layers
- NO infrastructure imports (collaborators are injected via protocols)
- One guard instance per request; nothing here is shared across requests

Session key is ``auth_<name>``; remember-me cookie is ``remember_<name>``.
"""

from datetime import timedelta
from typing import Any, NoReturn

from src.core.duration import DurationLike, parse_duration
from src.core.enums import ErrorCode
from src.domain.entities.remember_me_token import RememberMeToken
from src.domain.errors import (
    AuthenticationError,
    GuardConfigurationError,
    InvalidAuthSession,
    InvalidAuthToken,
    InvalidCredentials,
)
from src.domain.events import (
    AuthenticationAttempted,
    AuthenticationFailed,
    AuthenticationSucceeded,
    CredentialsVerified,
    DomainEvent,
    LoggedOut,
    LoginAttempted,
    LoginFailed,
    LoginSucceeded,
)
from src.domain.protocols import (
    EventBusProtocol,
    GuardUser,
    HttpContext,
    LoggerProtocol,
    RememberMeTokenRepository,
    SessionProtocol,
    SessionUserProviderProtocol,
)

DEFAULT_REMEMBER_ME_TOKEN_AGE = "2 years"
DEFAULT_ROTATION_WINDOW = timedelta(seconds=60)


class AuthFailureReason:
    """Internal failure reasons carried on failed events and logs.

    Never exposed to callers; every authentication failure raises the same
    InvalidAuthSession error.
    """

    SESSION_USER_MISSING = "session_user_missing"
    REMEMBER_COOKIE_MISSING = "remember_cookie_missing"
    TOKEN_PROVIDER_MISSING = "token_provider_missing"
    TOKEN_MALFORMED = "token_malformed"
    TOKEN_NOT_FOUND = "token_not_found"
    TOKEN_HASH_MISMATCH = "token_hash_mismatch"
    TOKEN_GUARD_MISMATCH = "token_guard_mismatch"
    TOKEN_EXPIRED = "token_expired"
    TOKEN_USER_MISSING = "token_user_missing"
    INVALID_CREDENTIALS = "invalid_credentials"
    USER_NOT_FOUND = "user_not_found"


class SessionGuard:
    """Session based authentication guard with remember-me tokens.

    State flags are request-scoped: build one guard per request.

    Attributes:
        name: Guard name (namespaces session key and cookie name).
        authentication_attempted: authenticate() already ran.
        is_authenticated: Request belongs to a user.
        is_logged_out: logout() was called.
        via_remember: User was authenticated through a remember-me token.
        user: Authenticated application user, None otherwise.
    """

    def __init__(
        self,
        name: str,
        ctx: HttpContext,
        user_provider: SessionUserProviderProtocol,
        logger: LoggerProtocol,
        *,
        event_bus: EventBusProtocol | None = None,
        remember_me_token_age: DurationLike = DEFAULT_REMEMBER_ME_TOKEN_AGE,
        rotation_window: timedelta = DEFAULT_ROTATION_WINDOW,
    ) -> None:
        """Initialize guard with request context and collaborators.

        Args:
            name: Guard name (e.g., "web").
            ctx: Request cookies, response cookies and session.
            user_provider: User lookup and credential checks.
            logger: Structured logger.
            event_bus: Optional sink for lifecycle events.
            remember_me_token_age: Lifetime of remember-me tokens and cookies.
            rotation_window: Grace period after a token update during which
                the token is reused instead of rotated.

        Raises:
            ValueError: If remember_me_token_age is not a valid duration or
                rotation_window is negative.
        """
        if rotation_window < timedelta(0):
            raise ValueError("rotation_window must not be negative")

        self.name = name
        self._ctx = ctx
        self._user_provider = user_provider
        self._logger = logger.bind(guard=name)
        self._event_bus = event_bus
        self._token_repository: RememberMeTokenRepository | None = None
        self._remember_me_token_age = parse_duration(remember_me_token_age)
        self._rotation_window = rotation_window

        self.authentication_attempted = False
        self.is_authenticated = False
        self.is_logged_out = False
        self.via_remember = False
        self.user: Any = None
        self._authentication_error: AuthenticationError | None = None

    @property
    def session_key_name(self) -> str:
        """Session key holding the logged-in user id."""
        return f"auth_{self.name}"

    @property
    def remember_me_key_name(self) -> str:
        """Cookie holding the remember-me token."""
        return f"remember_{self.name}"

    @property
    def remember_me_max_age(self) -> int:
        """Remember-me cookie lifetime in seconds."""
        return int(self._remember_me_token_age.total_seconds())

    def with_remember_me_tokens(
        self, token_repository: RememberMeTokenRepository
    ) -> "SessionGuard":
        """Register the remember-me token repository.

        Registering does not enable remember-me; pass ``remember=True`` to
        login() for that.

        Args:
            token_repository: Token persistence.

        Returns:
            The guard itself.
        """
        self._token_repository = token_repository
        return self

    def get_user_or_fail(self) -> Any:
        """Return the authenticated user.

        Raises:
            InvalidAuthSession: If the request is not authenticated.
        """
        if self.user is None:
            raise InvalidAuthSession(guard_name=self.name)
        return self.user

    # ------------------------------------------------------------------
    # Credentials and login
    # ------------------------------------------------------------------

    async def verify_credentials(self, uid: str, password: str) -> Any:
        """Verify credentials and return the matching user.

        Args:
            uid: Login identifier (e.g., email).
            password: Plaintext password.

        Returns:
            Application user.

        Raises:
            InvalidCredentials: If the credentials do not match a user.

        Side Effects:
            - Publishes CredentialsVerified event (on success).
            - Publishes LoginFailed event (on failure).
        """
        self._logger.debug("session_guard_verifying_credentials", uid=uid)

        provider_user = await self._user_provider.verify_credentials(uid, password)
        if provider_user is None:
            await self._login_failed(AuthFailureReason.INVALID_CREDENTIALS, uid=uid)

        await self._publish(
            CredentialsVerified(
                guard_name=self.name,
                session_id=self._session_id(),
                uid=uid,
                user_id=str(provider_user.get_id()),
            )
        )
        return provider_user.get_original()

    async def attempt(self, uid: str, password: str, remember: bool = False) -> Any:
        """Verify credentials, then log the user in.

        Raises:
            InvalidCredentials: If the credentials do not match a user.
            GuardConfigurationError: If remember-me is requested without a
                token repository, or no session is available.
        """
        user = await self.verify_credentials(uid, password)
        return await self.login(user, remember)

    async def login_via_id(self, user_id: str | int, remember: bool = False) -> Any:
        """Look a user up by id and log them in.

        Raises:
            InvalidCredentials: If no user has this id.
        """
        self._logger.debug("session_guard_login_via_id", user_id=str(user_id))

        provider_user = await self._user_provider.find_by_id(user_id)
        if provider_user is None:
            await self._login_failed(
                AuthFailureReason.USER_NOT_FOUND, user_id=str(user_id)
            )

        return await self.login(provider_user.get_original(), remember)

    async def login(self, user: Any, remember: bool = False) -> Any:
        """Log a user in for the rest of this session.

        Stores the user id in the session and regenerates the session id.
        With ``remember=True`` a remember-me token is minted, persisted and
        sent as an encrypted cookie; otherwise any stale remember-me cookie
        is cleared.

        Args:
            user: Application user.
            remember: Issue a remember-me token.

        Returns:
            The user.

        Raises:
            GuardConfigurationError: If remember-me is requested without a
                token repository, or no session is available.

        Side Effects:
            - Publishes LoginAttempted event (always).
            - Publishes LoginSucceeded event (on success).
        """
        await self._publish(
            LoginAttempted(guard_name=self.name, session_id=self._session_id())
        )

        # Configuration checks run before the session is touched.
        session = self._get_session()
        token_repository = self._get_token_repository() if remember else None

        provider_user = await self._user_provider.create_user_for_guard(user)
        user_id = provider_user.get_id()

        self._logger.debug("session_guard_marking_logged_in", user_id=str(user_id))
        session.put(self.session_key_name, user_id)
        session.regenerate()

        token: RememberMeToken | None = None
        if token_repository is not None:
            token = RememberMeToken.create(
                user_id, self._remember_me_token_age, self.name
            )
            await token_repository.create_token(token)

            self._logger.debug(
                "session_guard_remember_me_cookie_created", series=token.series
            )
            self._set_remember_me_cookie(token.value.get_secret_value())
        else:
            self._ctx.response.clear_cookie(self.remember_me_key_name)

        self._mark_authenticated(provider_user, via_remember=False)

        await self._publish(
            LoginSucceeded(
                guard_name=self.name,
                session_id=session.session_id,
                user_id=str(user_id),
                remember_me_series=token.series if token else None,
            )
        )
        return self.user

    # ------------------------------------------------------------------
    # Request authentication
    # ------------------------------------------------------------------

    async def authenticate(self) -> Any:
        """Authenticate the current request.

        Runs at most once per guard; later calls return the cached user or
        re-raise the cached error without any I/O.

        Returns:
            Authenticated application user.

        Raises:
            InvalidAuthSession: If neither the session nor a remember-me
                token identifies a user.
            GuardConfigurationError: If no session is available.

        Side Effects:
            - Publishes AuthenticationAttempted event (first call).
            - Publishes AuthenticationSucceeded or AuthenticationFailed event.
            - May rotate the remember-me token and re-issue its cookie.
        """
        if self.authentication_attempted:
            if self._authentication_error is not None:
                raise self._authentication_error
            return self.get_user_or_fail()

        session = self._get_session()
        self.authentication_attempted = True

        await self._publish(
            AuthenticationAttempted(guard_name=self.name, session_id=session.session_id)
        )

        logged_in_user_id = session.get(self.session_key_name)
        if logged_in_user_id is not None:
            return await self._authenticate_via_session(session, logged_in_user_id)

        return await self._authenticate_via_remember_me(session)

    async def check(self) -> bool:
        """Authenticate silently.

        Returns:
            True if authenticated, False on authentication failure.

        Raises:
            Any error other than InvalidAuthSession / InvalidAuthToken.
        """
        try:
            await self.authenticate()
        except (InvalidAuthSession, InvalidAuthToken):
            return False
        return True

    async def _authenticate_via_session(
        self, session: SessionProtocol, user_id: str | int
    ) -> Any:
        self._logger.debug("session_guard_authenticating_from_session")

        provider_user = await self._user_provider.find_by_id(user_id)
        if provider_user is None:
            await self._authentication_failed(
                session,
                AuthFailureReason.SESSION_USER_MISSING,
                user_id=str(user_id),
            )

        self._mark_authenticated(provider_user, via_remember=False)

        await self._publish(
            AuthenticationSucceeded(
                guard_name=self.name,
                session_id=session.session_id,
                user_id=str(provider_user.get_id()),
            )
        )
        return self.user

    async def _authenticate_via_remember_me(self, session: SessionProtocol) -> Any:
        # An app may stop using remember-me tokens after issuing cookies, so
        # a missing repository is an auth failure here, not a config error.
        remember_me_cookie = self._ctx.request.encrypted_cookie(
            self.remember_me_key_name
        )
        if not remember_me_cookie:
            await self._authentication_failed(
                session, AuthFailureReason.REMEMBER_COOKIE_MISSING
            )
        if self._token_repository is None:
            await self._authentication_failed(
                session, AuthFailureReason.TOKEN_PROVIDER_MISSING
            )

        self._logger.debug("session_guard_authenticating_from_remember_me_cookie")

        decoded = RememberMeToken.decode(remember_me_cookie)
        if decoded is None:
            await self._authentication_failed(
                session, AuthFailureReason.TOKEN_MALFORMED
            )

        token = await self._token_repository.get_token_by_series(decoded.series)
        reason = self._token_rejection_reason(token, decoded.secret)
        if reason is not None:
            await self._authentication_failed(
                session, reason, series=decoded.series
            )

        provider_user = await self._user_provider.find_by_id(token.user_id)
        if provider_user is None:
            await self._authentication_failed(
                session,
                AuthFailureReason.TOKEN_USER_MISSING,
                user_id=str(token.user_id),
                series=token.series,
            )

        user_id = provider_user.get_id()
        self._logger.debug(
            "session_guard_marking_logged_in_from_remember_me",
            user_id=str(user_id),
            series=token.series,
        )
        session.put(self.session_key_name, user_id)
        session.regenerate()

        self._mark_authenticated(provider_user, via_remember=True)

        await self._publish(
            AuthenticationSucceeded(
                guard_name=self.name,
                session_id=session.session_id,
                user_id=str(user_id),
                via_remember=True,
                remember_me_series=token.series,
            )
        )

        await self._recycle_remember_me_token(token, remember_me_cookie)
        return self.user

    def _token_rejection_reason(
        self, token: RememberMeToken | None, secret: str
    ) -> str | None:
        if token is None:
            return AuthFailureReason.TOKEN_NOT_FOUND
        if not token.verify(secret):
            return AuthFailureReason.TOKEN_HASH_MISMATCH
        if token.guard != self.name:
            return AuthFailureReason.TOKEN_GUARD_MISMATCH
        if token.is_expired():
            return AuthFailureReason.TOKEN_EXPIRED
        return None

    async def _recycle_remember_me_token(
        self, token: RememberMeToken, presented_cookie: str
    ) -> None:
        """Rotate the token secret once the rotation window has passed.

        Concurrent requests presenting the same token inside the window all
        reuse the stored secret, so none of them invalidates the others.
        The cookie is re-issued in both cases to extend its max-age.
        """
        if token.updated_within(self._rotation_window):
            self._logger.debug(
                "session_guard_remember_me_token_reused", series=token.series
            )
            self._set_remember_me_cookie(presented_cookie)
            return

        token.refresh(self._remember_me_token_age)
        await self._token_repository.update_token_by_series(token.series, token)

        self._logger.debug(
            "session_guard_remember_me_token_rotated", series=token.series
        )
        self._set_remember_me_cookie(token.value.get_secret_value())

    # ------------------------------------------------------------------
    # Logout
    # ------------------------------------------------------------------

    async def logout(self) -> None:
        """Log the user out.

        Forgets the session user id, clears the remember-me cookie and
        deletes the presented remember-me token. Deletion is best-effort:
        an undecodable cookie or missing repository is ignored.

        Side Effects:
            - Publishes LoggedOut event.
        """
        session = self._get_session()
        self._logger.debug("session_guard_logging_out")

        user_id = self._current_user_id()
        session.forget(self.session_key_name)
        self._ctx.response.clear_cookie(self.remember_me_key_name)

        self.user = None
        self.is_authenticated = False
        self.via_remember = False
        self.is_logged_out = True

        series: str | None = None
        remember_me_cookie = self._ctx.request.encrypted_cookie(
            self.remember_me_key_name
        )
        if remember_me_cookie and self._token_repository is not None:
            decoded = RememberMeToken.decode(remember_me_cookie)
            if decoded is not None:
                series = decoded.series

        await self._publish(
            LoggedOut(
                guard_name=self.name,
                session_id=session.session_id,
                user_id=user_id,
                remember_me_series=series,
            )
        )

        if series is not None:
            self._logger.debug("session_guard_deleting_remember_me_token", series=series)
            await self._token_repository.delete_token_by_series(series)

    # ------------------------------------------------------------------
    # Testing support
    # ------------------------------------------------------------------

    async def authenticate_as_client(self, user: Any) -> dict[str, dict[str, Any]]:
        """Build the session state of a logged-in user.

        Test clients put the returned values into their session to skip the
        login flow. No session or token I/O happens here.

        Args:
            user: Application user.

        Returns:
            ``{"session": {"auth_<name>": user_id}}``
        """
        provider_user = await self._user_provider.create_user_for_guard(user)
        user_id = provider_user.get_id()

        self._logger.debug("session_guard_client_session", user_id=str(user_id))
        return {"session": {self.session_key_name: user_id}}

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _get_session(self) -> SessionProtocol:
        if self._ctx.session is None:
            raise GuardConfigurationError(
                ErrorCode.SESSION_NOT_CONFIGURED,
                "Cannot use session guard. Make sure the session middleware is installed",
            )
        return self._ctx.session

    def _get_token_repository(self) -> RememberMeTokenRepository:
        if self._token_repository is None:
            raise GuardConfigurationError(
                ErrorCode.TOKEN_PROVIDER_NOT_CONFIGURED,
                'Cannot use "remember me" feature. Register a token repository '
                "with with_remember_me_tokens()",
            )
        return self._token_repository

    def _session_id(self) -> str | None:
        session = self._ctx.session
        return session.session_id if session is not None else None

    def _current_user_id(self) -> str | None:
        if self._ctx.session is None:
            return None
        user_id = self._ctx.session.get(self.session_key_name)
        return str(user_id) if user_id is not None else None

    def _mark_authenticated(self, provider_user: GuardUser, *, via_remember: bool) -> None:
        self.user = provider_user.get_original()
        self.authentication_attempted = True
        self._authentication_error = None
        self.is_authenticated = True
        self.is_logged_out = False
        self.via_remember = via_remember

    def _set_remember_me_cookie(self, value: str) -> None:
        self._ctx.response.encrypted_cookie(
            self.remember_me_key_name,
            value,
            max_age=self.remember_me_max_age,
            http_only=True,
        )

    async def _publish(self, event: DomainEvent) -> None:
        if self._event_bus is not None:
            await self._event_bus.publish(event)

    async def _authentication_failed(
        self,
        session: SessionProtocol,
        reason: str,
        *,
        user_id: str | None = None,
        series: str | None = None,
    ) -> NoReturn:
        error = InvalidAuthSession(guard_name=self.name)
        self._authentication_error = error
        self.user = None
        self.is_authenticated = False
        self.via_remember = False

        self._logger.debug(
            "session_guard_authentication_failed",
            reason=reason,
            user_id=user_id,
            series=series,
        )
        await self._publish(
            AuthenticationFailed(
                guard_name=self.name,
                session_id=session.session_id,
                reason=reason,
                user_id=user_id,
                remember_me_series=series,
            )
        )
        raise error

    async def _login_failed(
        self,
        reason: str,
        *,
        uid: str | None = None,
        user_id: str | None = None,
    ) -> NoReturn:
        self._logger.debug("session_guard_login_failed", reason=reason, uid=uid)
        await self._publish(
            LoginFailed(
                guard_name=self.name,
                session_id=self._session_id(),
                reason=reason,
                uid=uid,
                user_id=user_id,
            )
        )
        raise InvalidCredentials(guard_name=self.name)
