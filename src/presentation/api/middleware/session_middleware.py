"""Server-side session middleware.

Loads the session named by the session cookie before the route runs and
commits it afterwards.

Request:
    - request.state.session: RequestSession (new when the cookie is missing
      or the stored session has expired)
    - request.state.response_cookies: ResponseCookies queue used by guards

Response:
    - the id replaced by regenerate() is destroyed in the store
    - non-empty sessions are saved; sessions emptied by the request are destroyed
    - loaded sessions are saved again to push their idle TTL forward
    - the session cookie is (re)sent when the id changed
    - queued cookies are applied last
"""

from __future__ import annotations

from typing import Awaitable, Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from src.domain.protocols.session_protocol import SessionStoreProtocol
from src.infrastructure.security.cookie_cipher import CookieCipher
from src.infrastructure.session.request_session import RequestSession
from src.presentation.api.cookies import ResponseCookies


class SessionMiddleware(BaseHTTPMiddleware):
    """Starlette middleware attaching a server-side session to each request."""

    def __init__(
        self,
        app: ASGIApp,
        *,
        store: SessionStoreProtocol,
        cipher: CookieCipher,
        cookie_name: str = "session_id",
        ttl_seconds: int = 7200,
        secure: bool = True,
    ) -> None:
        """Initialize middleware.

        Args:
            app: Wrapped ASGI application.
            store: Session backing store.
            cipher: Cipher for guard cookies.
            cookie_name: Cookie carrying the session id.
            ttl_seconds: Idle lifetime of stored sessions.
            secure: Send cookies over HTTPS only.
        """
        super().__init__(app)
        self._store = store
        self._cipher = cipher
        self._cookie_name = cookie_name
        self._ttl_seconds = ttl_seconds
        self._secure = secure

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        """Attach the session, run the route, then commit.

        Args:
            request (Request): Incoming request.
            call_next (Callable[[Request], Awaitable[Response]]): Next handler.

        Returns:
            Response: Response with session and guard cookies applied.
        """
        session = await self._load(request.cookies.get(self._cookie_name))
        response_cookies = ResponseCookies(self._cipher, secure=self._secure)

        request.state.session = session
        request.state.response_cookies = response_cookies

        response = await call_next(request)

        await self._commit(session, response)
        response_cookies.apply(response)
        return response

    async def _load(self, session_id: str | None) -> RequestSession:
        if not session_id:
            return RequestSession()

        data = await self._store.load(session_id)
        if data is None:
            return RequestSession()
        return RequestSession(session_id, data)

    async def _commit(self, session: RequestSession, response: Response) -> None:
        if session.previous_session_id is not None:
            await self._store.destroy(session.previous_session_id)

        data = session.all()
        if not data:
            if not session.is_new:
                await self._store.destroy(session.session_id)
                self._delete_session_cookie(response)
            return

        await self._store.save(session.session_id, data, self._ttl_seconds)
        if session.is_new or session.previous_session_id is not None:
            self._set_session_cookie(response, session.session_id)

    def _set_session_cookie(self, response: Response, session_id: str) -> None:
        response.set_cookie(
            self._cookie_name,
            session_id,
            path="/",
            secure=self._secure,
            httponly=True,
            samesite="lax",
        )

    def _delete_session_cookie(self, response: Response) -> None:
        response.delete_cookie(
            self._cookie_name,
            path="/",
            secure=self._secure,
            httponly=True,
            samesite="lax",
        )
