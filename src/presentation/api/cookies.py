"""Starlette adapters for the guard's cookie ports.

RequestCookies decrypts incoming cookies. ResponseCookies queues outgoing
cookies; SessionMiddleware applies the queue to the response once the
handler has returned, so route handlers never touch Set-Cookie headers.

Every cookie is written with ``httponly``, ``samesite=lax`` and path ``/``.
``secure`` follows the COOKIE_SECURE setting.
"""

from dataclasses import dataclass

from starlette.requests import Request
from starlette.responses import Response

from src.infrastructure.security.cookie_cipher import CookieCipher


class RequestCookies:
    """Implements CookieReaderProtocol over the incoming request."""

    def __init__(self, request: Request, cipher: CookieCipher) -> None:
        self._request = request
        self._cipher = cipher

    def encrypted_cookie(self, name: str) -> str | None:
        raw = self._request.cookies.get(name)
        if not raw:
            return None
        return self._cipher.decrypt(name, raw)


@dataclass(frozen=True, slots=True)
class _QueuedCookie:
    name: str
    value: str | None
    max_age: int = 0
    http_only: bool = True


class ResponseCookies:
    """Implements CookieWriterProtocol by queueing cookies for the response.

    The last write for a name wins, so setting then clearing a cookie within
    one request only clears it.
    """

    def __init__(self, cipher: CookieCipher, *, secure: bool = True) -> None:
        self._cipher = cipher
        self._secure = secure
        self._queue: dict[str, _QueuedCookie] = {}

    def encrypted_cookie(
        self,
        name: str,
        value: str,
        *,
        max_age: int,
        http_only: bool = True,
    ) -> None:
        self._queue[name] = _QueuedCookie(
            name=name,
            value=self._cipher.encrypt(name, value),
            max_age=max_age,
            http_only=http_only,
        )

    def clear_cookie(self, name: str) -> None:
        self._queue[name] = _QueuedCookie(name=name, value=None)

    def pending(self) -> list[str]:
        """Names of cookies queued for the response."""
        return list(self._queue)

    def apply(self, response: Response) -> None:
        """Write the queued cookies onto the response."""
        for cookie in self._queue.values():
            if cookie.value is None:
                response.delete_cookie(
                    cookie.name,
                    path="/",
                    secure=self._secure,
                    httponly=cookie.http_only,
                    samesite="lax",
                )
                continue

            response.set_cookie(
                cookie.name,
                cookie.value,
                max_age=cookie.max_age,
                path="/",
                secure=self._secure,
                httponly=cookie.http_only,
                samesite="lax",
            )
