"""HTTP context consumed by the session guard.

The guard only needs encrypted cookie access on both sides of the exchange
and the request session. Framework adapters live in
src/presentation/http/cookies.py.
"""

from dataclasses import dataclass
from typing import Protocol

from src.domain.protocols.session_protocol import SessionProtocol


class CookieReaderProtocol(Protocol):
    """Request-side cookies."""

    def encrypted_cookie(self, name: str) -> str | None:
        """Return the decrypted cookie value.

        Missing, tampered, or undecryptable cookies yield None. Never raises.
        """
        ...


class CookieWriterProtocol(Protocol):
    """Response-side cookies."""

    def encrypted_cookie(
        self,
        name: str,
        value: str,
        *,
        max_age: int,
        http_only: bool = True,
    ) -> None:
        """Encrypt and set a cookie.

        Args:
            name: Cookie name.
            value: Plaintext value.
            max_age: Lifetime in seconds.
            http_only: Hide the cookie from client-side scripts.
        """
        ...

    def clear_cookie(self, name: str) -> None:
        """Expire a cookie on the client."""
        ...


@dataclass(slots=True)
class HttpContext:
    """Request-scoped collaborators handed to a guard.

    Attributes:
        request: Request cookies.
        response: Response cookies.
        session: Request session, None when no session middleware ran.
    """

    request: CookieReaderProtocol
    response: CookieWriterProtocol
    session: SessionProtocol | None = None
