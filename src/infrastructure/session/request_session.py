"""Request view of a server-side session.

Implements SessionProtocol. The session middleware loads the stored values
into a RequestSession before the handler runs and commits it afterwards:

    - non-empty sessions are written back to the store
    - after regenerate() the old id is destroyed and the new id is sent in
      the session cookie (defends against session fixation)
"""

import secrets
from typing import Any

SESSION_ID_BYTES = 32


def generate_session_id() -> str:
    """Return a new random session identifier (256 bits)."""
    return secrets.token_urlsafe(SESSION_ID_BYTES)


class RequestSession:
    """Session values for one request.

    Attributes:
        previous_session_id: Id replaced by regenerate(), to be destroyed at
            commit. None when the id never changed (or the session is new).
        is_new: No stored session existed for the incoming cookie.
    """

    def __init__(
        self,
        session_id: str | None = None,
        data: dict[str, Any] | None = None,
    ) -> None:
        """Initialize session.

        Args:
            session_id: Id of the loaded session. None starts a new session.
            data: Stored values of the loaded session.
        """
        self.is_new = session_id is None
        self._session_id = session_id or generate_session_id()
        self._data: dict[str, Any] = dict(data or {})
        self.previous_session_id: str | None = None

    @property
    def session_id(self) -> str:
        return self._session_id

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def put(self, key: str, value: Any) -> None:
        self._data[key] = value

    def forget(self, key: str) -> None:
        self._data.pop(key, None)

    def regenerate(self) -> None:
        """Issue a new session id, keeping the values."""
        if not self.is_new and self.previous_session_id is None:
            self.previous_session_id = self._session_id
        self._session_id = generate_session_id()

    def all(self) -> dict[str, Any]:
        return dict(self._data)
