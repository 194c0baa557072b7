"""User provider protocol used by the session guard.

The guard never touches user storage directly. It asks a provider to look
users up by id, check credentials, and adapt a raw user into a GuardUser
that exposes a stable identifier.

Implementations:
    - DatabaseUserProvider: src/infrastructure/auth/database_user_provider.py
"""

from typing import Any, Protocol


class GuardUser(Protocol):
    """User as seen by a guard."""

    def get_id(self) -> str | int:
        """Return the identifier stored in the session and on tokens."""
        ...

    def get_original(self) -> Any:
        """Return the wrapped application user."""
        ...


class SessionUserProviderProtocol(Protocol):
    """Lookup and credential checks for session guards."""

    async def create_user_for_guard(self, user: Any) -> GuardUser:
        """Adapt an application user into a GuardUser.

        Args:
            user: Application user (e.g., domain User entity).

        Returns:
            GuardUser wrapping the user.
        """
        ...

    async def find_by_id(self, user_id: str | int) -> GuardUser | None:
        """Find a user by the identifier stored in the session.

        Args:
            user_id: Identifier previously returned by GuardUser.get_id().

        Returns:
            GuardUser if found, None otherwise.
        """
        ...

    async def verify_credentials(self, uid: str, password: str) -> GuardUser | None:
        """Check a uid/password pair.

        Args:
            uid: Login identifier (e.g., email).
            password: Plaintext password.

        Returns:
            GuardUser when the credentials are valid, None otherwise.
        """
        ...
