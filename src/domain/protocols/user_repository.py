"""UserRepository protocol for user persistence.

Port (interface) for hexagonal architecture.
Infrastructure layer implements this protocol.
"""

from typing import Protocol
from uuid import UUID

from src.domain.entities.user import User


class UserRepository(Protocol):
    """User repository protocol (port).

    This is a Protocol (not ABC) for structural typing.
    Implementations don't need to inherit from this.
    """

    async def find_by_id(self, user_id: UUID) -> User | None:
        """Find user by ID.

        Args:
            user_id: User's unique identifier.

        Returns:
            User if found, None otherwise.
        """
        ...

    async def find_by_email(self, email: str) -> User | None:
        """Find user by email address (case-insensitive).

        Args:
            email: User's email address.

        Returns:
            User if found, None otherwise.
        """
        ...

    async def save(self, user: User) -> None:
        """Create or update a user.

        Args:
            user: User entity to persist.
        """
        ...

    async def delete(self, user_id: UUID) -> None:
        """Delete a user. Unknown IDs are a no-op.

        Args:
            user_id: User's unique identifier.
        """
        ...
