"""User domain entity for authentication.

Pure business logic, no framework dependencies.
"""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID


@dataclass
class User:
    """User account that can sign in through a session guard.

    Attributes:
        id: Unique user identifier
        email: User email address (stored lower-cased)
        password_hash: Bcrypt hashed password (never plaintext)
        is_active: Account active status (deactivated users cannot login)
        created_at: Timestamp when user was created
        updated_at: Timestamp when user was last updated

    Example:
        >>> user = User(
        ...     id=uuid4(),
        ...     email="user@example.com",
        ...     password_hash="$2b$12$...",
        ...     is_active=True,
        ... )
        >>> user.can_login()
        True
    """

    id: UUID
    email: str
    password_hash: str
    is_active: bool = True
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        now = datetime.now(UTC)
        if self.created_at is None:
            self.created_at = now
        if self.updated_at is None:
            self.updated_at = now

    def can_login(self) -> bool:
        """Check if the account may authenticate.

        Returns:
            bool: True if account is active.
        """
        return self.is_active

    def deactivate(self) -> None:
        """Deactivate the account. Existing remember-me tokens stop working."""
        self.is_active = False
        self.updated_at = datetime.now(UTC)
