"""Database-backed user provider for session guards.

Implements SessionUserProviderProtocol over the UserRepository and the
bcrypt password service.

Security:
    - Emails are compared lower-cased
    - Inactive users never resolve (neither by id nor by credentials), so
      deactivating an account also invalidates its sessions and
      remember-me tokens
    - Unknown emails still run one bcrypt check (timing does not reveal
      whether an account exists)
"""

from dataclasses import dataclass
from uuid import UUID

from src.domain.entities.user import User
from src.domain.protocols.user_repository import UserRepository
from src.infrastructure.security.bcrypt_password_service import BcryptPasswordService


@dataclass(frozen=True, slots=True)
class ProviderUser:
    """Domain User adapted for a guard.

    Attributes:
        user: Wrapped domain user.
    """

    user: User

    def get_id(self) -> str:
        """Return the user id in its session/token form (string UUID)."""
        return str(self.user.id)

    def get_original(self) -> User:
        """Return the wrapped domain user."""
        return self.user


class DatabaseUserProvider:
    """User provider backed by the users table.

    Attributes:
        _user_repo: User persistence.
        _password_service: Bcrypt password verification.
    """

    def __init__(
        self,
        user_repo: UserRepository,
        password_service: BcryptPasswordService,
    ) -> None:
        """Initialize provider with dependencies.

        Args:
            user_repo: User repository.
            password_service: Password hashing service.
        """
        self._user_repo = user_repo
        self._password_service = password_service

    async def create_user_for_guard(self, user: User) -> ProviderUser:
        """Wrap a domain user.

        Raises:
            TypeError: If ``user`` is not a domain User.
        """
        if not isinstance(user, User):
            raise TypeError(
                f"Expected {User.__name__} instance, got {type(user).__name__}"
            )
        return ProviderUser(user)

    async def find_by_id(self, user_id: str | int) -> ProviderUser | None:
        """Find an active user by id.

        Args:
            user_id: String UUID stored in the session or on a token.

        Returns:
            ProviderUser, or None for unknown, malformed, or inactive ids.
        """
        try:
            uuid = UUID(str(user_id))
        except ValueError:
            return None

        user = await self._user_repo.find_by_id(uuid)
        if user is None or not user.can_login():
            return None
        return ProviderUser(user)

    async def verify_credentials(self, uid: str, password: str) -> ProviderUser | None:
        """Check email and password.

        Args:
            uid: Email address (case-insensitive).
            password: Plaintext password.

        Returns:
            ProviderUser when the credentials match an active user, None otherwise.
        """
        user = await self._user_repo.find_by_email(uid.strip().lower())
        if user is None:
            self._password_service.dummy_verify(password)
            return None

        if not self._password_service.verify_password(password, user.password_hash):
            return None

        if not user.can_login():
            return None

        return ProviderUser(user)
