"""UserRepository - SQLAlchemy implementation of UserRepository protocol.

Adapter for hexagonal architecture.
Maps between domain User entities and database UserModel.
"""

from uuid import UUID

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.user import User
from src.infrastructure.persistence.base import as_utc
from src.infrastructure.persistence.models.user import UserModel


class UserRepository:
    """SQLAlchemy implementation of UserRepository protocol.

    This class does NOT inherit from UserRepository protocol (Protocol uses
    structural typing).

    Attributes:
        session: SQLAlchemy async session for database operations.

    Example:
        >>> async with database.get_session() as session:
        ...     repo = UserRepository(session)
        ...     user = await repo.find_by_email("user@example.com")
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def find_by_id(self, user_id: UUID) -> User | None:
        """Find user by ID.

        Args:
            user_id: User's unique identifier.

        Returns:
            Domain User entity if found, None otherwise.
        """
        user_model = await self.session.get(UserModel, user_id)
        if user_model is None:
            return None
        return self._to_domain(user_model)

    async def find_by_email(self, email: str) -> User | None:
        """Find user by email address (case-insensitive).

        Args:
            email: User's email address.

        Returns:
            Domain User entity if found, None otherwise.
        """
        stmt = select(UserModel).where(func.lower(UserModel.email) == email.lower())
        result = await self.session.execute(stmt)
        user_model = result.scalar_one_or_none()

        if user_model is None:
            return None

        return self._to_domain(user_model)

    async def save(self, user: User) -> None:
        """Create or update a user.

        Args:
            user: Domain User entity to persist.

        Raises:
            IntegrityError: If another user already has the email.
        """
        await self.session.merge(self._to_model(user))
        await self.session.commit()

    async def delete(self, user_id: UUID) -> None:
        """Delete a user row. Unknown IDs are a no-op.

        Remember-me tokens of the user are left in place; the guard rejects
        them once their user no longer resolves.

        Args:
            user_id: User's unique identifier.
        """
        await self.session.execute(delete(UserModel).where(UserModel.id == user_id))
        await self.session.commit()

    def _to_domain(self, user_model: UserModel) -> User:
        return User(
            id=user_model.id,
            email=user_model.email,
            password_hash=user_model.password_hash,
            is_active=user_model.is_active,
            created_at=as_utc(user_model.created_at),
            updated_at=as_utc(user_model.updated_at),
        )

    def _to_model(self, user: User) -> UserModel:
        return UserModel(
            id=user.id,
            email=user.email.lower(),
            password_hash=user.password_hash,
            is_active=user.is_active,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
