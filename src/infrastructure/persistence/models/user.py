"""User database model.

Security:
    - password_hash: NEVER stores plaintext passwords (bcrypt hashed)
    - is_active: Deactivated users cannot log in or use remember-me tokens
"""

from sqlalchemy import Boolean, String
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseMutableModel


class UserModel(BaseMutableModel):
    """User account row.

    Fields:
        id: UUID primary key (from BaseMutableModel)
        created_at / updated_at: Timestamps (from BaseMutableModel)
        email: Unique email address (lowercase, indexed)
        password_hash: Bcrypt hashed password
        is_active: Account active status

    Indexes:
        - ix_users_email: (email) unique, for login queries
    """

    __tablename__ = "users"

    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        index=True,
        comment="User email address (unique, lowercase)",
    )

    password_hash: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Bcrypt hashed password",
    )

    is_active: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=True,
        comment="Account active status (deactivated users cannot login)",
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<UserModel(id={self.id}, email={self.email!r}, is_active={self.is_active})>"
