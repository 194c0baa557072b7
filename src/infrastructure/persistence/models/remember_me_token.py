"""Remember-me token database model.

Security:
    - hash: SHA-256 digest of the token secret (secret never stored)
    - series: Public lookup key, stable across rotations
    - expires_at: Enforced by the guard at authentication time
"""

from datetime import datetime

from sqlalchemy import DateTime, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import Base


class RememberMeTokenModel(Base):
    """Persisted remember-me token.

    Token Lifecycle:
        1. Inserted on login(remember=True)
        2. Updated in place (hash, updated_at, expires_at) on rotation
        3. Deleted on logout

    Fields:
        series: Primary key, token lookup key
        user_id: Owning user identifier (string form, no foreign key so any
            user provider can be used)
        guard: Name of the guard that issued the token
        hash: SHA-256 hex digest of the secret
        type: Token kind, always "remember_me_token" for rows this service writes
        created_at / updated_at / expires_at: UTC timestamps

    Indexes:
        - idx_remember_me_tokens_user_id: (user_id) for per-user cleanup
        - idx_remember_me_tokens_expires_at: (expires_at) for cleanup queries
    """

    __tablename__ = "remember_me_tokens"

    series: Mapped[str] = mapped_column(
        String(64),
        primary_key=True,
        comment="Token series (public lookup key)",
    )

    user_id: Mapped[str] = mapped_column(
        String(64),
        nullable=False,
        comment="Owning user identifier",
    )

    guard: Mapped[str] = mapped_column(
        String(64),
        nullable=False,
        comment="Issuing guard name",
    )

    hash: Mapped[str] = mapped_column(
        String(64),
        nullable=False,
        comment="SHA-256 hex digest of the token secret",
    )

    type: Mapped[str] = mapped_column(
        String(32),
        nullable=False,
        default="remember_me_token",
        comment="Token kind",
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
    )

    expires_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
    )

    __table_args__ = (
        Index("idx_remember_me_tokens_user_id", "user_id"),
        Index("idx_remember_me_tokens_expires_at", "expires_at"),
    )

    def __repr__(self) -> str:
        """String representation (hash omitted)."""
        return (
            f"<RememberMeTokenModel(series={self.series!r}, user_id={self.user_id!r}, "
            f"guard={self.guard!r}, expires_at={self.expires_at})>"
        )
