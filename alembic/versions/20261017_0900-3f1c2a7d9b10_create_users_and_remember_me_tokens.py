"""create_users_and_remember_me_tokens

Revision ID: 3f1c2a7d9b10
Revises:
Create Date: 2026-10-17 09:00:00.000000+00:00

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3f1c2a7d9b10"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create users and remember_me_tokens tables."""
    op.create_table(
        "users",
        # Primary key and timestamps from BaseMutableModel
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column(
            "email",
            sa.String(length=255),
            nullable=False,
            comment="User email address (unique, lowercase)",
        ),
        sa.Column(
            "password_hash",
            sa.String(length=255),
            nullable=False,
            comment="Bcrypt hashed password",
        ),
        sa.Column(
            "is_active",
            sa.Boolean(),
            nullable=False,
            comment="Account active status (deactivated users cannot login)",
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_users_email"), "users", ["email"], unique=True)

    # Remember-me tokens (user_id has no foreign key; any user provider works)
    op.create_table(
        "remember_me_tokens",
        sa.Column(
            "series",
            sa.String(length=64),
            nullable=False,
            comment="Token series (public lookup key)",
        ),
        sa.Column(
            "user_id",
            sa.String(length=64),
            nullable=False,
            comment="Owning user identifier",
        ),
        sa.Column(
            "guard",
            sa.String(length=64),
            nullable=False,
            comment="Issuing guard name",
        ),
        sa.Column(
            "hash",
            sa.String(length=64),
            nullable=False,
            comment="SHA-256 hex digest of the token secret",
        ),
        sa.Column(
            "type",
            sa.String(length=32),
            nullable=False,
            comment="Token kind",
        ),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("expires_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("series"),
    )
    op.create_index(
        "idx_remember_me_tokens_user_id", "remember_me_tokens", ["user_id"]
    )
    op.create_index(
        "idx_remember_me_tokens_expires_at", "remember_me_tokens", ["expires_at"]
    )


def downgrade() -> None:
    """Drop remember_me_tokens and users tables."""
    op.drop_index("idx_remember_me_tokens_expires_at", table_name="remember_me_tokens")
    op.drop_index("idx_remember_me_tokens_user_id", table_name="remember_me_tokens")
    op.drop_table("remember_me_tokens")

    op.drop_index(op.f("ix_users_email"), table_name="users")
    op.drop_table("users")
