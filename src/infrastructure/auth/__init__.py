"""User providers for authentication guards."""

from src.infrastructure.auth.database_user_provider import (
    DatabaseUserProvider,
    ProviderUser,
)

__all__ = ["DatabaseUserProvider", "ProviderUser"]
