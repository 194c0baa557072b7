"""RememberMeTokenRepository protocol (port) for domain layer.

Persistence contract for remember-me tokens. Tokens are always addressed
by series; the series never changes across rotations.

Following hexagonal architecture:
- Domain defines what it needs (protocol/port)
- Infrastructure provides implementation (adapter)
- Domain has no knowledge of how tokens are stored
"""

from typing import Protocol

from src.domain.entities.remember_me_token import RememberMeToken


class RememberMeTokenRepository(Protocol):
    """Protocol for remember-me token persistence operations.

    Token Lifecycle:
        1. Created during login(remember=True)
        2. Looked up by series when a request has no session user
        3. Updated in place (same series) when the secret rotates
        4. Deleted on logout

    Implementations:
        - RememberMeTokenRepository (SQLAlchemy):
          src/infrastructure/persistence/repositories/
    """

    async def create_token(self, token: RememberMeToken) -> None:
        """Persist a newly minted token.

        Args:
            token: Token to store. Only its hash is written, never the value.
        """
        ...

    async def get_token_by_series(self, series: str) -> RememberMeToken | None:
        """Find a token by series.

        Does NOT check expiration or guard; the caller validates both.

        Args:
            series: Token series.

        Returns:
            Token (without value) if found, None otherwise.
        """
        ...

    async def update_token_by_series(
        self,
        series: str,
        token: RememberMeToken,
    ) -> None:
        """Persist a refreshed token (hash, updated_at, expires_at).

        Args:
            series: Series of the row to update.
            token: Refreshed token.
        """
        ...

    async def delete_token_by_series(self, series: str) -> None:
        """Delete a token. Deleting an unknown series is a no-op.

        Args:
            series: Token series.
        """
        ...
