"""RememberMeTokenRepository - SQLAlchemy implementation for remember-me tokens.

Rows are addressed by series. Only the secret's hash is ever written; the
transport value of a token never reaches the database.
"""

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.remember_me_token import (
    REMEMBER_ME_TOKEN_TYPE,
    RememberMeToken,
)
from src.infrastructure.persistence.base import as_utc
from src.infrastructure.persistence.models.remember_me_token import (
    RememberMeTokenModel,
)


def _to_entity(model: RememberMeTokenModel) -> RememberMeToken:
    """Convert database model to domain entity (without value)."""
    return RememberMeToken(
        series=model.series,
        user_id=model.user_id,
        guard=model.guard,
        hash=model.hash,
        type=model.type,
        created_at=as_utc(model.created_at),
        updated_at=as_utc(model.updated_at),
        expires_at=as_utc(model.expires_at),
    )


class RememberMeTokenRepository:
    """SQLAlchemy implementation of the remember-me token port.

    Attributes:
        session: SQLAlchemy async session for database operations.

    Example:
        >>> async with database.get_session() as session:
        ...     repo = RememberMeTokenRepository(session)
        ...     token = await repo.get_token_by_series(series)
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def create_token(self, token: RememberMeToken) -> None:
        """Insert a newly minted token.

        Args:
            token: Token to store.

        Raises:
            IntegrityError: If the series already exists.
        """
        self.session.add(
            RememberMeTokenModel(
                series=token.series,
                user_id=str(token.user_id),
                guard=token.guard,
                hash=token.hash,
                type=token.type,
                created_at=token.created_at,
                updated_at=token.updated_at,
                expires_at=token.expires_at,
            )
        )
        await self.session.commit()

    async def get_token_by_series(self, series: str) -> RememberMeToken | None:
        """Find a remember-me token by series.

        Rows of other token kinds sharing the table are ignored. Expiry and
        guard are NOT checked here.

        Args:
            series: Token series.

        Returns:
            RememberMeToken if found, None otherwise.
        """
        stmt = (
            select(RememberMeTokenModel)
            .where(RememberMeTokenModel.series == series)
            .where(RememberMeTokenModel.type == REMEMBER_ME_TOKEN_TYPE)
        )
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return _to_entity(model) if model else None

    async def update_token_by_series(
        self,
        series: str,
        token: RememberMeToken,
    ) -> None:
        """Write a refreshed token's hash and timestamps.

        Unknown series are a no-op (the row may have been deleted by a
        concurrent logout).

        Args:
            series: Series of the row to update.
            token: Refreshed token.
        """
        model = await self.session.get(RememberMeTokenModel, series)
        if model is None:
            return

        model.hash = token.hash
        model.updated_at = token.updated_at
        model.expires_at = token.expires_at
        await self.session.commit()

    async def delete_token_by_series(self, series: str) -> None:
        """Delete a token. Unknown series are a no-op.

        Args:
            series: Token series.
        """
        await self.session.execute(
            delete(RememberMeTokenModel).where(RememberMeTokenModel.series == series)
        )
        await self.session.commit()
