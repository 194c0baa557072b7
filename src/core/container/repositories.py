"""Repository dependency factories.

Request-scoped repository instances. Each request gets fresh repository
instances sharing the request's database session.
"""

from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.container.infrastructure import get_db_session

if TYPE_CHECKING:
    from src.infrastructure.persistence.repositories import (
        RememberMeTokenRepository,
        UserRepository,
    )


# ============================================================================
# Repository Factories (Request-Scoped)
# ============================================================================


async def get_user_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "UserRepository":
    """Get user repository (request-scoped).

    Args:
        session: Database session for request duration.
            Injected via Depends(get_db_session).

    Returns:
        UserRepository instance.

    Usage:
        @router.post("/users")
        async def create_user(
            user_repo: UserRepository = Depends(get_user_repository)
        ):
            await user_repo.save(user)
    """
    from src.infrastructure.persistence.repositories import UserRepository

    return UserRepository(session=session)


async def get_remember_me_token_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "RememberMeTokenRepository":
    """Get remember-me token repository (request-scoped).

    Args:
        session: Database session for request duration.
            Injected via Depends(get_db_session).

    Returns:
        RememberMeTokenRepository instance.
    """
    from src.infrastructure.persistence.repositories import (
        RememberMeTokenRepository,
    )

    return RememberMeTokenRepository(session=session)
