"""Session guard dependencies.

FastAPI dependencies that build one SessionGuard per request and protect
routes with it.

Usage:
    # Protected route (requires auth)
    @router.get("/protected")
    async def protected_route(
        user: User = Depends(get_current_user),
    ):
        return {"user_id": str(user.id)}

    # Guard operations (login, logout, check)
    @router.post("/login")
    async def login(guard: SessionGuard = Depends(get_session_guard)):
        await guard.attempt(email, password, remember=True)
"""

from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.guards import SessionGuard
from src.core.config import get_settings
from src.core.container import (
    get_cookie_cipher,
    get_db_session,
    get_event_bus,
    get_logger,
    get_password_service,
)
from src.domain.entities.user import User
from src.domain.protocols import HttpContext
from src.infrastructure.auth import DatabaseUserProvider
from src.infrastructure.persistence.repositories import (
    RememberMeTokenRepository,
    UserRepository,
)
from src.presentation.api.cookies import RequestCookies, ResponseCookies


async def get_session_guard(
    request: Request,
    session: AsyncSession = Depends(get_db_session),
) -> SessionGuard:
    """Build the session guard for this request.

    Session and response cookies come from SessionMiddleware. Without the
    middleware the guard has no session and raises GuardConfigurationError
    when used.

    Args:
        request: Current request.
        session: Database session (request-scoped).

    Returns:
        SessionGuard with remember-me tokens enabled.
    """
    settings = get_settings()
    cipher = get_cookie_cipher()

    response_cookies = getattr(request.state, "response_cookies", None)
    if response_cookies is None:
        response_cookies = ResponseCookies(cipher, secure=settings.cookie_secure)

    ctx = HttpContext(
        request=RequestCookies(request, cipher),
        response=response_cookies,
        session=getattr(request.state, "session", None),
    )
    user_provider = DatabaseUserProvider(
        user_repo=UserRepository(session=session),
        password_service=get_password_service(),
    )

    guard = SessionGuard(
        settings.auth_guard_name,
        ctx,
        user_provider,
        get_logger(),
        event_bus=get_event_bus(),
        remember_me_token_age=settings.remember_me_token_age,
        rotation_window=settings.remember_me_rotation_window,
    )
    return guard.with_remember_me_tokens(RememberMeTokenRepository(session=session))


async def get_current_user(
    guard: SessionGuard = Depends(get_session_guard),
) -> User:
    """Authenticate the request and return its user.

    Raises:
        InvalidAuthSession: Rendered as a 401 problem response.
    """
    return await guard.authenticate()


CurrentUser = Annotated[User, Depends(get_current_user)]
SessionGuardDep = Annotated[SessionGuard, Depends(get_session_guard)]
