"""Auth resource router.

Session based authentication endpoints backed by the session guard.

Endpoints:
    POST   /api/v1/auth/login    - Verify credentials and log in
    POST   /api/v1/auth/logout   - Log out (also revokes the remember-me token)
    GET    /api/v1/auth/me       - Authenticated user (401 when anonymous)
    GET    /api/v1/auth/check    - Authentication status without failing

Authentication failures raise AuthenticationError subclasses, rendered as
RFC 7807 401 responses by the global exception handlers.
"""

from fastapi import APIRouter, status

from src.application.guards import SessionGuard
from src.domain.entities.user import User
from src.presentation.api.middleware.auth_dependencies import (
    CurrentUser,
    SessionGuardDep,
)
from src.presentation.api.v1.errors import ProblemDetails
from src.schemas.auth_schemas import (
    AuthCheckResponse,
    AuthUserResponse,
    LoginRequest,
)

router = APIRouter(prefix="/auth", tags=["Auth"])


def _to_response(user: User, guard: SessionGuard) -> AuthUserResponse:
    return AuthUserResponse(
        id=user.id,
        email=user.email,
        via_remember=guard.via_remember,
    )


@router.post(
    "/login",
    status_code=status.HTTP_200_OK,
    response_model=AuthUserResponse,
    responses={
        401: {"description": "Invalid credentials", "model": ProblemDetails},
    },
    summary="Log in",
    description="Verify email and password, start an authenticated session and "
    "optionally issue a remember-me cookie.",
)
async def login(data: LoginRequest, guard: SessionGuardDep) -> AuthUserResponse:
    """Log a user in.

    POST /api/v1/auth/login → 200 OK

    Args:
        data: Credentials and remember-me flag.
        guard: Session guard (injected).

    Returns:
        The logged-in user.
    """
    user = await guard.attempt(data.email, data.password, remember=data.remember)
    return _to_response(user, guard)


@router.post(
    "/logout",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Log out",
    description="End the authenticated session and revoke the presented "
    "remember-me token.",
)
async def logout(guard: SessionGuardDep) -> None:
    """Log the current user out.

    POST /api/v1/auth/logout → 204 No Content
    """
    await guard.logout()


@router.get(
    "/me",
    response_model=AuthUserResponse,
    responses={
        401: {"description": "Not authenticated", "model": ProblemDetails},
    },
    summary="Current user",
)
async def me(user: CurrentUser, guard: SessionGuardDep) -> AuthUserResponse:
    """Return the authenticated user.

    GET /api/v1/auth/me → 200 OK, or 401 when the request is anonymous.
    The guard is the same per-request instance that authenticated the user.
    """
    return _to_response(user, guard)


@router.get(
    "/check",
    response_model=AuthCheckResponse,
    summary="Authentication status",
)
async def check(guard: SessionGuardDep) -> AuthCheckResponse:
    """Report whether the request is authenticated.

    GET /api/v1/auth/check → 200 OK
    """
    if not await guard.check():
        return AuthCheckResponse(authenticated=False)
    return AuthCheckResponse(authenticated=True, user=_to_response(guard.user, guard))
