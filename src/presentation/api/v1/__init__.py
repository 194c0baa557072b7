"""API v1 routers.

Resources:
    /api/v1/auth    - Session authentication (login, logout, me, check)
"""

from fastapi import APIRouter

from src.presentation.api.v1.auth import router as auth_router

# Create combined v1 router
v1_router = APIRouter(prefix="/api/v1")

v1_router.include_router(auth_router)

# Export individual routers for testing
__all__ = [
    "v1_router",
    "auth_router",
]
