"""Request/response schemas for API endpoints.

All Pydantic models for HTTP request validation and response serialization.
Schemas are kept separate from domain entities (HTTP-layer concerns only).

Usage:
    from src.schemas import LoginRequest, AuthUserResponse
"""

from src.schemas.auth_schemas import (
    AuthCheckResponse,
    AuthUserResponse,
    LoginRequest,
)

__all__ = [
    "AuthCheckResponse",
    "AuthUserResponse",
    "LoginRequest",
]
