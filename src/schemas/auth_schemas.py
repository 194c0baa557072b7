"""Authentication request/response schemas.

Pydantic models for API request validation and response serialization.
Kept separate from domain entities - these are HTTP-layer concerns.

Endpoints:
    POST   /api/v1/auth/login    - Log in (optionally remember the device)
    POST   /api/v1/auth/logout   - Log out
    GET    /api/v1/auth/me       - Current user
    GET    /api/v1/auth/check    - Silent authentication check
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class LoginRequest(BaseModel):
    """Request schema for login.

    POST /api/v1/auth/login
    Returns: 200 OK
    """

    email: EmailStr = Field(
        ...,
        description="User's email address",
        examples=["user@example.com"],
    )
    password: str = Field(
        ...,
        min_length=1,
        max_length=128,
        description="User's password",
        examples=["SecurePass123!"],
    )
    remember: bool = Field(
        default=False,
        description="Issue a remember-me cookie for this device",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "user@example.com",
                "password": "SecurePass123!",
                "remember": True,
            }
        }
    )


class AuthUserResponse(BaseModel):
    """Authenticated user.

    Returned by login and by GET /api/v1/auth/me.
    """

    id: UUID = Field(..., description="User's unique identifier")
    email: str = Field(..., description="User's email address")
    via_remember: bool = Field(
        default=False,
        description="Request was authenticated with a remember-me token",
    )


class AuthCheckResponse(BaseModel):
    """Result of a silent authentication check."""

    authenticated: bool = Field(..., description="Request belongs to a user")
    user: AuthUserResponse | None = Field(
        default=None, description="Authenticated user (when authenticated)"
    )
