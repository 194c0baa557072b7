"""RFC 7807 Problem Details for HTTP APIs.

Pydantic models for structured error responses.

RFC 7807: https://tools.ietf.org/html/rfc7807

Exports:
    ErrorDetail: Individual field-specific error
    ProblemDetails: RFC 7807 compliant error response schema
"""

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """Individual field-specific error.

    Used for validation errors where multiple fields may have errors.

    Attributes:
        field: Name of the field with error
        code: Machine-readable error code
        message: Human-readable error message
    """

    field: str = Field(..., description="Field name")
    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")


class ProblemDetails(BaseModel):
    """RFC 7807 Problem Details for HTTP APIs.

    Attributes:
        type: URI reference identifying the problem type
        title: Short, human-readable summary of the problem type
        status: HTTP status code for this occurrence
        detail: Human-readable explanation specific to this occurrence
        instance: URI reference identifying the specific occurrence
        code: Machine-readable error code (authentication failures)
        errors: Optional list of field-specific errors (for validation failures)
        trace_id: Optional request trace ID for debugging

    Examples:
        >>> problem = ProblemDetails(
        ...     type="http://localhost:8000/errors/unauthorized",
        ...     title="Authentication Required",
        ...     status=401,
        ...     detail="Invalid or expired authentication session",
        ...     instance="/api/v1/auth/me",
        ...     code="invalid_auth_session",
        ... )
    """

    type: str = Field(
        ...,
        description="URI reference identifying the problem type",
        examples=["http://localhost:8000/errors/unauthorized"],
    )
    title: str = Field(
        ...,
        description="Short, human-readable summary",
        examples=["Authentication Required"],
    )
    status: int = Field(
        ...,
        description="HTTP status code",
        examples=[401],
    )
    detail: str = Field(
        ...,
        description="Human-readable explanation",
        examples=["Invalid or expired authentication session"],
    )
    instance: str = Field(
        ...,
        description="URI reference identifying this occurrence",
        examples=["/api/v1/auth/me"],
    )
    code: str | None = Field(
        None,
        description="Machine-readable error code",
        examples=["invalid_auth_session"],
    )
    errors: list[ErrorDetail] | None = Field(
        None,
        description="List of field-specific errors",
    )
    trace_id: str | None = Field(
        None,
        description="Request trace ID for debugging",
    )
