"""Global exception handlers for FastAPI application.

This module provides exception handlers that convert errors into RFC 7807
Problem Details responses.

Handlers:
    authentication_error_handler: Guard failures (401)
    http_exception_handler: Converts HTTPException to RFC 7807 format
    validation_exception_handler: Converts RequestValidationError to RFC 7807 format
    generic_exception_handler: Catches all unhandled exceptions (500)

Exports:
    register_exception_handlers: Register all exception handlers with FastAPI app
"""

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from src.core.config import get_settings
from src.core.container import get_logger
from src.domain.errors import AuthenticationError
from src.presentation.api.middleware.trace_middleware import get_trace_id
from src.presentation.api.v1.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)

# HTTP status code to (title, slug) mapping for problem types
_HTTP_STATUS_INFO: dict[int, tuple[str, str]] = {
    400: ("Bad Request", "bad-request"),
    401: ("Authentication Required", "unauthorized"),
    403: ("Access Denied", "forbidden"),
    404: ("Resource Not Found", "not-found"),
    405: ("Method Not Allowed", "method-not-allowed"),
    409: ("Resource Conflict", "conflict"),
    415: ("Unsupported Media Type", "unsupported-media-type"),
    422: ("Validation Failed", "validation-failed"),
    500: ("Internal Server Error", "internal-server-error"),
}

_UNPROCESSABLE = 422


def _get_status_title(status_code: int) -> str:
    """Get human-readable title for HTTP status code."""
    return _HTTP_STATUS_INFO.get(status_code, ("Error", "error"))[0]


def _get_error_slug(status_code: int) -> str:
    """Get kebab-case error slug for problem type URL."""
    return _HTTP_STATUS_INFO.get(status_code, ("Error", "error"))[1]


def _problem_type(slug: str) -> str:
    return f"{get_settings().api_base_url}/errors/{slug}"


async def authentication_error_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """Convert guard authentication failures to 401 responses.

    The detail is the error's client-safe message; internal failure reasons
    only reach events and logs.

    Args:
        request: FastAPI Request object.
        exc: AuthenticationError raised by a guard.

    Returns:
        JSONResponse with RFC 7807 ProblemDetails (401).
    """
    assert isinstance(exc, AuthenticationError)

    problem = ProblemDetails(
        type=_problem_type(_get_error_slug(status.HTTP_401_UNAUTHORIZED)),
        title=_get_status_title(status.HTTP_401_UNAUTHORIZED),
        status=status.HTTP_401_UNAUTHORIZED,
        detail=exc.message,
        instance=str(request.url.path),
        code=exc.code.value,
        trace_id=get_trace_id(),
    )
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content=problem.model_dump(exclude_none=True),
    )


async def http_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """Convert HTTPException to RFC 7807 Problem Details response.

    Args:
        request: FastAPI Request object.
        exc: HTTPException raised by handler or dependency.

    Returns:
        JSONResponse with RFC 7807 ProblemDetails.
    """
    # Type narrowing: FastAPI registers this handler only for HTTPException
    assert isinstance(exc, HTTPException)

    problem = ProblemDetails(
        type=_problem_type(_get_error_slug(exc.status_code)),
        title=_get_status_title(exc.status_code),
        status=exc.status_code,
        detail=exc.detail if isinstance(exc.detail, str) else str(exc.detail),
        instance=str(request.url.path),
        trace_id=get_trace_id(),
    )

    # Preserve any headers from HTTPException (e.g., Allow)
    headers = getattr(exc, "headers", None)

    return JSONResponse(
        status_code=exc.status_code,
        content=problem.model_dump(exclude_none=True),
        headers=headers,
    )


async def validation_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """Convert RequestValidationError to RFC 7807 Problem Details response.

    Args:
        request: FastAPI Request object.
        exc: RequestValidationError from Pydantic validation.

    Returns:
        JSONResponse with RFC 7807 ProblemDetails including field errors.
    """
    assert isinstance(exc, RequestValidationError)

    field_errors: list[ErrorDetail] = []
    for error in exc.errors():
        # ["body", "email"] -> "email"
        loc = error.get("loc", [])
        field_parts = [str(p) for p in loc if p != "body"]
        field_name = ".".join(field_parts) if field_parts else "unknown"

        field_errors.append(
            ErrorDetail(
                field=field_name,
                code=error.get("type", "validation_error"),
                message=error.get("msg", "Validation failed"),
            )
        )

    problem = ProblemDetails(
        type=_problem_type("validation-failed"),
        title="Validation Failed",
        status=_UNPROCESSABLE,
        detail="Request validation failed. Check 'errors' for details.",
        instance=str(request.url.path),
        errors=field_errors if field_errors else None,
        trace_id=get_trace_id(),
    )

    return JSONResponse(
        status_code=_UNPROCESSABLE,
        content=problem.model_dump(exclude_none=True),
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected Python exceptions.

    Converts any unhandled exception (including GuardConfigurationError)
    into a 500 response without leaking internals to API consumers.

    Args:
        request: FastAPI Request object
        exc: Unhandled exception

    Returns:
        JSONResponse with RFC 7807 ProblemDetails (500 Internal Server Error)
    """
    trace_id = get_trace_id()

    get_logger().error(
        "unhandled_exception",
        error=exc,
        trace_id=trace_id,
        request_path=request.url.path,
        request_method=request.method,
    )

    problem = ProblemDetails(
        type=_problem_type("internal-server-error"),
        title="Internal Server Error",
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="An unexpected error occurred. Please contact support with the trace ID.",
        instance=str(request.url.path),
        trace_id=trace_id,
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=problem.model_dump(exclude_none=True),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with FastAPI application.

    Args:
        app: FastAPI application instance

    Example:
        >>> app = FastAPI()
        >>> register_exception_handlers(app)
    """
    # Guard failures (InvalidAuthSession, InvalidCredentials, ...) - 401
    app.add_exception_handler(AuthenticationError, authentication_error_handler)

    # Handle HTTPException - convert to RFC 7807
    app.add_exception_handler(HTTPException, http_exception_handler)

    # Handle Pydantic validation errors - convert to RFC 7807 with field errors
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    # Handle all unhandled exceptions - catch-all for 500 errors
    app.add_exception_handler(Exception, generic_exception_handler)
