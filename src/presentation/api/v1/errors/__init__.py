"""RFC 7807 error response schemas and exception handlers.

Exports:
    ErrorDetail: Individual field-specific error
    ProblemDetails: RFC 7807 compliant error response schema
    register_exception_handlers: Register global exception handlers with FastAPI
"""

from src.presentation.api.v1.errors.exception_handlers import (
    register_exception_handlers,
)
from src.presentation.api.v1.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)

__all__ = [
    "ErrorDetail",
    "ProblemDetails",
    "register_exception_handlers",
]
