"""Domain errors package.

Exports all domain-level error classes for convenient importing.

Usage:
    from src.domain.errors import InvalidAuthSession, InvalidCredentials
"""

from src.domain.errors.authentication_error import (
    AuthenticationError,
    GuardConfigurationError,
    InvalidAuthSession,
    InvalidAuthToken,
    InvalidCredentials,
)

__all__ = [
    "AuthenticationError",
    "GuardConfigurationError",
    "InvalidAuthSession",
    "InvalidAuthToken",
    "InvalidCredentials",
]
