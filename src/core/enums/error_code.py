"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Carried by authentication exceptions and rendered by the presentation
layer into RFC 7807 problem responses.

Categories:
- Validation errors (INVALID_*, VALIDATION_*)
- Resource errors (*_NOT_FOUND)
- Authentication errors (INVALID_CREDENTIALS, INVALID_AUTH_SESSION, TOKEN_*)
- Configuration errors (*_NOT_CONFIGURED)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable).

    Error codes follow ENTITY_ACTION_REASON naming convention.
    """

    # Validation errors
    INVALID_DURATION = "invalid_duration"
    VALIDATION_FAILED = "validation_failed"

    # Resource errors
    USER_NOT_FOUND = "user_not_found"

    # Authentication errors
    INVALID_CREDENTIALS = "invalid_credentials"
    INVALID_AUTH_SESSION = "invalid_auth_session"
    TOKEN_INVALID = "token_invalid"
    AUTHENTICATION_FAILED = "authentication_failed"

    # Encryption errors
    ENCRYPTION_KEY_INVALID = "encryption_key_invalid"

    # Configuration errors
    SESSION_NOT_CONFIGURED = "session_not_configured"
    TOKEN_PROVIDER_NOT_CONFIGURED = "token_provider_not_configured"
