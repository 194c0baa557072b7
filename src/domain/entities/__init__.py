"""Domain entities for business logic.

Pure business logic entities with no framework dependencies.
"""

from src.domain.entities.remember_me_token import (
    DecodedRememberMeToken,
    RememberMeToken,
)
from src.domain.entities.user import User

__all__ = [
    "DecodedRememberMeToken",
    "RememberMeToken",
    "User",
]
