"""Repository implementations (adapters for hexagonal architecture).

This package contains concrete implementations of repository protocols
defined in the domain layer.
"""

from src.infrastructure.persistence.repositories.remember_me_token_repository import (
    RememberMeTokenRepository,
)
from src.infrastructure.persistence.repositories.user_repository import UserRepository

__all__ = [
    "RememberMeTokenRepository",
    "UserRepository",
]
