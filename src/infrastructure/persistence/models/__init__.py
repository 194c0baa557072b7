"""Database models for persistence layer.

SQLAlchemy models mapped to tables. Infrastructure concern only; the domain
layer never imports these.

Models Organization:
    - user.py: User accounts
    - remember_me_token.py: Persistent login tokens

Note:
    Domain entities (dataclasses) live in src/domain/entities/ and are mapped
    to/from these models by the repositories.
"""

from src.infrastructure.persistence.models.remember_me_token import (
    RememberMeTokenModel,
)
from src.infrastructure.persistence.models.user import UserModel

__all__ = [
    "RememberMeTokenModel",
    "UserModel",
]
