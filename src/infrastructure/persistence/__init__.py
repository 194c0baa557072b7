"""Database persistence infrastructure.

This module provides database-related functionality including:
- Declarative base and model mixins
- Database connection and session management
- Repository implementations (see repositories/)
"""

from src.infrastructure.persistence.base import Base, BaseModel
from src.infrastructure.persistence.database import Database

__all__ = [
    "Base",
    "BaseModel",
    "Database",
]
