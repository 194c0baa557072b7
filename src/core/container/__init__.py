"""Container module - Centralized dependency injection.

Re-exports all factory functions from submodules:

    from src.core.container import get_logger, get_event_bus, ...

The container is organized into modules by concern:
- infrastructure: Core services (logging, db, bcrypt, cookie cipher, session store)
- events: Event bus and subscriptions
- repositories: Repository factories
"""

# Infrastructure services
from src.core.container.infrastructure import (
    get_cookie_cipher,
    get_database,
    get_db_session,
    get_logger,
    get_password_service,
    get_session_store,
)

# Event bus
from src.core.container.events import get_event_bus

# Repositories
from src.core.container.repositories import (
    get_remember_me_token_repository,
    get_user_repository,
)

__all__ = [
    # Infrastructure
    "get_cookie_cipher",
    "get_database",
    "get_db_session",
    "get_logger",
    "get_password_service",
    "get_session_store",
    # Events
    "get_event_bus",
    # Repositories
    "get_remember_me_token_repository",
    "get_user_repository",
]
