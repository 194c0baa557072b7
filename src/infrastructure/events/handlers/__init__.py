"""Event handlers for infrastructure integration.

Handlers:
    - LoggingEventHandler: Structured logging with appropriate severity levels

All handlers run behind the fail-open event bus.
"""

from src.infrastructure.events.handlers.logging_event_handler import (
    LoggingEventHandler,
)

__all__ = ["LoggingEventHandler"]
