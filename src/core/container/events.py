# mypy: disable-error-code="arg-type"
"""Event bus dependency factory.

Application-scoped singleton for session guard event publishing. The
logging handler is subscribed to every guard event at construction.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.domain.protocols.event_bus_protocol import EventBusProtocol


@lru_cache()
def get_event_bus() -> "EventBusProtocol":
    """Get event bus singleton (app-scoped).

    Returns:
        InMemoryEventBus with LoggingEventHandler subscribed.

    Usage:
        # Application Layer (direct use)
        event_bus = get_event_bus()
        await event_bus.publish(LoggedOut(guard_name="web"))
    """
    from src.core.container.infrastructure import get_logger
    from src.infrastructure.events.handlers.logging_event_handler import (
        LoggingEventHandler,
    )
    from src.infrastructure.events.in_memory_event_bus import InMemoryEventBus

    event_bus = InMemoryEventBus(logger=get_logger())
    LoggingEventHandler(logger=get_logger()).register(event_bus)
    return event_bus
