"""Event bus protocol (port) for domain events.

The domain defines the port; infrastructure provides adapters.

Architecture:
    - Protocol (structural typing, NOT ABC inheritance)
    - Domain layer defines the interface (port)
    - Infrastructure layer implements adapters
    - Container (src/core/container/events.py) provides factory function

Implementations:
    - InMemoryEventBus: src/infrastructure/events/in_memory_event_bus.py

Usage:
    >>> from src.core.container import get_event_bus
    >>>
    >>> event_bus = get_event_bus()
    >>> await event_bus.publish(LoggedOut(guard_name="web"))
    >>>
    >>> async def handle_logged_out(event: LoggedOut) -> None:
    ...     print(f"Logged out of {event.guard_name}")
    >>>
    >>> event_bus.subscribe(LoggedOut, handle_logged_out)
"""

from collections.abc import Awaitable, Callable
from typing import Protocol

from src.domain.events.base_event import DomainEvent

# Type alias for event handler functions
EventHandler = Callable[[DomainEvent], Awaitable[None]]


class EventBusProtocol(Protocol):
    """Protocol for event bus implementations.

    Key Requirements:
        1. **Fail-open behavior**: One handler failure must NOT prevent other
           handlers from executing, and must NOT reach the publisher.
        2. **Async support**: All handlers are async.
        3. **Type routing**: Handlers registered for a specific event type
           only receive events of that exact type.
        4. **No ordering guarantees**: Handlers execute concurrently.

    Notes:
        - Event bus is an application-scoped singleton
        - Handlers are registered at application startup
    """

    def subscribe(
        self,
        event_type: type[DomainEvent],
        handler: EventHandler,
    ) -> None:
        """Register event handler for specific event type.

        Args:
            event_type: Class of event to handle. No inheritance matching.
            handler: Async function called with the event.
        """
        ...

    async def publish(self, event: DomainEvent) -> None:
        """Publish event to all registered handlers.

        Handler exceptions are logged but NOT propagated to the publisher.

        Args:
            event: Domain event to publish.
        """
        ...
