"""Infrastructure event implementations.

Event Bus:
    - InMemoryEventBus: Fail-open, in-process event bus

Event Handlers:
    - LoggingEventHandler: Structured logging for guard events
"""

from src.infrastructure.events.handlers import LoggingEventHandler
from src.infrastructure.events.in_memory_event_bus import InMemoryEventBus

__all__ = [
    "InMemoryEventBus",
    "LoggingEventHandler",
]
