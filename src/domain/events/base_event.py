"""Base domain event class.

Domain events represent "things that happened" during authentication and are
always named in past tense (e.g., LoginSucceeded, LoggedOut).

Architecture:
    - Frozen dataclass (immutable after creation)
    - Auto-generated event_id (UUID) for event tracking
    - occurred_at timestamp (UTC) for event ordering
    - All events inherit from this base class

Usage:
    >>> @dataclass(frozen=True, kw_only=True)
    >>> class LoggedOut(DomainEvent):
    ...     guard_name: str
    >>>
    >>> event = LoggedOut(guard_name="web")
    >>> print(event.event_id)  # Auto-generated UUID
    >>> print(event.occurred_at)  # Auto-generated timestamp
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID, uuid4


@dataclass(frozen=True, kw_only=True, slots=True)
class DomainEvent:
    """Base class for all domain events.

    All domain events MUST:
        1. Inherit from this base class
        2. Use past tense naming (LoginSucceeded, NOT Login)
        3. Be frozen dataclasses (immutable after creation)
        4. Use kw_only=True (force keyword arguments for clarity)

    Attributes:
        event_id: Unique identifier for this event instance. Auto-generated
            UUID v4 if not provided.
        occurred_at: Timestamp when the event occurred (UTC). Auto-generated
            if not provided.

    Notes:
        - Events never carry secrets (passwords, token values)
        - For ATTEMPT events, publish BEFORE the operation
    """

    event_id: UUID = field(default_factory=uuid4)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC))
