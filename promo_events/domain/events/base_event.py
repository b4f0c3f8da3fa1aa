"""Base domain event class.

This module defines the foundational DomainEvent base class used by all domain
events in the system. Domain events represent "things that happened" and are
always named in past tense (e.g., TaskAssigned, TaskCompleted).

Architecture:
    - Frozen dataclass (immutable after creation)
    - Auto-generated event_id (UUID) for event tracking
    - occurred_at timestamp (UTC) for event ordering
    - Routing key declared per class in EVENT_TYPE, read via event_type

Usage:
    >>> from dataclasses import dataclass
    >>> from uuid import UUID
    >>>
    >>> @dataclass(frozen=True, kw_only=True, slots=True)
    >>> class OrderPlaced(DomainEvent):
    ...     EVENT_TYPE: ClassVar[str] = "OrderPlaced"
    ...     order_id: int
    >>>
    >>> event = OrderPlaced(order_id=42)
    >>> event.event_type
    'OrderPlaced'
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any, ClassVar
from uuid import UUID, uuid4


@dataclass(frozen=True, kw_only=True, slots=True)
class DomainEvent:
    """Base class for all domain events.

    Domain events are immutable records of facts that have occurred. The event
    bus routes them by their string event_type (exact match, no wildcards) and
    never inspects or mutates any other field.

    All domain events MUST:
        1. Inherit from this base class
        2. Use past tense naming (TaskCompleted, NOT CompleteTask)
        3. Be frozen dataclasses (immutable after creation)
        4. Use kw_only=True (force keyword arguments for clarity)
        5. Declare a non-empty EVENT_TYPE class constant

    Attributes:
        event_id: Unique identifier for this event instance. Auto-generated
            UUID v4 if not provided. Used for log correlation.
        occurred_at: Timestamp when the event occurred (UTC). Auto-generated
            if not provided.

    Design Decisions:
        - **Frozen dataclass**: Events are facts; facts don't change
        - **String routing key**: Subscribers register by name, not by import
        - **Class constant**: One event class = one routing key
    """

    EVENT_TYPE: ClassVar[str] = ""

    event_id: UUID = field(default_factory=uuid4)
    """Unique identifier for this event instance."""

    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    """Timestamp when the event occurred (UTC timezone)."""

    @property
    def event_type(self) -> str:
        """Routing key used by the event bus."""
        return self.EVENT_TYPE


@dataclass(frozen=True, kw_only=True, slots=True)
class NamedEvent(DomainEvent):
    """Ad-hoc event whose type is only known at runtime.

    Useful for integrations and view-layer notifications that don't warrant a
    dedicated class. The payload is opaque to the event bus.

    Attributes:
        name: Event type routing key (e.g., "PromotionSelected").
        payload: Arbitrary event data for handlers.

    Example:
        >>> event = NamedEvent(name="OrderPlaced", payload={"order_id": 42})
        >>> event.event_type
        'OrderPlaced'
    """

    name: str
    payload: Mapping[str, Any] = field(default_factory=dict)

    @property
    def event_type(self) -> str:
        """Routing key used by the event bus."""
        return self.name
