"""Event bus protocol (port) for domain events.

This module defines the EventBusProtocol interface that all event bus
implementations must satisfy. The domain defines the port; infrastructure
provides the adapter.

Architecture:
    - Protocol (structural typing, NOT ABC inheritance)
    - Domain layer defines the interface (port)
    - Infrastructure layer implements adapters (in-memory)
    - Container (promo_events/core/container) provides factory function

Implementations:
    - InMemoryEventBus: promo_events/infrastructure/events/in_memory_event_bus.py

Usage:
    >>> from promo_events.core.container import get_event_bus
    >>>
    >>> event_bus = get_event_bus()
    >>>
    >>> # Subscribe handler (keep the token for teardown)
    >>> async def refresh_list(event: DomainEvent) -> None:
    ...     await view.reload()
    >>>
    >>> subscription = event_bus.subscribe("TaskCompleted", refresh_list)
    >>>
    >>> # Publish event
    >>> await event_bus.publish(TaskCompleted(...))
    >>>
    >>> # Teardown
    >>> subscription()
"""

from typing import Protocol

from promo_events.domain.events.base_event import DomainEvent
from promo_events.domain.events.subscription import EventHandler, Subscription

__all__ = ["EventBusProtocol", "EventHandler"]


class EventBusProtocol(Protocol):
    """Protocol for event bus implementations.

    The event bus uses the Publisher-Subscriber pattern:
        - Publishers: Aggregates and application services
        - Subscribers: Event handlers (logging, notification, analytics, views)
        - Event bus: Mediator that routes events to registered handlers

    Key Requirements:
        1. **Fail-open behavior**: One handler failure must NOT prevent other
           handlers from executing. Log errors but continue processing.
        2. **Sync and async handlers**: Awaitable results are awaited.
        3. **Exact routing**: Handlers receive only events whose event_type
           equals the type they subscribed under.
        4. **Registration order**: By default handlers run one at a time in the
           order they were subscribed.
        5. **Stable dispatch**: Subscribing or unsubscribing during a publish
           affects the next publish, never the one in flight.

    Methods:
        subscribe: Register handler, returning a Subscription token
        unsubscribe: Remove the registration behind a token
        publish: Publish event to all registered handlers
    """

    def subscribe(
        self,
        event_type: str | type[DomainEvent],
        handler: EventHandler,
    ) -> Subscription:
        """Register event handler for specific event type.

        Args:
            event_type: Event type name (e.g., "TaskCompleted") or an event
                class whose EVENT_TYPE is used.
            handler: Callable invoked with the event. Duplicates are allowed
                and fire once per registration.

        Returns:
            Subscription token. Calling it removes exactly this registration.

        Raises:
            InvalidEventTypeError: If event_type is empty or not a string.
        """
        ...

    def unsubscribe(self, subscription: Subscription) -> bool:
        """Remove the registration identified by subscription.

        Args:
            subscription: Token returned by subscribe().

        Returns:
            True if removed now, False if it was already gone (no error).
        """
        ...

    async def publish(self, event: DomainEvent) -> None:
        """Publish event to all registered handlers.

        Completes only after every handler has settled. Handler exceptions
        are logged but NOT propagated to the publisher.

        Args:
            event: Domain event to publish.

        Raises:
            InvalidEventTypeError: If event.event_type is empty or missing.
        """
        ...
