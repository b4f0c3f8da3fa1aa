"""Infrastructure event implementations.

Event Bus:
    - InMemoryEventBus: Single-process event bus with fail-open behavior

Event Handlers (see handlers/):
    - LoggingEventHandler, NotificationEventHandler, AnalyticsEventHandler

Usage:
    >>> from promo_events.infrastructure.events import InMemoryEventBus
    >>>
    >>> event_bus = InMemoryEventBus(logger=logger)
    >>> subscription = event_bus.subscribe("TaskCompleted", on_completed)
"""

from promo_events.infrastructure.events.in_memory_event_bus import InMemoryEventBus

__all__ = [
    "InMemoryEventBus",
]
