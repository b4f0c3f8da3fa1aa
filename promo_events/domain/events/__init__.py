"""Domain events module.

This module exports domain events, subscription tokens, and the handler type
alias for use throughout the application. Events decouple domain logic from
the consumers that react to state changes (views, notifications, analytics).

Usage:
    >>> from promo_events.domain.events import TaskCompleted
    >>>
    >>> event = TaskCompleted(
    ...     task_id=task_id,
    ...     completed_by="user-123",
    ...     completed_at=datetime.now(UTC),
    ... )
    >>> await event_bus.publish(event)
"""

from promo_events.domain.events.base_event import DomainEvent, NamedEvent
from promo_events.domain.events.subscription import EventHandler, Subscription
from promo_events.domain.events.task_events import (
    TaskAssigned,
    TaskCompleted,
    TaskPriorityEscalated,
    TaskReopened,
)

__all__ = [
    # Base
    "DomainEvent",
    "NamedEvent",
    # Subscriptions
    "EventHandler",
    "Subscription",
    # Task events
    "TaskAssigned",
    "TaskCompleted",
    "TaskPriorityEscalated",
    "TaskReopened",
]
