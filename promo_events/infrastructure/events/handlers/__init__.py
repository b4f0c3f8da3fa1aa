"""Event handlers wired to the event bus.

Handlers:
    - LoggingEventHandler: Structured logging with appropriate severity levels
    - NotificationEventHandler: Notification intents (stub - records and logs)
    - AnalyticsEventHandler: In-process task metrics and dashboard refreshes

Each handler exposes handle_<workflow_name> per event in EVENT_REGISTRY;
the container subscribes them automatically.
"""

from promo_events.infrastructure.events.handlers.analytics_event_handler import (
    AnalyticsEventHandler,
)
from promo_events.infrastructure.events.handlers.logging_event_handler import (
    LoggingEventHandler,
)
from promo_events.infrastructure.events.handlers.notification_event_handler import (
    Notification,
    NotificationEventHandler,
)

__all__ = [
    "AnalyticsEventHandler",
    "LoggingEventHandler",
    "Notification",
    "NotificationEventHandler",
]
